"""Startup self-test for the equation solvers.

The tables below are fixed cases run before the prompt is shown. Each case
prints one line, "Test <i> OK" or "Test <i> failed: ...", colored through
the active palette.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from .colors import Palette, PlainPalette
from .config import ACCURACY
from .logging_config import get_logger
from .solver import is_zero, solve_linear_equation, solve_square_equation
from .types import RootCount

logger = get_logger("selftest")


@dataclass(frozen=True)
class LinearCase:
    a: float
    b: float
    count: RootCount
    x: float = 0.0


@dataclass(frozen=True)
class SquareCase:
    a: float
    b: float
    c: float
    count: RootCount
    x1: float = 0.0
    x2: float = 0.0


LINEAR_CASES = (
    LinearCase(0, 0, RootCount.INFINITE),
    LinearCase(0, 0.000000002, RootCount.NONE),
    LinearCase(-0.000008, 1564615, RootCount.ONE, 195576875000),
    LinearCase(153, 0, RootCount.ONE, 0),
    LinearCase(8317.7897, 8317.7897, RootCount.ONE, -1),
    LinearCase(1024, 65536, RootCount.ONE, -64),
    LinearCase(99999.999, 11111.111, RootCount.ONE, -0.111111111),
)

SQUARE_CASES = (
    SquareCase(1, 0, 0, RootCount.ONE, 0),
    SquareCase(0, 0, 0, RootCount.INFINITE),
    SquareCase(1, 2, 1, RootCount.ONE, -1),
    SquareCase(1, 2, 2, RootCount.NONE),
    SquareCase(0.000000000001, 0.000000001, -0.0000000000000000000032, RootCount.ONE, 0),
    SquareCase(5632131312123.21, 213, -0.000000001, RootCount.TWO, 0, 0),
    SquareCase(7985651.64, 64.79880909, -7985716.43880909, RootCount.TWO, -1.000008114, 1),
)


def roots_match(actual: Optional[float], expected: float) -> bool:
    """Compare a computed root with an expected one.

    Values match when their difference is zero under ACCURACY. The relative
    fallback is only needed by the 195576875000 linear row, whose float root
    can miss the exact value by more than ACCURACY; every other row passes on
    the absolute test alone.
    """
    if actual is None:
        return False
    return is_zero(actual - expected) or math.isclose(actual, expected, rel_tol=ACCURACY)


def check_linear_case(case: LinearCase) -> Optional[str]:
    """Run one linear case. Returns a failure description or None on success."""
    count, x = solve_linear_equation(case.a, case.b)
    if count != case.count:
        return f"expected n={int(case.count)}, got {int(count)}"
    if count == RootCount.ONE and not roots_match(x, case.x):
        return f"expected x={case.x:f}, got {x:f}"
    return None


def check_square_case(case: SquareCase) -> Optional[str]:
    """Run one quadratic case. Returns a failure description or None on success."""
    count, x1, x2 = solve_square_equation(case.a, case.b, case.c)
    if count != case.count:
        return f"expected n={int(case.count)}, got {int(count)}"
    if count == RootCount.ONE and not roots_match(x1, case.x1):
        return f"expected x1={case.x1:f}, got {x1:f}"
    if count == RootCount.TWO:
        # root order is not meaningful
        straight = roots_match(x1, case.x1) and roots_match(x2, case.x2)
        swapped = roots_match(x2, case.x1) and roots_match(x1, case.x2)
        if not (straight or swapped):
            return f"expected x1,x2={case.x1:f},{case.x2:f}, got {x1:f},{x2:f}"
    return None


def _run_table(
    cases: tuple,
    check: Callable[..., Optional[str]],
    palette: Palette,
    out: Optional[TextIO],
    title: str,
) -> int:
    failures = 0
    for i, case in enumerate(cases):
        problem = check(case)
        if problem is None:
            line = palette.ok(f"Test {i} OK")
        else:
            failures += 1
            logger.warning("%s self-test %d failed: %s", title, i, problem)
            line = palette.error(f"Test {i} failed: {problem}")
        if out is not None:
            print(line, file=out)
    return failures


def run_linear_self_test(palette: Palette | None = None, out: Optional[TextIO] = None) -> int:
    """Run the linear solver table. Returns the number of failed cases."""
    return _run_table(LINEAR_CASES, check_linear_case, palette or PlainPalette(), out, "Linear")


def run_square_self_test(palette: Palette | None = None, out: Optional[TextIO] = None) -> int:
    """Run the quadratic solver table. Returns the number of failed cases."""
    return _run_table(SQUARE_CASES, check_square_case, palette or PlainPalette(), out, "Quadratic")


def run_self_test(palette: Palette | None = None, out: Optional[TextIO] = None) -> int:
    """Run both tables, linear first. Returns the total number of failed cases."""
    return run_linear_self_test(palette, out) + run_square_self_test(palette, out)
