"""Core equation solving module.

This module provides:
- The zero test shared by every comparison against zero
- Linear equation solving (a*x + b = 0)
- Quadratic equation solving (a*x^2 + b*x + c = 0) with degenerate cases
  delegated to the linear solver

Solvers are pure functions: they return the root count together with
optional root values and raise ValidationError for non-finite coefficients.
The public API (api.py) converts these into typed SolveResult objects.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple

from .config import ACCURACY
from .logging_config import get_logger
from .types import RootCount, SolverError, ValidationError

logger = get_logger("solver")


def is_zero(x: float) -> bool:
    """Return True if x is close enough to zero to be treated as zero."""
    return abs(x) < ACCURACY


def _require_finite(**coefficients: float) -> None:
    for name, value in coefficients.items():
        if not math.isfinite(value):
            raise ValidationError(
                f"Coefficient {name} must be a finite number, got {value!r}",
                code="NON_FINITE",
            )


def _check_overflow(what: str, *values: float) -> None:
    if not all(math.isfinite(v) for v in values):
        raise SolverError(f"{what} overflows double precision", code="OVERFLOW")


def solve_linear_equation(a: float, b: float) -> Tuple[RootCount, Optional[float]]:
    """Solve a linear equation of the form a*x + b = 0.

    Args:
        a: Coefficient of x
        b: Constant term

    Returns:
        Tuple of (root count, root). The root is None unless the count is ONE.

    Raises:
        ValidationError: If a coefficient is NaN or infinite
        SolverError: If the root overflows
    """
    _require_finite(a=a, b=b)

    if is_zero(a):
        if is_zero(b):
            return RootCount.INFINITE, None
        return RootCount.NONE, None
    x = -b / a
    _check_overflow("Root", x)
    return RootCount.ONE, x


def solve_square_equation(
    a: float, b: float, c: float
) -> Tuple[RootCount, Optional[float], Optional[float]]:
    """Solve a quadratic equation of the form a*x^2 + b*x + c = 0.

    Degenerate equations (a == 0) are solved as linear equations b*x + c = 0.
    When two roots exist they are computed with the cancellation-free form
    q = -(b + sign(b)*sqrt(d)) / 2, x1 = q / a, x2 = c / q, so their order
    carries no meaning.

    Args:
        a: Coefficient of x^2
        b: Coefficient of x
        c: Constant term

    Returns:
        Tuple of (root count, x1, x2). x1 is set for counts ONE and TWO,
        x2 only for TWO; unused slots are None.

    Raises:
        ValidationError: If a coefficient is NaN or infinite
        SolverError: If the discriminant or a root overflows
    """
    _require_finite(a=a, b=b, c=c)

    if is_zero(a):
        logger.debug("Leading coefficient is zero, solving %r*x + %r = 0", b, c)
        count, x = solve_linear_equation(b, c)
        return count, x, None

    if is_zero(c) and not is_zero(b):
        # x*(a*x + b) = 0; a is non-zero here so the linear factor always has a root
        logger.debug("Constant term is zero, factoring out x")
        _, x2 = solve_linear_equation(a, b)
        return RootCount.TWO, 0.0, x2

    d = b * b - 4 * a * c
    _check_overflow("Discriminant", d)
    if is_zero(d):
        x = -b / 2 / a
        _check_overflow("Root", x)
        return RootCount.ONE, x, None
    if d < 0:
        return RootCount.NONE, None, None

    sqrt_d = math.sqrt(d)
    q = (-b - sqrt_d) / 2 if b >= 0 else (-b + sqrt_d) / 2
    x1, x2 = q / a, c / q
    _check_overflow("Root", x1, x2)
    return RootCount.TWO, x1, x2
