"""Public API for Quadsolver - returns structured objects without side effects."""

from __future__ import annotations

from .reader import parse_coefficients
from .solver import solve_linear_equation, solve_square_equation
from .types import ParseError, RootCount, SolveResult, SolverError, ValidationError


def _roots(count: RootCount, *values: float | None) -> tuple[float, ...]:
    if count == RootCount.TWO:
        return tuple(v for v in values[:2] if v is not None)
    if count == RootCount.ONE:
        return tuple(v for v in values[:1] if v is not None)
    return ()


def solve_linear(a: float, b: float) -> SolveResult:
    """Solve a*x + b = 0.

    Args:
        a: Coefficient of x
        b: Constant term

    Returns:
        SolveResult with the root count and roots, or ok=False with
        code "NON_FINITE" if a coefficient is NaN or infinite, or
        "OVERFLOW" if the root exceeds double range

    Example:
        >>> from quadsolver_pkg.api import solve_linear
        >>> solve_linear(2, -4).roots
        (2.0,)
    """
    try:
        count, x = solve_linear_equation(a, b)
    except (ValidationError, SolverError) as e:
        return SolveResult(ok=False, error=e.message, code=e.code)
    return SolveResult(ok=True, count=count, roots=_roots(count, x))


def solve_quadratic(a: float, b: float, c: float) -> SolveResult:
    """Solve a*x^2 + b*x + c = 0.

    Args:
        a: Coefficient of x^2
        b: Coefficient of x
        c: Constant term

    Returns:
        SolveResult with the root count and roots, or ok=False with
        code "NON_FINITE" if a coefficient is NaN or infinite, or
        "OVERFLOW" if the discriminant or a root exceeds double range

    Example:
        >>> from quadsolver_pkg.api import solve_quadratic
        >>> result = solve_quadratic(1, -3, 2)
        >>> sorted(result.roots)
        [1.0, 2.0]
    """
    try:
        count, x1, x2 = solve_square_equation(a, b, c)
    except (ValidationError, SolverError) as e:
        return SolveResult(ok=False, error=e.message, code=e.code)
    return SolveResult(ok=True, count=count, roots=_roots(count, x1, x2))


def solve_text(text: str) -> SolveResult:
    """Parse "a b c" and solve the quadratic equation.

    Args:
        text: Whitespace-delimited coefficients (e.g., "1 -3 2")

    Returns:
        SolveResult; parse failures are reported with ok=False and the
        parser's error code
    """
    try:
        a, b, c = parse_coefficients(text)
    except ParseError as e:
        return SolveResult(ok=False, error=e.message, code=e.code)
    return solve_quadratic(a, b, c)
