"""Exact verification of computed roots.

Residuals are evaluated with SymPy rationals built from the binary value of
each float, so the check itself adds no rounding error.
"""

from __future__ import annotations

from typing import Iterable

import sympy as sp

from .config import ACCURACY


def residual(a: float, b: float, c: float, x: float) -> sp.Rational:
    """Evaluate a*x^2 + b*x + c exactly.

    Args:
        a: Coefficient of x^2
        b: Coefficient of x
        c: Constant term
        x: Candidate root

    Returns:
        Exact rational value of the polynomial at x
    """
    ra, rb, rc, rx = (sp.Rational(v) for v in (a, b, c, x))
    return ra * rx**2 + rb * rx + rc


def roots_satisfy(
    a: float,
    b: float,
    c: float,
    roots: Iterable[float],
    tolerance: float = ACCURACY,
) -> bool:
    """Check that every root satisfies a*x^2 + b*x + c = 0.

    The tolerance is relative to the largest term of the polynomial at the
    root (and absolute below 1), since a float root of a badly scaled
    equation cannot do better than the rounding of its largest term.
    """
    for x in roots:
        scale = max(1.0, abs(a * x * x), abs(b * x), abs(c))
        if abs(residual(a, b, c, x)) > sp.Rational(tolerance) * sp.Rational(scale):
            return False
    return True


def reference_real_roots(a: float, b: float, c: float) -> list[float]:
    """Return the real roots of a*x^2 + b*x + c found by SymPy's nroots.

    Only meaningful for a non-zero leading coefficient.
    """
    x = sp.Symbol("x")
    poly = sp.Poly(sp.Rational(a) * x**2 + sp.Rational(b) * x + sp.Rational(c), x)
    return sorted(
        float(sp.re(r)) for r in poly.nroots() if abs(sp.im(r)) < ACCURACY
    )
