"""Property checks for the solvers, seeded from the startup self-test tables."""

import random

import pytest

from quadsolver_pkg.config import ACCURACY
from quadsolver_pkg.selftest import LINEAR_CASES, SQUARE_CASES, roots_match
from quadsolver_pkg.solver import is_zero, solve_linear_equation, solve_square_equation
from quadsolver_pkg.types import RootCount
from quadsolver_pkg.verify import roots_satisfy


class TestLinearProperties:
    """Test a*x + b = 0 invariants."""

    @pytest.mark.parametrize("case", LINEAR_CASES)
    def test_table_case(self, case):
        count, x = solve_linear_equation(case.a, case.b)
        assert count == case.count
        if count == RootCount.ONE:
            assert roots_match(x, case.x)
        else:
            assert x is None

    @pytest.mark.parametrize("a", [0.0, 5e-10, -9.9e-10])
    @pytest.mark.parametrize("b", [0.0, 1e-10, -5e-10])
    def test_zero_slope_zero_constant_is_infinite(self, a, b):
        assert solve_linear_equation(a, b) == (RootCount.INFINITE, None)

    @pytest.mark.parametrize("a", [0.0, 5e-10, -9.9e-10])
    @pytest.mark.parametrize("b", [1.0, -2e-9, 1564615.0])
    def test_zero_slope_nonzero_constant_has_no_root(self, a, b):
        assert solve_linear_equation(a, b) == (RootCount.NONE, None)

    def test_root_satisfies_equation(self):
        rng = random.Random(121)
        for _ in range(500):
            a = rng.uniform(-1e4, 1e4)
            b = rng.uniform(-1e4, 1e4)
            if is_zero(a):
                continue
            count, x = solve_linear_equation(a, b)
            assert count == RootCount.ONE
            assert abs(a * x + b) <= ACCURACY * max(1.0, abs(b))


class TestSquareProperties:
    """Test a*x^2 + b*x + c = 0 invariants."""

    @pytest.mark.parametrize("case", SQUARE_CASES)
    def test_table_case(self, case):
        count, x1, x2 = solve_square_equation(case.a, case.b, case.c)
        assert count == case.count
        if count == RootCount.ONE:
            assert roots_match(x1, case.x1)
            assert x2 is None
        elif count == RootCount.TWO:
            assert sorted([x1, x2]) == pytest.approx(sorted([case.x1, case.x2]), abs=ACCURACY)
        else:
            assert (x1, x2) == (None, None)

    @pytest.mark.parametrize("case", SQUARE_CASES)
    def test_table_roots_satisfy_equation(self, case):
        count, x1, x2 = solve_square_equation(case.a, case.b, case.c)
        roots = [r for r in (x1, x2) if r is not None]
        assert roots_satisfy(case.a, case.b, case.c, roots)

    def test_integer_roots_recovered_exactly(self):
        rng = random.Random(2024)
        for _ in range(300):
            r1 = rng.randint(-50, 50)
            r2 = rng.randint(-50, 50)
            k = rng.randint(1, 20)
            a, b, c = k, -k * (r1 + r2), k * r1 * r2
            count, x1, x2 = solve_square_equation(a, b, c)
            if r1 == r2:
                assert count == RootCount.ONE
                assert x1 == pytest.approx(r1, abs=ACCURACY)
            else:
                assert count == RootCount.TWO
                assert sorted([x1, x2]) == pytest.approx(sorted([r1, r2]), abs=ACCURACY)

    def test_random_roots_satisfy_equation(self):
        rng = random.Random(7)
        for _ in range(500):
            a, b, c = (rng.uniform(-1e3, 1e3) for _ in range(3))
            count, x1, x2 = solve_square_equation(a, b, c)
            roots = [r for r in (x1, x2) if r is not None]
            assert len(roots) == {RootCount.NONE: 0, RootCount.ONE: 1, RootCount.TWO: 2}[count]
            assert roots_satisfy(a, b, c, roots)

    def test_root_labels_are_interchangeable(self):
        # mirrored equation a*x^2 - b*x + c has the negated roots
        count, x1, x2 = solve_square_equation(3, 7, -6)
        mirrored_count, y1, y2 = solve_square_equation(3, -7, -6)
        assert count == mirrored_count == RootCount.TWO
        assert sorted([x1, x2]) == pytest.approx(sorted([-y1, -y2]))
