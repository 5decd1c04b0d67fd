"""Test that API functions return typed dataclasses."""

import json

from quadsolver_pkg.api import solve_linear, solve_quadratic, solve_text
from quadsolver_pkg.types import RootCount, SolveResult


class TestAPITypedReturns:
    """Test that all API functions return SolveResult."""

    def test_solve_linear_returns_solve_result(self):
        result = solve_linear(2, -4)
        assert isinstance(result, SolveResult)
        assert result.ok is True
        assert result.count == RootCount.ONE
        assert result.roots == (2.0,)

    def test_solve_linear_identity_has_no_roots_listed(self):
        result = solve_linear(0, 0)
        assert result.count == RootCount.INFINITE
        assert result.roots == ()

    def test_solve_linear_invalid_input(self):
        result = solve_linear(float("inf"), 1)
        assert isinstance(result, SolveResult)
        assert result.ok is False
        assert result.code == "NON_FINITE"
        assert result.count is None

    def test_solve_quadratic_two_roots(self):
        result = solve_quadratic(1, -3, 2)
        assert result.ok is True
        assert result.count == RootCount.TWO
        assert sorted(result.roots) == [1.0, 2.0]

    def test_solve_quadratic_one_root_only_fills_first(self):
        result = solve_quadratic(1, 2, 1)
        assert result.count == RootCount.ONE
        assert result.roots == (-1.0,)

    def test_solve_quadratic_no_roots(self):
        result = solve_quadratic(1, 2, 2)
        assert result.ok is True
        assert result.count == RootCount.NONE
        assert result.roots == ()

    def test_solve_quadratic_invalid_input(self):
        result = solve_quadratic(1, float("nan"), 1)
        assert result.ok is False
        assert result.code == "NON_FINITE"
        assert "Coefficient b" in result.error

    def test_solve_text(self):
        result = solve_text("0 0 0")
        assert result.ok is True
        assert result.count == RootCount.INFINITE

    def test_solve_text_parse_error(self):
        result = solve_text("1 2")
        assert result.ok is False
        assert result.code == "INCORRECT_INPUT"

    def test_to_dict_is_json_serializable(self):
        data = json.loads(json.dumps(solve_quadratic(2, 4, 0).to_dict()))
        assert data == {"ok": True, "count": "two", "roots": [0.0, -2.0]}

    def test_error_to_dict(self):
        data = solve_linear(float("nan"), 0).to_dict()
        assert data["ok"] is False
        assert data["code"] == "NON_FINITE"
        assert "count" not in data

    def test_repr(self):
        assert "count=" in repr(solve_quadratic(1, 0, -1))
        assert "ok=False" in repr(solve_linear(float("nan"), 0))

    def test_solve_quadratic_overflow(self):
        result = solve_quadratic(1e200, 1e200, 1e200)
        assert result.ok is False
        assert result.code == "OVERFLOW"
        assert result.count is None

    def test_overflow_to_dict_is_strict_json(self):
        text = json.dumps(solve_quadratic(1e200, 1e200, 1e200).to_dict(), allow_nan=False)
        assert json.loads(text)["code"] == "OVERFLOW"
