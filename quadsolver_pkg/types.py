"""Type definitions and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any


class RootCount(IntEnum):
    """Number of real roots found by a solver."""

    NONE = 0
    ONE = 1
    TWO = 2
    INFINITE = 4  # every real number is a root


class InputStatus(Enum):
    """Outcome of reading coefficients from an input stream."""

    CORRECT = "correct"
    INCORRECT = "incorrect"
    END = "end"
    CLOSE = "close"


@dataclass
class SolveResult:
    """Result of solving a linear or quadratic equation."""

    ok: bool
    count: RootCount | None = None
    roots: tuple[float, ...] = ()
    error: str | None = None
    code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.count is not None:
            result_dict["count"] = self.count.name.lower()
            result_dict["roots"] = list(self.roots)
        if self.error is not None:
            result_dict["error"] = self.error
        if self.code is not None:
            result_dict["code"] = self.code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"SolveResult(ok=False, code={self.code!r}, error={self.error!r})"
        return f"SolveResult(ok=True, count={self.count!r}, roots={self.roots!r})"


@dataclass
class ReadResult:
    """Result of reading three coefficients from input."""

    status: InputStatus
    coefficients: tuple[float, float, float] | None = None

    @property
    def ok(self) -> bool:
        return self.status is InputStatus.CORRECT


class ValidationError(Exception):
    """Raised when solver preconditions are violated."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ParseError(Exception):
    """Raised when coefficient input cannot be parsed."""

    def __init__(self, message: str, code: str = "PARSE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class SolverError(Exception):
    """Raised when finite coefficients lead to a non-finite intermediate value."""

    def __init__(self, message: str, code: str = "SOLVER_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
