"""Type definitions: tokens, angle mode, result dataclasses and errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class AngleMode(Enum):
    """Unit in which trigonometric arguments are interpreted."""

    DEG = "deg"
    RAD = "rad"

    @classmethod
    def parse(cls, value: AngleMode | str) -> AngleMode:
        """Accept an AngleMode or its name/value in any letter case."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for mode in cls:
            if text in (mode.value, mode.name.lower()):
                return mode
        raise ValueError(f"Unknown angle mode: {value!r}")

    def toggled(self) -> AngleMode:
        return AngleMode.RAD if self is AngleMode.DEG else AngleMode.DEG


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class Operator:
    symbol: str


@dataclass(frozen=True)
class LeftParen:
    pass


@dataclass(frozen=True)
class RightParen:
    pass


Token = Union[Number, Identifier, Operator, LeftParen, RightParen]


@dataclass(frozen=True)
class Variable:
    """Placeholder for the free variable inside a postfix sequence."""

    name: str


class EvaluationError(Exception):
    """Raised when an expression cannot be converted or evaluated."""

    def __init__(self, message: str, code: str = "EVALUATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


@dataclass
class EvalResult:
    """Result of evaluating an expression.

    A successful result with no value is the "nothing entered" state,
    which is distinct from a failed evaluation.
    """

    ok: bool
    value: float | None = None
    result: str | None = None
    exact: str | None = None
    error: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.ok and self.value is None and self.result is None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.value is not None:
            result_dict["value"] = self.value
        if self.result is not None:
            result_dict["result"] = self.result
        if self.exact is not None:
            result_dict["exact"] = self.exact
        if self.error is not None:
            result_dict["error"] = self.error
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r})"
        parts = [f"ok={self.ok}"]
        if self.value is not None:
            parts.append(f"value={self.value!r}")
        if self.result is not None:
            parts.append(f"result={self.result!r}")
        if self.exact is not None:
            parts.append(f"exact={self.exact!r}")
        return f"EvalResult({', '.join(parts)})"


@dataclass
class SampleResult:
    """Result of sampling an expression over pixel columns."""

    ok: bool
    points: list[tuple[int, float]] | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.points is not None:
            result_dict["points"] = [[px, y] for px, y in self.points]
        if self.error is not None:
            result_dict["error"] = self.error
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return f"SampleResult(ok=False, error={self.error!r})"
        count = len(self.points) if self.points is not None else 0
        return f"SampleResult(ok=True, points=<{count} points>)"
