"""Interactive calculator state: angle mode, history and chained input."""

from __future__ import annotations

from typing import Iterator

from .api import solve
from .config import DEFAULT_ANGLE_MODE, FREE_VARIABLE
from .formatting import to_literal
from .logging_config import get_logger
from .sampling import sample
from .types import AngleMode, EvalResult

logger = get_logger("session")

CHAIN_OPERATORS = ("+", "-", "*", "/", "^", "×", "÷")


class CalculatorSession:
    """State a calculator front end keeps between calculations.

    The session owns the angle mode and hands it to the engine on every
    call. History lives in memory only.
    """

    def __init__(self, angle_mode: AngleMode | str | None = None):
        self.angle_mode = AngleMode.parse(
            angle_mode if angle_mode is not None else DEFAULT_ANGLE_MODE
        )
        self.history: list[str] = []
        self.last_value: float | None = None

    def set_angle_mode(self, angle_mode: AngleMode | str) -> AngleMode:
        self.angle_mode = AngleMode.parse(angle_mode)
        logger.info("Angle mode set to %s", self.angle_mode.name)
        return self.angle_mode

    def toggle_angle_mode(self) -> AngleMode:
        return self.set_angle_mode(self.angle_mode.toggled())

    def expand_chain(self, expression: str) -> str:
        """Prefix the previous result when input starts with an operator.

        Examples:
            After a result of 4, "*2" becomes "4*2".
        """
        stripped = expression.lstrip()
        if self.last_value is not None and stripped.startswith(CHAIN_OPERATORS):
            return to_literal(self.last_value) + stripped
        return expression

    def evaluate(self, expression: str) -> EvalResult:
        """Evaluate input, record it in history and remember the value.

        A failed or empty evaluation clears the remembered value, so the
        next operator-led input is not chained.
        """
        expression = self.expand_chain(expression)
        result = solve(expression, self.angle_mode)
        if result.is_empty:
            self.last_value = None
            return result
        shown = result.result if result.ok else result.error
        self.history.append(f"{expression.strip()} = {shown}")
        self.last_value = result.value if result.ok else None
        return result

    def sample(
        self, expression: str, width: int, scale: float
    ) -> Iterator[tuple[int, float]]:
        """Sample a graph of ``expression`` with the session's angle mode.

        Raises:
            ValueError: If the expression does not mention the free variable
        """
        if FREE_VARIABLE not in expression:
            raise ValueError(
                f"Enter an expression with '{FREE_VARIABLE}' (e.g. sin({FREE_VARIABLE}))"
            )
        return sample(expression, width, scale, self.angle_mode)

    def clear(self) -> None:
        """Forget the history and the last result."""
        self.history.clear()
        self.last_value = None
