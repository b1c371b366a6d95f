"""The expression pipeline: text -> tokens -> postfix -> number."""

from __future__ import annotations

from .config import DEFAULT_ANGLE_MODE, MAX_INPUT_LENGTH
from .converter import PostfixElement, to_postfix
from .evaluator import evaluate
from .tokenizer import tokenize
from .types import AngleMode, EvaluationError


def compile_expression(
    expression: str, strict: bool | None = None
) -> list[PostfixElement]:
    """Tokenize and convert an expression into a postfix sequence.

    Raises:
        EvaluationError: If the input is too long or cannot be converted
    """
    if len(expression) > MAX_INPUT_LENGTH:
        raise EvaluationError(
            f"Input too long ({len(expression)} > {MAX_INPUT_LENGTH} characters)",
            code="TOO_LONG",
        )
    return to_postfix(tokenize(expression), strict=strict)


def calculate(
    expression: str,
    angle_mode: AngleMode | str | None = None,
    strict: bool | None = None,
) -> float:
    """Evaluate an expression, raising on any failure.

    Args:
        expression: Expression text (e.g., "2+3*4", "sin(90)")
        angle_mode: Angle mode for this call (default: config.DEFAULT_ANGLE_MODE)
        strict: Reject unbalanced parentheses

    Returns:
        The finite numeric result

    Raises:
        EvaluationError: Carrying a code that names the failure
    """
    mode = AngleMode.parse(angle_mode if angle_mode is not None else DEFAULT_ANGLE_MODE)
    return evaluate(compile_expression(expression, strict=strict), mode)
