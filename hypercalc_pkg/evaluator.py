"""Postfix evaluation with angle-mode aware trigonometry.

Arithmetic follows IEEE-754: division by zero and overflow give inf, domain
errors give nan, and none of them stop the evaluation. ``evaluate_array``
runs a postfix sequence over a numpy array of free-variable values and
leaves non-finite entries for the caller to mask. ``evaluate`` is the same
machine over a single value and fails only when the final result is not
finite, so a calculation and a sampled curve always agree.
"""

from __future__ import annotations

import math
from typing import Callable, Sequence

import numpy as np

from .converter import PostfixElement
from .functions import MathFunction
from .types import AngleMode, EvaluationError, Variable

_DEGREES_TO_RADIANS = math.pi / 180

_ARRAY_OPS: dict[str, Callable[[np.ndarray, np.ndarray], np.ndarray]] = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.divide,
    "^": np.power,
}


def _pop(stack: list, element: object):
    if not stack:
        raise EvaluationError(
            f"Missing operand for {element}", code="STACK_UNDERFLOW"
        )
    return stack.pop()


def _single_result(stack: list):
    if not stack:
        raise EvaluationError("Nothing to evaluate", code="EMPTY_EXPRESSION")
    if len(stack) > 1:
        raise EvaluationError(
            f"{len(stack)} values left without an operator",
            code="LEFTOVER_OPERANDS",
        )
    return stack[0]


def evaluate(
    postfix: Sequence[PostfixElement],
    angle_mode: AngleMode,
    x: float | None = None,
) -> float:
    """Evaluate a postfix sequence to a single finite number.

    Args:
        postfix: Sequence from converter.to_postfix
        angle_mode: Unit for sin, cos and tan arguments
        x: Value bound to the free variable, if any

    Returns:
        The finite result

    Raises:
        EvaluationError: On stack underflow, leftover operands, an unbound
            free variable, or a final result that is infinite or nan
    """
    if x is None:
        for element in postfix:
            if isinstance(element, Variable):
                raise EvaluationError(
                    f"Variable '{element.name}' has no value",
                    code="UNBOUND_VARIABLE",
                )

    bound = np.array([np.nan if x is None else x], dtype=float)
    result = float(evaluate_array(postfix, angle_mode, bound)[0])
    if not math.isfinite(result):
        raise EvaluationError(f"Result is not finite: {result}", code="NON_FINITE")
    return result


def evaluate_array(
    postfix: Sequence[PostfixElement],
    angle_mode: AngleMode,
    xs: np.ndarray,
) -> np.ndarray:
    """Evaluate a postfix sequence for every value in ``xs`` at once.

    Division by zero and domain errors produce inf or nan entries rather
    than exceptions.

    Raises:
        EvaluationError: If the sequence itself is malformed
    """
    use_degrees = AngleMode.parse(angle_mode) is AngleMode.DEG
    xs = np.asarray(xs, dtype=float)
    stack: list[np.ndarray] = []

    with np.errstate(all="ignore"):
        for element in postfix:
            if isinstance(element, Variable):
                stack.append(xs)
            elif isinstance(element, MathFunction):
                operand = _pop(stack, element.value)
                if use_degrees and element.takes_angle:
                    operand = operand * _DEGREES_TO_RADIANS
                stack.append(element.apply_array(operand))
            elif isinstance(element, str):
                right = _pop(stack, element)
                left = _pop(stack, element)
                stack.append(_ARRAY_OPS[element](left, right))
            else:
                stack.append(np.full(xs.shape, float(element)))

    return np.broadcast_to(_single_result(stack), xs.shape)
