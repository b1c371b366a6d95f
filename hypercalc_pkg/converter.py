"""Infix to postfix conversion (shunting-yard).

Postfix elements are floats (literals), operator symbols, MathFunction
members and Variable placeholders for the free variable.
"""

from __future__ import annotations

from typing import Sequence, Union

from . import config
from .config import FREE_VARIABLE
from .functions import CONSTANTS, MathFunction
from .logging_config import get_logger
from .types import (
    Associativity,
    EvaluationError,
    Identifier,
    LeftParen,
    Number,
    Operator,
    RightParen,
    Token,
    Variable,
)

logger = get_logger("converter")

PostfixElement = Union[float, str, MathFunction, Variable]

# "(" has rank 0 so comparison never pops it; only ")" removes it
PRECEDENCE: dict[str, int] = {"^": 4, "*": 3, "/": 3, "+": 2, "-": 2, "(": 0}

ASSOCIATIVITY: dict[str, Associativity] = {
    "^": Associativity.RIGHT,
    "*": Associativity.LEFT,
    "/": Associativity.LEFT,
    "+": Associativity.LEFT,
    "-": Associativity.LEFT,
}

_OPEN = "("


def _should_pop(top: object, symbol: str) -> bool:
    if not isinstance(top, str) or top == _OPEN:
        return False
    top_rank = PRECEDENCE[top]
    rank = PRECEDENCE[symbol]
    if top_rank > rank:
        return True
    return top_rank == rank and ASSOCIATIVITY[symbol] is Associativity.LEFT


def to_postfix(
    tokens: Sequence[Token], strict: bool | None = None
) -> list[PostfixElement]:
    """Convert an infix token sequence into postfix order.

    Args:
        tokens: Tokens produced by tokenizer.tokenize
        strict: Raise on unbalanced parentheses instead of tolerating them
            (default: config.STRICT_PARENTHESES)

    Returns:
        Postfix sequence ready for the evaluator

    Raises:
        EvaluationError: For identifiers that are neither a function, a
            constant nor the free variable, and for unbalanced parentheses
            in strict mode
    """
    if strict is None:
        strict = config.STRICT_PARENTHESES

    output: list[PostfixElement] = []
    stack: list[Union[str, MathFunction]] = []

    for token in tokens:
        if isinstance(token, Number):
            output.append(token.value)
        elif isinstance(token, Identifier):
            function = MathFunction.lookup(token.name)
            if function is not None:
                stack.append(function)
            elif token.name in CONSTANTS:
                output.append(CONSTANTS[token.name])
            elif token.name == FREE_VARIABLE:
                output.append(Variable(token.name))
            else:
                raise EvaluationError(
                    f"Unknown identifier: {token.name}", code="UNKNOWN_IDENTIFIER"
                )
        elif isinstance(token, LeftParen):
            stack.append(_OPEN)
        elif isinstance(token, RightParen):
            while stack and stack[-1] != _OPEN:
                output.append(stack.pop())
            if stack:
                stack.pop()
            elif strict:
                raise EvaluationError(
                    "Unmatched closing parenthesis", code="UNBALANCED_PARENTHESES"
                )
            else:
                logger.debug("Unmatched ')' ignored")
            if stack and isinstance(stack[-1], MathFunction):
                output.append(stack.pop())
        elif isinstance(token, Operator):
            while stack and _should_pop(stack[-1], token.symbol):
                output.append(stack.pop())
            stack.append(token.symbol)

    while stack:
        entry = stack.pop()
        if entry == _OPEN:
            if strict:
                raise EvaluationError(
                    "Unmatched opening parenthesis", code="UNBALANCED_PARENTHESES"
                )
            logger.debug("Unmatched '(' flushed at end of input")
            continue
        output.append(entry)

    return output
