"""Lexical analysis for calculator expressions.

The tokenizer is deliberately lenient: characters that do not belong to a
number, a lowercase identifier, an operator or a parenthesis are dropped
without complaint.
"""

from __future__ import annotations

from .config import GLYPH_REPLACEMENTS, IDENTIFIER_REGEX, NUMBER_REGEX, TOKEN_REGEX
from .types import (
    EvaluationError,
    Identifier,
    LeftParen,
    Number,
    Operator,
    RightParen,
    Token,
)


def normalize(expression: str) -> str:
    """Replace keypad glyphs (× and ÷) with their ASCII operators."""
    for glyph, replacement in GLYPH_REPLACEMENTS.items():
        expression = expression.replace(glyph, replacement)
    return expression


def split_lexemes(expression: str) -> list[str]:
    """Return the raw substrings recognised in the expression, in order.

    Examples:
        >>> split_lexemes("sin(30) + 2.5")
        ['sin', '(', '30', ')', '+', '2.5']
    """
    return TOKEN_REGEX.findall(expression)


def _make_token(lexeme: str) -> Token:
    if NUMBER_REGEX.match(lexeme):
        try:
            return Number(float(lexeme))
        except ValueError:
            raise EvaluationError(f"Malformed number: {lexeme}", code="BAD_NUMBER")
    if IDENTIFIER_REGEX.match(lexeme):
        return Identifier(lexeme)
    if lexeme == "(":
        return LeftParen()
    if lexeme == ")":
        return RightParen()
    return Operator(lexeme)


def tokenize(expression: str) -> list[Token]:
    """Turn an expression into a flat list of tokens.

    Args:
        expression: Raw expression text; × and ÷ are accepted

    Returns:
        Ordered list of Number, Identifier, Operator, LeftParen and
        RightParen tokens. Empty input gives an empty list.

    Raises:
        EvaluationError: If a run of digits and dots is not a valid number
    """
    return [_make_token(lexeme) for lexeme in split_lexemes(normalize(expression))]
