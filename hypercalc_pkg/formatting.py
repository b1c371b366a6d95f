"""Result formatting: decimal display, chainable literals and exact-form hints."""

from __future__ import annotations

import math
import re
from typing import Any

import numpy as np
import sympy as sp

from . import config
from .config import EXACT_FORM_MAX_LENGTH, EXACT_FORM_TOLERANCE

# sympy prints Euler's number as E; the tokenizer only reads lowercase names
_EULER = re.compile(r"\bE\b")


def format_number(val: Any, precision: int | None = None) -> str:
    """Format a numeric value with specified precision.

    Args:
        val: Numeric value to format
        precision: Number of significant digits (default: config.OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    try:
        value = float(val)
    except (ValueError, TypeError, OverflowError):
        return str(val)
    if value == 0:
        # Avoid displaying "-0"
        return "0"
    return "{:.{}g}".format(value, int(precision))


def to_literal(value: float) -> str:
    """Write a number so the tokenizer reads it back unchanged.

    Positional notation only (no exponent, which would tokenize as the
    constant e), and negatives as ``(0-n)`` since there is no unary minus.

    Examples:
        >>> to_literal(4.0)
        '4'
        >>> to_literal(-2.5)
        '(0-2.5)'
    """
    text = np.format_float_positional(abs(value), trim="-")
    if value < 0:
        return f"(0-{text})"
    return text


def to_calculator_syntax(expr: sp.Expr) -> str:
    """Print a sympy expression so the calculator can read it back.

    Examples:
        >>> to_calculator_syntax(sp.pi**2 / 7)
        'pi^2/7'
    """
    text = sp.sstr(expr).replace("**", "^")
    return _EULER.sub("e", text)


def exact_form(value: float) -> str | None:
    """Suggest a short exact form for a decimal result.

    Uses sympy.nsimplify against pi and e. Returns None when the value is
    an integer, when nothing short enough is found, or when the exact form
    would read the same as the decimal one. A non-zero value is never
    reported as exactly 0.

    Examples:
        >>> exact_form(0.5)
        '1/2'
        >>> exact_form(3.141592653589793)
        'pi'
    """
    if not math.isfinite(value) or float(value).is_integer():
        return None
    try:
        candidate = sp.nsimplify(
            value, [sp.pi, sp.E], tolerance=EXACT_FORM_TOLERANCE, rational=False
        )
    except (ValueError, TypeError, sp.SympifyError):
        return None
    if candidate.is_Float or candidate.is_zero:
        return None
    text = to_calculator_syntax(candidate)
    if len(text) > EXACT_FORM_MAX_LENGTH:
        return None
    if abs(float(candidate) - value) > EXACT_FORM_TOLERANCE * abs(value):
        return None
    return text
