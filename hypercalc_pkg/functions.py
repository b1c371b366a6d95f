"""Closed table of the unary functions and constants an expression may use.

Every function is a numpy ufunc (or a composition of them), so a domain
error gives nan and an overflow gives inf instead of raising.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable

import numpy as np


class MathFunction(Enum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    ASINH = "asinh"
    ACOSH = "acosh"
    ATANH = "atanh"
    SQRT = "sqrt"
    CBRT = "cbrt"
    EXP = "exp"
    LOG = "log"
    LN = "ln"
    ABS = "abs"
    FLOOR = "floor"
    CEIL = "ceil"
    ROUND = "round"
    TRUNC = "trunc"
    SIGN = "sign"

    @classmethod
    def lookup(cls, name: str) -> MathFunction | None:
        """Return the function called ``name``, or None if there is none."""
        try:
            return cls(name)
        except ValueError:
            return None

    @property
    def takes_angle(self) -> bool:
        """True for the functions whose argument is affected by angle mode."""
        return self in ANGLE_FUNCTIONS

    def apply_array(self, operand: np.ndarray) -> np.ndarray:
        return _ARRAY[self](operand)


ANGLE_FUNCTIONS = frozenset({MathFunction.SIN, MathFunction.COS, MathFunction.TAN})

CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
}


def _round_half_up(values: np.ndarray) -> np.ndarray:
    return np.floor(values + 0.5)


_ARRAY: dict[MathFunction, Callable[[np.ndarray], np.ndarray]] = {
    MathFunction.SIN: np.sin,
    MathFunction.COS: np.cos,
    MathFunction.TAN: np.tan,
    MathFunction.ASIN: np.arcsin,
    MathFunction.ACOS: np.arccos,
    MathFunction.ATAN: np.arctan,
    MathFunction.SINH: np.sinh,
    MathFunction.COSH: np.cosh,
    MathFunction.TANH: np.tanh,
    MathFunction.ASINH: np.arcsinh,
    MathFunction.ACOSH: np.arccosh,
    MathFunction.ATANH: np.arctanh,
    MathFunction.SQRT: np.sqrt,
    MathFunction.CBRT: np.cbrt,
    MathFunction.EXP: np.exp,
    MathFunction.LOG: np.log10,
    MathFunction.LN: np.log,
    MathFunction.ABS: np.abs,
    MathFunction.FLOOR: np.floor,
    MathFunction.CEIL: np.ceil,
    MathFunction.ROUND: _round_half_up,
    MathFunction.TRUNC: np.trunc,
    MathFunction.SIGN: np.sign,
}
