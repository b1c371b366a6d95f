"""Sample an expression of ``x`` across pixel columns for plotting.

The expression is compiled once; the free variable is then bound for all
columns in a single array evaluation. Columns where the value is not finite
are skipped, leaving gaps in the curve.

Sampling runs synchronously. Callers on an interactive thread should keep
``width`` small enough not to stall it.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np

from .config import DEFAULT_ANGLE_MODE
from .engine import compile_expression
from .evaluator import evaluate_array
from .logging_config import get_logger
from .types import AngleMode, EvaluationError

logger = get_logger("sampling")


def column_values(width: int, scale: float) -> np.ndarray:
    """Return the x value under each pixel column 0..width-1.

    The y axis sits at column width/2 and ``scale`` is pixels per unit.
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")
    columns = np.arange(max(int(width), 0), dtype=float)
    return (columns - width / 2) / scale


def sample(
    expression: str,
    width: int,
    scale: float,
    angle_mode: AngleMode | str | None = None,
) -> Iterator[tuple[int, float]]:
    """Yield (pixel_x, value) pairs for every column with a finite value.

    Args:
        expression: Expression in the free variable x (e.g., "sin(x)")
        width: Number of pixel columns
        scale: Pixels per unit on the x axis
        angle_mode: Angle mode for trig functions (default: config value)

    Returns:
        Lazy iterator of pairs in increasing pixel_x order. An expression
        that cannot be compiled gives an empty iterator.

    Raises:
        ValueError: If scale is not positive
    """
    xs = column_values(width, scale)
    mode = AngleMode.parse(angle_mode if angle_mode is not None else DEFAULT_ANGLE_MODE)
    if xs.size == 0:
        return iter(())

    try:
        ys = evaluate_array(compile_expression(expression), mode, xs)
    except EvaluationError as e:
        logger.debug("No samples for %r: %s (%s)", expression, e, e.code)
        return iter(())

    return _finite_pairs(ys)


def _finite_pairs(ys: np.ndarray) -> Iterator[tuple[int, float]]:
    for pixel_x in np.flatnonzero(np.isfinite(ys)):
        yield int(pixel_x), float(ys[pixel_x])
