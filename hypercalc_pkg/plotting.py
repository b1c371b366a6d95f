"""Render sampled curves as ASCII text or as a PNG image."""

from __future__ import annotations

import math
import tempfile
from typing import Iterable

import numpy as np

try:
    # Set non-GUI backend before importing pyplot to avoid Tkinter issues
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False

from .config import (
    ASCII_PLOT_HEIGHT,
    ASCII_PLOT_SCALE,
    ASCII_PLOT_WIDTH,
    DEFAULT_ANGLE_MODE,
    FREE_VARIABLE,
    IMAGE_HEIGHT,
    IMAGE_WIDTH,
    PLOT_SCALE,
)
from .logging_config import get_logger
from .sampling import column_values, sample
from .types import AngleMode, EvalResult

logger = get_logger("plotting")


def to_row(value: float, height: int, scale: float) -> float:
    """Map a function value to a vertical position, 0 at the top edge."""
    return height / 2 - value * scale


def render_ascii(
    points: Iterable[tuple[int, float]], width: int, height: int, scale: float
) -> str:
    """Draw sampled points on a character grid with axes through the centre.

    Args:
        points: (column, value) pairs from sampling.sample
        width: Number of columns
        height: Number of rows
        scale: Characters per unit on both axes

    Returns:
        The grid as newline-joined rows
    """
    axis_row = height // 2
    axis_col = width // 2
    grid = []
    for r in range(height):
        if r == axis_row:
            line = ["-"] * width
            if 0 <= axis_col < width:
                line[axis_col] = "+"
        else:
            line = [" "] * width
            if 0 <= axis_col < width:
                line[axis_col] = "|"
        grid.append(line)

    for column, value in points:
        position = to_row(value, height, scale)
        if not math.isfinite(position):
            continue
        row = math.floor(position)
        if 0 <= row < height and 0 <= column < width:
            grid[row][column] = "*"

    return "\n".join("".join(line) for line in grid)


def _save_png(
    expression: str,
    points: list[tuple[int, float]],
    width: int,
    height: int,
    scale: float,
    output: str | None,
) -> str:
    xs = column_values(width, scale)
    ys = np.full(xs.shape, np.nan)
    for column, value in points:
        ys[column] = value

    dpi = 100
    fig, ax = plt.subplots(figsize=(width / dpi, height / dpi), dpi=dpi)
    try:
        ax.plot(xs, ys, linewidth=2, color="#fa8231", label=f"y = {expression}")
        ax.set_xlim(-width / 2 / scale, width / 2 / scale)
        ax.set_ylim(-height / 2 / scale, height / 2 / scale)
        ax.axhline(y=0, color="#444444", linewidth=1)
        ax.axvline(x=0, color="#444444", linewidth=1)
        ax.grid(True, alpha=0.3, linestyle="--")
        ax.legend(loc="best", fontsize=9)
        fig.tight_layout()

        if output is None:
            with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as temp_file:
                output = temp_file.name
        fig.savefig(output, dpi=dpi)
    finally:
        plt.close(fig)
    return output


def plot_function(
    expression: str,
    width: int | None = None,
    height: int | None = None,
    scale: float | None = None,
    angle_mode: AngleMode | str | None = None,
    ascii: bool = False,
    output: str | None = None,
) -> EvalResult:
    """Plot an expression of x.

    The curve is sampled once per column; columns where the expression has
    no finite value are left empty.

    Args:
        expression: Expression in x (e.g., "sin(x)", "x^2")
        width: Columns (characters for ASCII, pixels for PNG)
        height: Rows (characters for ASCII, pixels for PNG)
        scale: Columns per unit (default depends on the output kind)
        angle_mode: "deg" or "rad" (default: config.DEFAULT_ANGLE_MODE)
        ascii: If True, return ASCII plot text; if False, write a PNG
        output: PNG path (default: a new temporary file)

    Returns:
        EvalResult with:
        - ok=True: result holds the ASCII plot or the PNG path
        - ok=False: error describes why nothing was plotted

    Examples:
        >>> from hypercalc_pkg.plotting import plot_function
        >>> result = plot_function("sin(x)", angle_mode="rad", ascii=True)
        >>> print(result.result)  # ASCII plot text
    """
    if FREE_VARIABLE not in expression:
        return EvalResult(
            ok=False,
            error=f"Enter an expression with '{FREE_VARIABLE}' (e.g. sin({FREE_VARIABLE}))",
        )
    if not ascii and not HAS_MATPLOTLIB:
        return EvalResult(
            ok=False, error="matplotlib not installed. Use ascii=True for ASCII plot."
        )

    if ascii:
        width = width or ASCII_PLOT_WIDTH
        height = height or ASCII_PLOT_HEIGHT
        scale = scale or ASCII_PLOT_SCALE
    else:
        width = width or IMAGE_WIDTH
        height = height or IMAGE_HEIGHT
        scale = scale or PLOT_SCALE
    mode = AngleMode.parse(angle_mode if angle_mode is not None else DEFAULT_ANGLE_MODE)

    try:
        points = list(sample(expression, width, scale, mode))
    except ValueError as e:
        return EvalResult(ok=False, error=f"Plotting error: {e}")
    if not points:
        return EvalResult(ok=False, error="Cannot plot: no finite values in range")

    if ascii:
        return EvalResult(ok=True, result=render_ascii(points, width, height, scale))

    try:
        path = _save_png(expression, points, width, height, scale, output)
    except (OSError, ValueError) as e:
        logger.error("Failed to save plot: %s", e, exc_info=True)
        return EvalResult(ok=False, error=f"Failed to save plot: {e}")
    logger.info("Plot of %r saved to %s", expression, path)
    return EvalResult(ok=True, result=path)
