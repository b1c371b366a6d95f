"""Public API for HyperCalc - returns structured objects without side effects."""

from __future__ import annotations

from .config import DEFAULT_ANGLE_MODE, ERROR_MARKER
from .engine import calculate, compile_expression
from .formatting import exact_form, format_number
from .logging_config import get_logger
from .plotting import plot_function
from .sampling import sample
from .types import AngleMode, EvalResult, EvaluationError, SampleResult

logger = get_logger("api")


def solve(
    expression: str, angle_mode: AngleMode | str | None = None
) -> EvalResult:
    """Evaluate a calculator expression.

    Every failure (bad syntax, unknown names, division by zero, domain
    errors) is reported the same way, with ``error`` set to ERROR_MARKER.

    Args:
        expression: Expression string (e.g., "2+3*4", "sin(90)", "6÷3")
        angle_mode: "deg" or "rad" (default: config.DEFAULT_ANGLE_MODE)

    Returns:
        EvalResult. Empty input gives ok=True with no value (is_empty).

    Example:
        >>> from hypercalc_pkg.api import solve
        >>> solve("2^3^2").value
        512.0
        >>> solve("1/0").error
        'Error'
        >>> solve("").is_empty
        True
    """
    if not expression or not expression.strip():
        return EvalResult(ok=True)

    mode = AngleMode.parse(angle_mode if angle_mode is not None else DEFAULT_ANGLE_MODE)
    try:
        value = calculate(expression, mode)
    except EvaluationError as e:
        logger.debug("Evaluation of %r failed: %s (%s)", expression, e, e.code)
        return EvalResult(ok=False, error=ERROR_MARKER)
    return EvalResult(
        ok=True, value=value, result=format_number(value), exact=exact_form(value)
    )


def sample_function(
    expression: str,
    width: int,
    scale: float,
    angle_mode: AngleMode | str | None = None,
) -> SampleResult:
    """Sample an expression of x over ``width`` pixel columns.

    Args:
        expression: Expression in x (e.g., "sin(x)")
        width: Number of pixel columns
        scale: Pixels per unit
        angle_mode: "deg" or "rad" (default: config.DEFAULT_ANGLE_MODE)

    Returns:
        SampleResult with the finite (pixel_x, value) pairs. Columns that
        fail to evaluate are simply missing; ok=False only for invalid
        arguments.

    Example:
        >>> from hypercalc_pkg.api import sample_function
        >>> result = sample_function("x", width=4, scale=2)
        >>> result.points
        [(0, -1.0), (1, -0.5), (2, 0.0), (3, 0.5)]
    """
    try:
        points = list(sample(expression, width, scale, angle_mode))
    except ValueError as e:
        return SampleResult(ok=False, error=str(e))
    return SampleResult(ok=True, points=points)


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Check that an expression compiles, without evaluating it.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from hypercalc_pkg.api import validate_expression
        >>> validate_expression("sin(x)")
        (True, None)
        >>> validate_expression("foo(2)")
        (False, 'Unknown identifier: foo')
    """
    try:
        compile_expression(expression)
        return True, None
    except EvaluationError as e:
        return False, str(e)


def plot(
    expression: str,
    angle_mode: AngleMode | str | None = None,
    ascii: bool = False,
    output: str | None = None,
) -> EvalResult:
    """Plot an expression of x with the default geometry.

    Args:
        expression: Function expression in x
        angle_mode: "deg" or "rad" (default: config.DEFAULT_ANGLE_MODE)
        ascii: Return ASCII plot instead of writing a PNG
        output: PNG path (default: a temporary file)

    Returns:
        EvalResult with the ASCII text or the PNG path

    Example:
        >>> from hypercalc_pkg.api import plot
        >>> result = plot("x^2", ascii=True)
        >>> print(result.ok)
        True
    """
    return plot_function(expression, angle_mode=angle_mode, ascii=ascii, output=output)
