from __future__ import annotations

import argparse
import json
from typing import Any

from .config import VERSION
from .logging_config import get_logger
from .plotting import plot_function
from .session import CalculatorSession
from .types import AngleMode, EvalResult

logger = get_logger("cli")

HELP_TEXT = """
HyperCalc commands:
  <expression>     Evaluate, e.g. 2+3*4, sin(90), sqrt(2)^2, 6÷3
  *2, +1, ...      Continue from the previous result
  deg | rad        Switch angle mode for sin, cos and tan
  mode             Toggle angle mode
  plot <expr>      ASCII plot of an expression in x, e.g. plot sin(x)
  history          Show this session's calculations
  clear            Clear history and the previous result
  help             Show this text
  quit | exit      Leave

Functions: sin cos tan asin acos atan sinh cosh tanh asinh acosh atanh
           sqrt cbrt exp log (base 10) ln abs floor ceil round trunc sign
Constants: pi e
"""


def print_result_pretty(res: dict[str, Any], output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Result dictionary (EvalResult.to_dict())
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res, indent=2, ensure_ascii=False))
        return
    if not res.get("ok"):
        print(res.get("error"))
        return
    if "result" not in res:
        # Nothing entered
        return
    print(res["result"])
    exact = res.get("exact")
    if exact:
        print(f"Exact: {exact}")


def _handle_command(session: CalculatorSession, line: str, output_format: str) -> bool:
    """Run one REPL line. Returns False when the loop should stop."""
    command = line.strip()
    lowered = command.lower()
    logger.debug("REPL command: %r", command)
    if lowered in ("quit", "exit"):
        return False
    if lowered == "help":
        print(HELP_TEXT)
    elif lowered in ("deg", "rad"):
        mode = session.set_angle_mode(lowered)
        print(f"Angle mode: {mode.name}")
    elif lowered == "mode":
        mode = session.toggle_angle_mode()
        print(f"Angle mode: {mode.name}")
    elif lowered == "history":
        if not session.history:
            print("(no history)")
        for entry in session.history:
            print(entry)
    elif lowered == "clear":
        session.clear()
    elif lowered.startswith("plot"):
        expression = command[4:].strip()
        result = plot_function(expression, angle_mode=session.angle_mode, ascii=True)
        print(result.result if result.ok else f"Error: {result.error}")
    else:
        result = session.evaluate(command)
        print_result_pretty(result.to_dict(), output_format=output_format)
    return True


def repl_loop(
    output_format: str = "human", angle_mode: AngleMode | str | None = None
) -> None:
    """Interactive REPL loop with graceful interrupt handling."""
    try:
        import readline  # noqa: F401
    except (ImportError, ModuleNotFoundError):
        # readline not available on Windows - that's fine
        pass

    session = CalculatorSession(angle_mode)
    print(
        f"HyperCalc {VERSION} [{session.angle_mode.name}] "
        "- type 'help' for commands, 'quit' to exit."
    )
    while True:
        try:
            line = input(">>> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("\n[Type 'quit' to exit]")
            continue
        if not _handle_command(session, line, output_format):
            break


def _eval_once(expression: str, angle_mode: str, output_format: str) -> int:
    session = CalculatorSession(angle_mode)
    result: EvalResult = session.evaluate(expression)
    if result.is_empty:
        print("Error: Empty input. Please enter an expression.")
        return 1
    print_result_pretty(result.to_dict(), output_format=output_format)
    return 0 if result.ok else 1


def _plot_once(args: argparse.Namespace) -> int:
    result = plot_function(
        args.plot_expr,
        width=args.width,
        height=args.height,
        scale=args.scale,
        angle_mode=args.angle_mode,
        ascii=args.ascii,
        output=args.output,
    )
    if args.format == "json":
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif result.ok:
        print(result.result if args.ascii else f"Plot saved to: {result.result}")
    else:
        print(f"Error: {result.error}")
    return 0 if result.ok else 1


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for HyperCalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    import hypercalc_pkg.config as _config

    parser = argparse.ArgumentParser(prog="hypercalc")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--plot",
        type=str,
        help="Plot an expression in x and exit",
        dest="plot_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-a",
        "--angle-mode",
        type=str,
        choices=["deg", "rad"],
        default=_config.DEFAULT_ANGLE_MODE,
        help="Angle mode for sin, cos and tan (default: %(default)s)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "--strict-parentheses",
        action="store_true",
        help="Treat unbalanced parentheses as an error",
    )
    parser.add_argument("--width", type=int, help="Plot width (columns or pixels)")
    parser.add_argument("--height", type=int, help="Plot height (rows or pixels)")
    parser.add_argument("--scale", type=float, help="Plot scale (columns per unit)")
    parser.add_argument(
        "--ascii", action="store_true", help="Print the plot as ASCII text"
    )
    parser.add_argument("-o", "--output", type=str, help="PNG file for --plot")
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    args = parser.parse_args(argv)

    from .logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.precision and args.precision > 0:
        _config.OUTPUT_PRECISION = int(args.precision)
    if args.strict_parentheses:
        _config.STRICT_PARENTHESES = True

    if args.version:
        print(VERSION)
        return 0
    if args.plot_expr:
        return _plot_once(args)
    if args.eval_expr is not None:
        expr = args.eval_expr.strip()
        # Remove ">>>" prompt if present
        if expr.startswith(">>>"):
            expr = expr[3:].strip()
        return _eval_once(expr, args.angle_mode, args.format)

    repl_loop(output_format=args.format, angle_mode=args.angle_mode)
    return 0


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m hypercalc_pkg.cli"""
    import sys

    sys.exit(main_entry())
