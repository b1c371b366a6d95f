#!/usr/bin/env python3
"""
HyperCalc - Scientific Calculator

Main entry point for the HyperCalc calculator application.
This file serves as a thin wrapper that delegates all functionality
to the hypercalc_pkg package.

Usage:
    python hypercalc.py                          # Interactive REPL
    python hypercalc.py -e "2+3*4"               # Evaluate expression
    python hypercalc.py -e "sin(90)" -a rad      # Evaluate in radians
    python hypercalc.py --plot "sin(x)" --ascii  # ASCII plot
    python hypercalc.py --help                   # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for HyperCalc.

    Delegates all functionality to the hypercalc_pkg.cli module,
    which handles argument parsing, expression evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from hypercalc_pkg.cli import main_entry
    except ImportError as e:
        print(f"Error: Failed to import hypercalc_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
