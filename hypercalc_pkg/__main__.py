"""Main entry point for running hypercalc_pkg as a module.

This allows running HyperCalc with:
    python -m hypercalc_pkg
    python -m hypercalc_pkg -e "2+3*4"
    python -m hypercalc_pkg --plot "sin(x)" --ascii

This is equivalent to running:
    python -m hypercalc_pkg.cli
    python hypercalc.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
