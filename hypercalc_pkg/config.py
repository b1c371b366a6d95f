"""Centralized configuration for HyperCalc.

This module defines:
- Default angle mode and output precision
- Input validation limits
- Parenthesis handling policy for the converter
- Plot geometry defaults for image and ASCII output
- Regex patterns for tokenizing

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with HYPERCALC_)
"""

import os
import re

try:
    import importlib.metadata

    VERSION = importlib.metadata.version("hypercalc")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Angle mode used when a caller does not pass one ("deg" or "rad")
DEFAULT_ANGLE_MODE = os.getenv("HYPERCALC_ANGLE_MODE", "deg").lower()

# Significant digits for displayed results
OUTPUT_PRECISION = int(os.getenv("HYPERCALC_OUTPUT_PRECISION", "10"))

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("HYPERCALC_MAX_INPUT_LENGTH", "1000"))  # characters

# Reject unbalanced parentheses instead of flushing the operator stack
STRICT_PARENTHESES = (
    os.getenv("HYPERCALC_STRICT_PARENTHESES", "false").lower() == "true"
)

# Image plot geometry (pixels)
IMAGE_WIDTH = int(os.getenv("HYPERCALC_IMAGE_WIDTH", "800"))
IMAGE_HEIGHT = int(os.getenv("HYPERCALC_IMAGE_HEIGHT", "480"))
PLOT_SCALE = float(os.getenv("HYPERCALC_PLOT_SCALE", "40"))  # pixels per unit

# ASCII plot geometry (characters)
ASCII_PLOT_WIDTH = int(os.getenv("HYPERCALC_ASCII_PLOT_WIDTH", "60"))
ASCII_PLOT_HEIGHT = int(os.getenv("HYPERCALC_ASCII_PLOT_HEIGHT", "20"))
ASCII_PLOT_SCALE = float(os.getenv("HYPERCALC_ASCII_PLOT_SCALE", "5"))  # characters per unit

# Tolerance used when suggesting an exact form for a decimal result
EXACT_FORM_TOLERANCE = float(os.getenv("HYPERCALC_EXACT_FORM_TOLERANCE", "1e-12"))
EXACT_FORM_MAX_LENGTH = int(os.getenv("HYPERCALC_EXACT_FORM_MAX_LENGTH", "12"))

# The single marker shown for every failed calculation
ERROR_MARKER = "Error"

# Name of the free variable used for graphing
FREE_VARIABLE = "x"

# Alternate glyphs accepted from keypads and pasted text
GLYPH_REPLACEMENTS = {
    "×": "*",
    "÷": "/",
}

TOKEN_REGEX = re.compile(r"[0-9.]+|[a-z]+|[()+\-*/^]")
NUMBER_REGEX = re.compile(r"^[0-9.]+$")
IDENTIFIER_REGEX = re.compile(r"^[a-z]+$")
