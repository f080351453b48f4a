"""Centralized configuration for Linecalc.

This module defines:
- Display formatting thresholds (auto-notation exponent bounds, precision)
- Working precision used for numeric evaluation
- Input validation limits
- The engine namespace (functions and constants available in a line)
- SymPy parse transformations
- Regex patterns used by the classifier and preprocessor

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with LINECALC_)
"""

import os
import re

import sympy as sp
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_application,
    implicit_multiplication,
    rationalize,
    standard_transformations,
)

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("linecalc")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Auto-notation: numbers whose decimal exponent falls outside
# [LOWER_EXP, UPPER_EXP) are shown in scientific notation
LOWER_EXP = int(os.getenv("LINECALC_LOWER_EXP", "-20"))
UPPER_EXP = int(os.getenv("LINECALC_UPPER_EXP", "20"))
DISPLAY_PRECISION = int(
    os.getenv("LINECALC_DISPLAY_PRECISION", "12")
)  # significant digits of a displayed result
WORKING_PRECISION = int(
    os.getenv("LINECALC_WORKING_PRECISION", "64")
)  # digits used when a value is evaluated numerically

# Input validation limits
MAX_LINE_LENGTH = int(os.getenv("LINECALC_MAX_LINE_LENGTH", "10000"))  # characters

# Resource limits for a single line
MAX_EXACT_DIGITS = int(
    os.getenv("LINECALC_MAX_EXACT_DIGITS", "10000")
)  # larger powers are evaluated at WORKING_PRECISION instead of exactly
MAX_DECIMAL_EXPONENT = int(
    os.getenv("LINECALC_MAX_DECIMAL_EXPONENT", "9000000000000000")
)  # results beyond 10**MAX_DECIMAL_EXPONENT overflow

# Default log level when --log-level is not given
LOG_LEVEL = os.getenv("LINECALC_LOG_LEVEL", "WARNING")

# Presentation
GROUP_SEPARATOR = os.getenv("LINECALC_GROUP_SEPARATOR", ",")
ERROR_MARKER = "⚠"
EXPORT_ARROW = "  →  "
EXPORT_FILENAME_PREFIX = "计算记录"

# Operators that continue the previous result when they start a line
BINARY_OPERATORS = ("+", "-", "*", "/")

ALLOWED_ENGINE_NAMES = {
    # Constants
    "pi": sp.pi,
    "e": sp.E,
    "E": sp.E,
    "Infinity": sp.oo,
    "true": sp.true,
    "false": sp.false,
    # Functions
    "sqrt": sp.sqrt,
    "sin": sp.sin,
    "cos": sp.cos,
    "tan": sp.tan,
    "abs": sp.Abs,
    "ceil": sp.ceiling,
    "floor": sp.floor,
    "min": sp.Min,
    "max": sp.Max,
    "log": sp.log,  # log(x) natural, log(x, base)
    "ln": sp.log,
    "exp": sp.exp,
    "mod": sp.Mod,
}

TRANSFORMATIONS = standard_transformations + (
    implicit_multiplication,
    implicit_application,
    convert_xor,
    rationalize,  # decimal literals become exact rationals
)
# Used when a literal is too large to turn into an exact rational
NUMERIC_TRANSFORMATIONS = tuple(t for t in TRANSFORMATIONS if t is not rationalize)

# Decimal exponent of a number literal such as 1.5e+300
EXPONENT_LITERAL_REGEX = re.compile(r"(?<![\w.])\d+(?:\.\d*)?[eE][+-]?(\d+)")

ASSIGNMENT_RE = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=(?!=)(.*)$", re.DOTALL)

PERCENT_REGEX = re.compile(r"(\d+(?:\.\d+)?)%")
IDENTIFIER_REGEX = re.compile(r"[^\W\d]\w*")
SEPARATOR_LINE_REGEX = re.compile(r"^[-=_.*·~]+$")
MATH_CHAR_REGEX = re.compile(r"[0-9=()^]")
KNOWN_TOKEN_REGEX = re.compile(
    r"\b(pi|e|ans|true|false|Infinity)\b", re.IGNORECASE | re.ASCII
)
