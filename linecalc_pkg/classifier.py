"""Line classification: decide which lines reach the engine.

Narrative text, headers, comments and divider lines are skipped silently so
they can be mixed freely with calculations. A bare variable name is still
evaluated so its current value can be inspected.
"""

from __future__ import annotations

from enum import Enum

from .config import (
    BINARY_OPERATORS,
    KNOWN_TOKEN_REGEX,
    MATH_CHAR_REGEX,
    SEPARATOR_LINE_REGEX,
)
from .context import EvaluationContext


class LineClass(Enum):
    EMPTY = "empty"
    COMMENT = "comment"
    SEPARATOR = "separator"
    PROSE = "prose"
    EVALUATE = "evaluate"


def looks_like_math(line: str) -> bool:
    """True if the line has a digit, operator, bracket or known math token."""
    if MATH_CHAR_REGEX.search(line):
        return True
    if any(op in line for op in BINARY_OPERATORS):
        return True
    return KNOWN_TOKEN_REGEX.search(line) is not None


def classify_line(line: str, context: EvaluationContext) -> LineClass:
    """Classify a trimmed line; the first matching rule wins."""
    if not line:
        return LineClass.EMPTY
    if line.startswith("#"):
        return LineClass.COMMENT
    if SEPARATOR_LINE_REGEX.match(line):
        return LineClass.SEPARATOR
    if not context.is_known_name(line) and not looks_like_math(line):
        return LineClass.PROSE
    return LineClass.EVALUATE
