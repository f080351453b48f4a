"""Line preprocessing.

Rewrites one trimmed document line into a string the engine accepts:
- Percent literals (50% -> (50/100))
- Chaining: a leading + - * / continues the previous answer
- Implicit ``ans`` binding
- Non-ASCII identifiers replaced by their aliases
"""

from __future__ import annotations

import re
from typing import Any

from .config import BINARY_OPERATORS, MAX_LINE_LENGTH, PERCENT_REGEX
from .context import EvaluationContext
from .engine import format_auto
from .types import ValidationError

# Basic denylist to avoid dangerous tokens before SymPy parsing
FORBIDDEN_SUBSTRINGS = ("__",)
FORBIDDEN_WORDS_RE = re.compile(
    r"\b(import|lambda|eval|exec|open|compile|globals|locals|"
    r"getattr|setattr|delattr|builtins)\b"
)


def validate_line(line: str) -> None:
    """Reject lines the engine must never see.

    Raises:
        ValidationError: If the line is too long or has a forbidden token
    """
    if len(line) > MAX_LINE_LENGTH:
        raise ValidationError(
            f"Line too long (>{MAX_LINE_LENGTH} characters)", "TOO_LONG"
        )
    for token in FORBIDDEN_SUBSTRINGS:
        if token in line:
            raise ValidationError(
                f"Input contains forbidden token: {token}", "FORBIDDEN_TOKEN"
            )
    match = FORBIDDEN_WORDS_RE.search(line)
    if match:
        raise ValidationError(
            f"Input contains forbidden token: {match.group(1)}", "FORBIDDEN_TOKEN"
        )


def expand_percent(line: str) -> str:
    """Rewrite every ``N%`` literal as ``(N/100)``."""
    return PERCENT_REGEX.sub(r"(\1/100)", line)


def apply_chaining(line: str, previous_answer: Any) -> str:
    """Prefix the previous answer when the line starts with a binary operator."""
    if previous_answer is None or not line or line[0] not in BINARY_OPERATORS:
        return line
    return format_auto(previous_answer) + line


def bind_answer(context: EvaluationContext) -> None:
    """Expose the previous answer as ``ans`` in the scope."""
    if context.has_previous_answer:
        context.scope["ans"] = context.previous_answer


def preprocess_line(line: str, context: EvaluationContext) -> str:
    """Turn a trimmed line into an engine-ready expression.

    Args:
        line: Trimmed raw line (already classified as evaluable)
        context: Current pass state; ``ans`` is bound into its scope

    Returns:
        Expression string for the engine

    Raises:
        ValidationError: If the line fails validation
    """
    validate_line(line)
    line = expand_percent(line)
    line = apply_chaining(line, context.previous_answer)
    bind_answer(context)
    return context.aliases.substitute(line)
