"""Evaluation driver: one pass over a whole document.

Lines are evaluated strictly in order because each line may read the
variables and the previous answer left by the lines above it. Every line
produces exactly one LineResult; a failing line never stops the pass.
"""

from __future__ import annotations

from .classifier import LineClass, classify_line
from .context import EvaluationContext
from .engine import evaluate_expression, format_auto, to_number
from .logging_config import get_logger
from .preprocessor import preprocess_line
from .types import CalcResult, EngineError, LineResult, Numeric, ValidationError

logger = get_logger("evaluator")


def evaluate_line(raw_line: str, context: EvaluationContext) -> LineResult:
    """Evaluate one document line against the pass context.

    Args:
        raw_line: Line as typed by the user (untrimmed)
        context: State of the current pass, updated in place

    Returns:
        Blank for skipped lines and non-numeric results, Display on success,
        Error when the line could not be evaluated
    """
    line = raw_line.strip()
    if classify_line(line, context) is not LineClass.EVALUATE:
        return LineResult.blank()

    try:
        expr = preprocess_line(line, context)
        value = evaluate_expression(expr, context.scope)
    except (EngineError, ValidationError) as e:
        logger.debug(f"Line failed: {e}", extra={"code": e.code, "line": line})
        return LineResult.failed(str(e))
    except Exception as e:
        # Catch-all for unexpected engine errors - the pass must go on
        logger.exception("Unexpected evaluation error")
        return LineResult.failed(f"Evaluation failed: {e}")

    if not isinstance(value, Numeric):
        return LineResult.blank()

    try:
        display = format_auto(value.value)
    except (ValueError, TypeError, ArithmeticError) as e:
        logger.debug(f"Could not format result of {line!r}: {e}")
        return LineResult.failed(f"Could not format result: {e}")

    context.previous_answer = value.value
    return LineResult.displayed(display, to_number(value.value))


def calculate(text: str) -> CalcResult:
    """Evaluate a whole document.

    Args:
        text: Document with lines separated by "\\n"

    Returns:
        CalcResult with one LineResult per input line

    Example:
        >>> calculate("1 + 2\\n* 3").displays()
        ['3', '9']
    """
    context = EvaluationContext()
    lines = [evaluate_line(raw_line, context) for raw_line in text.split("\n")]
    logger.debug(
        f"Evaluated {len(lines)} line(s), "
        f"{sum(1 for line in lines if line.is_error)} error(s)"
    )
    return CalcResult(lines=lines)
