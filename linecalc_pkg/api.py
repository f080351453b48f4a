"""Public API for Linecalc - returns structured objects without side effects."""

from __future__ import annotations

from typing import Any

from .evaluator import calculate as _calculate
from .export import export_text
from .formatter import format_display
from .types import CalcResult


def calculate(text: str) -> CalcResult:
    """Evaluate a multi-line document.

    Args:
        text: Document text, lines separated by "\\n"

    Returns:
        CalcResult with exactly one LineResult per line

    Example:
        >>> from linecalc_pkg.api import calculate
        >>> result = calculate("房租 = 3500\\n水电 = 200\\n房租 + 水电")
        >>> result.lines[2].display
        '3700'
    """
    return _calculate(text)


def format_number(raw: str) -> str:
    """Format a raw display string for presentation.

    Example:
        >>> from linecalc_pkg.api import format_number
        >>> format_number("1234567.00")
        '1,234,567'
    """
    return format_display(raw)


def evaluate_lines(text: str) -> list[dict[str, Any]]:
    """Evaluate a document and return one dict per line.

    Displayed lines carry both the raw and the formatted value.

    Example:
        >>> from linecalc_pkg.api import evaluate_lines
        >>> evaluate_lines("200 * 50%")
        [{'kind': 'display', 'display': '100', 'numeric': 100.0, 'formatted': '100'}]
    """
    rows = []
    for line in _calculate(text).lines:
        row = line.to_dict()
        if line.display is not None:
            row["formatted"] = format_display(line.display)
        rows.append(row)
    return rows


def export_document(text: str) -> str:
    """Plain-text export: every line followed by its formatted result.

    Example:
        >>> from linecalc_pkg.api import export_document
        >>> export_document("# rent\\n1200 * 12")
        '# rent\\n1200 * 12  →  14,400\\n'
    """
    return export_text(text)
