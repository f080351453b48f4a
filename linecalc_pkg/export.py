"""Plain-text export and output-column rows for a calculated document."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from .config import ERROR_MARKER, EXPORT_ARROW, EXPORT_FILENAME_PREFIX
from .evaluator import calculate
from .formatter import format_display
from .types import CalcResult


@dataclass
class OutputRow:
    """One cell of the output column next to a document line."""

    text: str
    is_error: bool = False
    changed: bool = False


def export_text(text: str, result: CalcResult | None = None) -> str:
    """Zip each document line with its formatted result.

    Lines with a displayed value become ``"<line>  →  <value>"``; all other
    lines are copied unchanged. Every line ends with a newline.
    """
    if result is None:
        result = calculate(text)
    output = []
    for index, line in enumerate(text.split("\n")):
        value = result.lines[index].display if index < len(result.lines) else None
        if value is not None:
            output.append(f"{line}{EXPORT_ARROW}{format_display(value)}\n")
        else:
            output.append(f"{line}\n")
    return "".join(output)


def export_filename(day: date | None = None) -> str:
    """Default download name, e.g. ``计算记录_2025-3-7.txt``."""
    day = day or date.today()
    return f"{EXPORT_FILENAME_PREFIX}_{day.year}-{day.month}-{day.day}.txt"


def render_rows(
    result: CalcResult, previous: Sequence[str | None] | None = None
) -> list[OutputRow]:
    """Build the output column for a pass.

    Args:
        result: Current pass result
        previous: Raw display strings of the previous pass, used to flag
            results that changed

    Returns:
        One OutputRow per line: the error marker, the formatted value, or
        an empty cell
    """
    previous = previous or []
    rows = []
    for index, line in enumerate(result.lines):
        if line.is_error:
            rows.append(OutputRow(ERROR_MARKER, is_error=True))
        elif line.display is not None:
            before = previous[index] if index < len(previous) else None
            rows.append(
                OutputRow(format_display(line.display), changed=before != line.display)
            )
        else:
            rows.append(OutputRow(""))
    return rows
