"""Presentation formatting of raw display strings."""

from __future__ import annotations

import re

from .config import GROUP_SEPARATOR

_GROUP_RE = re.compile(r"\B(?=(\d{3})+(?!\d))")


def format_display(raw: str, separator: str = GROUP_SEPARATOR) -> str:
    """Trim and group a raw auto-notation string for display.

    Trailing fractional zeros are removed from the mantissa, and in fixed
    notation the integer part is grouped in threes. An exponent suffix is
    kept as is and never grouped. Applying this twice gives the same string.

    Examples:
        "1234567.00" -> "1,234,567"
        "1.50000e+25" -> "1.5e+25"
    """
    mantissa, marker, exponent = raw.partition("e")
    suffix = marker + exponent

    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")

    if not suffix:
        integer, dot, fraction = mantissa.partition(".")
        integer = _GROUP_RE.sub(separator, integer)
        mantissa = integer + dot + fraction

    return mantissa + suffix


def format_number(raw: str) -> str:
    """Public name for :func:`format_display`."""
    return format_display(raw)
