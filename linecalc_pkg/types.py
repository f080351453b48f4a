"""Type definitions and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

BLANK = "blank"
DISPLAY = "display"
ERROR = "error"


@dataclass(frozen=True)
class Numeric:
    """Engine value that is a real number (or a signed infinity)."""

    value: Any


@dataclass(frozen=True)
class Other:
    """Engine value of any other kind: boolean, matrix, tuple, None..."""

    value: Any


EngineValue = Numeric | Other


@dataclass
class LineResult:
    """Outcome of one document line."""

    kind: str
    display: str | None = None
    numeric: float = 0.0
    error: str | None = None

    @classmethod
    def blank(cls) -> LineResult:
        return cls(kind=BLANK)

    @classmethod
    def displayed(cls, display: str, numeric: float) -> LineResult:
        return cls(kind=DISPLAY, display=display, numeric=numeric)

    @classmethod
    def failed(cls, message: str | None = None) -> LineResult:
        return cls(kind=ERROR, error=message or "Evaluation failed")

    @property
    def is_blank(self) -> bool:
        return self.kind == BLANK

    @property
    def is_error(self) -> bool:
        return self.kind == ERROR

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"kind": self.kind}
        if self.display is not None:
            result_dict["display"] = self.display
            result_dict["numeric"] = self.numeric
        if self.error is not None:
            result_dict["error"] = self.error
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if self.kind == DISPLAY:
            return f"LineResult(display={self.display!r}, numeric={self.numeric!r})"
        if self.kind == ERROR:
            return f"LineResult(error={self.error!r})"
        return "LineResult(blank)"


@dataclass
class CalcResult:
    """Result of evaluating a whole document, one entry per input line."""

    lines: list[LineResult] = field(default_factory=list)

    def displays(self) -> list[str | None]:
        """Raw display strings, index-aligned with the input lines."""
        return [line.display for line in self.lines]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"lines": [line.to_dict() for line in self.lines]}


class ValidationError(Exception):
    """Raised when a line is rejected before it reaches the engine."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class EngineError(Exception):
    """Raised when the arithmetic engine cannot evaluate a line."""

    def __init__(self, message: str, code: str = "PARSE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
