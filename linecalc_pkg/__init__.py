"""Linecalc package: notepad-style line-by-line calculator components."""

__all__ = [
    "config",
    "aliasing",
    "context",
    "preprocessor",
    "classifier",
    "engine",
    "evaluator",
    "formatter",
    "export",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "calculate",
    "format_number",
    "evaluate_lines",
    "export_document",
]
