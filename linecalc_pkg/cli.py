"""Command-line interface for Linecalc.

Evaluates a document from a file, stdin or -e and prints one result per
line (human table or JSON), or writes the plain-text export.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import VERSION
from .evaluator import calculate
from .export import export_filename, export_text, render_rows
from .logging_config import get_logger, setup_logging
from .types import CalcResult

logger = get_logger("cli")


def _read_document(args: argparse.Namespace) -> str:
    """Return the document text from --eval, a file, or stdin."""
    if args.eval_text is not None:
        # Allow literal "\n" so several lines fit in one shell argument
        return args.eval_text.replace("\\n", "\n")
    if args.file is None or args.file == "-":
        return sys.stdin.read()
    return Path(args.file).read_text(encoding="utf-8")


def _print_human(text: str, result: CalcResult) -> None:
    lines = text.split("\n")
    rows = render_rows(result)
    width = max((len(line) for line in lines), default=0)
    number_width = len(str(len(lines)))
    for index, (line, row) in enumerate(zip(lines, rows), start=1):
        if row.text:
            print(f"{index:>{number_width}} | {line:<{width}} | {row.text}")
        else:
            print(f"{index:>{number_width}} | {line}".rstrip())


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Linecalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="linecalc",
        description="Evaluate a notepad-style document line by line.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Document to evaluate ('-' or omitted reads stdin)",
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate this text instead of a file (use \\n between lines)",
        dest="eval_text",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help="Print the plain-text export (each line followed by its result)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Write the export to this path ('auto' picks a dated file name)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level (default: LINECALC_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(f"linecalc {VERSION}")
        return 0

    try:
        text = _read_document(args)
    except OSError as e:
        logger.error(f"Cannot read document: {e}")
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    result = calculate(text)

    if args.export or args.output:
        exported = export_text(text, result)
        if args.output:
            target = export_filename() if args.output == "auto" else args.output
            try:
                Path(target).write_text(exported, encoding="utf-8")
            except OSError as e:
                print(f"Error: cannot write {target}: {e}", file=sys.stderr)
                return 1
            logger.info(f"Exported {len(result.lines)} line(s) to {target}")
            print(target)
        else:
            sys.stdout.write(exported)
        return 0

    if args.format == "json":
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        _print_human(text, result)
    return 0
