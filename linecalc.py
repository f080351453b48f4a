#!/usr/bin/env python3
"""
Linecalc - notepad-style line-by-line calculator

Main entry point for the Linecalc application. This file serves as a thin
wrapper that delegates all functionality to the linecalc_pkg package.

Usage:
    python linecalc.py notes.txt            # Evaluate a document
    python linecalc.py -e "1 + 2\\n* 3"      # Evaluate inline text
    python linecalc.py --export notes.txt   # Each line with its result
    python linecalc.py --help               # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Linecalc.

    Delegates all functionality to the linecalc_pkg.cli module,
    which handles argument parsing, document evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from linecalc_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import linecalc_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
