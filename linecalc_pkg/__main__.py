"""Main entry point for running linecalc_pkg as a module.

This allows running Linecalc with:
    python -m linecalc_pkg notes.txt
    python -m linecalc_pkg -e "1 + 2"
    python -m linecalc_pkg --export notes.txt

This is equivalent to running:
    python linecalc.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
