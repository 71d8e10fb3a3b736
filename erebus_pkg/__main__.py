"""Main entry point for running erebus_pkg as a module.

This allows running Erebus with:
    python -m erebus_pkg
    python -m erebus_pkg --health-check
    python -m erebus_pkg -e "2+2"

This is equivalent to running:
    python -m erebus_pkg.cli
    python erebus.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
