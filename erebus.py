#!/usr/bin/env python3
"""
Erebus - Arithmetic Expression Evaluator

Main entry point for the Erebus calculator. This file is a thin wrapper
that delegates all functionality to the erebus_pkg package.

Usage:
    python erebus.py                    # Interactive REPL
    python erebus.py -e "2+3*4"         # Evaluate expression
    python erebus.py --help             # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Erebus.

    Delegates to the erebus_pkg.cli module, which handles argument parsing,
    expression evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from erebus_pkg.cli import main_entry
    except ImportError as e:
        print(f"Error: Failed to import erebus_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
