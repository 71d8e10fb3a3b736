"""Command line front end: one-shot evaluation and an interactive loop."""

from __future__ import annotations

import argparse
import json
import math
import sys

from . import config
from .api import evaluate
from .logging_config import get_logger, setup_logging
from .types import EvalResult

logger = get_logger("cli")

EXIT_COMMANDS = {"exit", "q", "quit"}
HELP_COMMANDS = {"help"}


def format_number(value: float, precision: int | None = None) -> str:
    """Format a result with ``precision`` significant digits and no trailing zeros.

    Args:
        value: Number to format (may be inf or nan)
        precision: Significant digits, defaults to ``config.OUTPUT_PRECISION``

    Returns:
        Formatted string (e.g., "14", "-0.8509193596", "inf")
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = f"{value:.{precision}g}"
    # -0 reads oddly after rounding
    return "0" if text == "-0" else text


def print_result(res: EvalResult, output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Evaluation result
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print("Error:", res.error)
        return
    print(format_number(res.result))


def print_help_text() -> None:
    """Print help text for REPL commands."""
    operators = ", ".join(f"'{symbol}'" for symbol in config.OPERATOR_SYMBOLS)
    functions = ", ".join(f"'{name}'" for name in config.FUNCTION_NAMES)
    example = evaluate(config.HELP_EXAMPLE)
    help_text = f"""Erebus version {config.VERSION}

Supported Operand\t: {operators}
Supported Function\t: {functions}
example\t: {config.HELP_EXAMPLE} evaluates to {format_number(example.result)}

Commands\t: 'help' shows this text, 'exit' or 'q' leaves
"""
    print(help_text)


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running Erebus health check...")
    print("-" * 50)

    try:
        import numpy as np

        print(f"[OK] NumPy {np.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] NumPy import failed: {e}")
        checks_failed += 1

    samples: list[tuple[str, float]] = [
        ("2 + 3 * 4", 14.0),
        ("2 ^ 3 ^ 2", 512.0),
        ("sqrt(16)", 4.0),
    ]
    for expression, expected in samples:
        res = evaluate(expression)
        if res.ok and res.result == expected:
            print(f"[OK] {expression} = {format_number(res.result)}")
            checks_passed += 1
        else:
            print(f"[FAIL] {expression}: expected {expected}, got {res!r}")
            checks_failed += 1

    print("-" * 50)
    print(f"Health check: {checks_passed} passed, {checks_failed} failed")
    return 0 if checks_failed == 0 else 1


def repl_loop(output_format: str = "human") -> None:
    """Interactive REPL loop with graceful interrupt handling."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    print("Erebus - type 'help' for commands, 'exit' to quit.")
    while True:
        try:
            raw = input(">>> ")
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break

        command = raw.strip().lower()
        if not command:
            continue
        if command in EXIT_COMMANDS:
            print("Goodbye.")
            break
        if command in HELP_COMMANDS:
            print_help_text()
            continue

        print_result(evaluate(raw), output_format)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Erebus CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="erebus")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        help="Set maximum expression nesting depth (default: 10000)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)
    if args.max_depth and args.max_depth > 0:
        config.MAX_EXPRESSION_DEPTH = int(args.max_depth)

    if args.version:
        print(config.VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_expr is not None:
        logger.info("Evaluating %r", args.eval_expr)
        res = evaluate(args.eval_expr)
        print_result(res, args.format)
        return 0 if res.ok else 1

    repl_loop(args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
