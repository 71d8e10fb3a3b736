"""Centralized configuration for Erebus.

This module defines:
- Resource limits (evaluator nesting depth)
- Output formatting options
- The function names and operator symbols the tokenizer recognizes
- User-facing messages for each error kind

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with EREBUS_)
"""

import os

from .types import ErrorKind, FunctionKind, OperatorKind

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("erebus")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Resource limits (can be overridden via environment variables)
MAX_EXPRESSION_DEPTH = int(
    os.getenv("EREBUS_MAX_EXPRESSION_DEPTH", "10000")
)  # operators waiting on a nested operand at once

# Output configuration
OUTPUT_PRECISION = int(
    os.getenv("EREBUS_OUTPUT_PRECISION", "10")
)  # significant digits in human output

FUNCTION_NAMES = {kind.value: kind for kind in FunctionKind}

OPERATOR_SYMBOLS = {kind.value: kind for kind in OperatorKind}

ERROR_MESSAGES = {
    ErrorKind.SYNTAX_ERROR: "Syntax Error",
    ErrorKind.PARSE_NUMBER_ERROR: "Parse Number Error",
    ErrorKind.DEPTH_LIMIT_ERROR: "Expression too deeply nested",
}

HELP_EXAMPLE = "sin(4*(2+8)^2)"
