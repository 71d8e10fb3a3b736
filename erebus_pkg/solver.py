"""Solver facade: tokenize, convert and evaluate an expression in one call."""

from __future__ import annotations

from .converter import convert
from .evaluator import evaluate as evaluate_stack
from .tokenizer import tokenize
from .types import ErrorKind

# Returned alongside any error; callers must look at the error kind only.
ERROR_SENTINEL = -1.0


def evaluate(source: str) -> tuple[float, ErrorKind]:
    """Evaluate arithmetic expression text.

    Args:
        source: Expression such as ``"2 + 3 * 4"`` or ``"sqrt(16)"``

    Returns:
        Tuple of (value, error kind). The value is meaningful only when the
        error kind is ``ErrorKind.NONE``.

    Example:
        >>> evaluate("2 ^ 3 ^ 2")
        (512.0, <ErrorKind.NONE: 'none'>)
    """
    tokens, err = tokenize(source)
    if err is not ErrorKind.NONE:
        return ERROR_SENTINEL, err

    stack, err = convert(tokens)
    if err is not ErrorKind.NONE:
        return ERROR_SENTINEL, err

    value, err = evaluate_stack(stack)
    if err is not ErrorKind.NONE:
        return ERROR_SENTINEL, err

    return value, ErrorKind.NONE
