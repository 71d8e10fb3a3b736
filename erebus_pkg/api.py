"""Public API for Erebus - returns structured objects without side effects."""

from __future__ import annotations

from .config import ERROR_MESSAGES
from .converter import convert
from .logging_config import get_logger
from .solver import evaluate as _evaluate
from .tokenizer import tokenize
from .types import ErrorKind, EvalResult

logger = get_logger("api")


def error_message(kind: ErrorKind) -> str:
    return ERROR_MESSAGES.get(kind, "Unknown error")


def evaluate(expression: str) -> EvalResult:
    """Evaluate an arithmetic expression.

    Args:
        expression: Expression string (e.g., "2+2", "sin(4*(2+8)^2)")

    Returns:
        EvalResult with the numeric value or an error description

    Example:
        >>> from erebus_pkg.api import evaluate
        >>> evaluate("(2 + 3) * 4").result
        20.0
        >>> evaluate("2 & 3").error
        'Syntax Error'
    """
    value, err = _evaluate(expression)
    if err is not ErrorKind.NONE:
        logger.debug("Evaluation of %r failed: %s", expression, err.code)
        return EvalResult(ok=False, error=error_message(err), error_kind=err)
    return EvalResult(ok=True, result=value)


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Check that an expression scans and has balanced parentheses, without evaluating it.

    Args:
        expression: Expression string to validate

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from erebus_pkg.api import validate_expression
        >>> validate_expression("2 + 2")
        (True, None)
        >>> validate_expression("(2 + 2")
        (False, 'Syntax Error')
    """
    tokens, err = tokenize(expression)
    if err is ErrorKind.NONE:
        _, err = convert(tokens)
    if err is not ErrorKind.NONE:
        return False, error_message(err)
    return True, None
