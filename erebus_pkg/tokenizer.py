"""Lexical scanner turning expression text into typed tokens.

Recognized input:

- numbers made of digits with at most one decimal point (``12``, ``3.5``, ``.5``)
- a leading ``-`` fused into the number when it opens the source or follows ``(``
- the operators ``+ - * / % ^`` and parentheses
- the functions ``sin cos tan asin acos atan sqrt log floor`` (any letter case)
- whitespace and commas, which are skipped
"""

from __future__ import annotations

import math
import string

from .config import FUNCTION_NAMES, OPERATOR_SYMBOLS
from .types import (
    OPERATORS,
    CloseParen,
    ErrorKind,
    Function,
    Number,
    OpenParen,
    Token,
)

DIGITS = frozenset(string.digits)
SKIPPED = frozenset(",")


def _scan_number(source: str, start: int) -> int:
    """Return the index just past the numeric run starting at ``start``.

    Digits and at most one decimal point are consumed; a second ``.`` ends the run.
    """
    index = start
    seen_point = False
    while index < len(source):
        char = source[index]
        if char in DIGITS:
            index += 1
        elif char == "." and not seen_point:
            seen_point = True
            index += 1
        else:
            break
    return index


def parse_number(text: str) -> tuple[float, ErrorKind]:
    """Convert numeric text to a finite float."""
    try:
        value = float(text)
    except ValueError:
        return -1.0, ErrorKind.PARSE_NUMBER_ERROR
    if not math.isfinite(value):
        return -1.0, ErrorKind.PARSE_NUMBER_ERROR
    return value, ErrorKind.NONE


def _fuses_minus(source: str, index: int) -> bool:
    """Whether the ``-`` at ``index`` belongs to the literal that follows it."""
    if index != 0 and source[index - 1] != "(":
        return False
    following = source[index + 1] if index + 1 < len(source) else ""
    return following in DIGITS or following == "."


def tokenize(source: str) -> tuple[list[Token], ErrorKind]:
    """Split ``source`` into tokens.

    On failure the tokens scanned so far are returned together with the error.
    """
    tokens: list[Token] = []
    index = 0
    length = len(source)

    while index < length:
        char = source[index]

        if char.isspace() or char in SKIPPED:
            index += 1
            continue

        if char.isalpha():
            start = index
            while index < length and source[index].isalpha():
                index += 1
            kind = FUNCTION_NAMES.get(source[start:index].casefold())
            if kind is None:
                return tokens, ErrorKind.SYNTAX_ERROR
            tokens.append(Function(kind))
            continue

        if char == "-" and _fuses_minus(source, index):
            end = _scan_number(source, index + 1)
            value, err = parse_number(source[index:end])
            if err is not ErrorKind.NONE:
                return tokens, err
            tokens.append(Number(value))
            index = end
            continue

        if char in DIGITS or char == ".":
            end = _scan_number(source, index)
            value, err = parse_number(source[index:end])
            if err is not ErrorKind.NONE:
                return tokens, err
            tokens.append(Number(value))
            index = end
            continue

        if char == "(":
            tokens.append(OpenParen())
        elif char == ")":
            tokens.append(CloseParen())
        elif char in OPERATOR_SYMBOLS:
            tokens.append(OPERATORS[OPERATOR_SYMBOLS[char]])
        else:
            return tokens, ErrorKind.SYNTAX_ERROR
        index += 1

    return tokens, ErrorKind.NONE
