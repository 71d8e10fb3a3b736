"""Shunting-yard conversion of infix tokens into an operator-ordered stack."""

from __future__ import annotations

from .types import CloseParen, ErrorKind, Function, Number, OpenParen, Operator, Token


def _should_pop(top: Token, incoming: Operator) -> bool:
    """Decide whether ``top`` leaves the operator stack before ``incoming`` is pushed."""
    if isinstance(top, OpenParen):
        return False
    if isinstance(top, Function):
        # Function calls bind tighter than any binary operator
        return True
    if top.precedence > incoming.precedence:
        return True
    return top.precedence == incoming.precedence and incoming.left_associative


def convert(tokens: list[Token]) -> tuple[list[Token], ErrorKind]:
    """Reorder ``tokens`` so every operator follows its operands.

    The result is a stack: its last element is the operator applied last.
    Unbalanced parentheses yield ``SYNTAX_ERROR`` together with the partial output.
    """
    operators: list[Token] = []
    output: list[Token] = []
    open_parens = 0

    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, OpenParen):
            operators.append(token)
            open_parens += 1
        elif isinstance(token, CloseParen):
            if open_parens == 0:
                return output, ErrorKind.SYNTAX_ERROR
            open_parens -= 1
            while not isinstance(operators[-1], OpenParen):
                output.append(operators.pop())
            operators.pop()
            if operators and isinstance(operators[-1], Function):
                output.append(operators.pop())
        elif isinstance(token, Function):
            operators.append(token)
        else:
            while operators and _should_pop(operators[-1], token):
                output.append(operators.pop())
            operators.append(token)

    while operators:
        output.append(operators.pop())

    if open_parens != 0:
        return output, ErrorKind.SYNTAX_ERROR

    return output, ErrorKind.NONE
