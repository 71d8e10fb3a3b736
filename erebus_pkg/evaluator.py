"""Reduction of an operator-ordered token stack to a single value.

The stack produced by :func:`erebus_pkg.converter.convert` encodes an expression
tree implicitly: the top element is the outermost operator and the elements
beneath it are its operands, each of which may itself be an unreduced
subexpression. :func:`reduce` pops an operator, resolves its operands
(reducing nested subexpressions first) and pushes the result back as a new
:class:`Number`.

All arithmetic is done in NumPy float64 with floating point warnings silenced,
so division by zero, overflow and out-of-domain function arguments produce
``inf``/``nan`` the way IEEE-754 prescribes instead of raising.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from . import config
from .types import ErrorKind, Function, FunctionKind, Number, Operator, OperatorKind, Token

UNARY_FUNCTIONS: dict[FunctionKind, Callable[[np.float64], np.float64]] = {
    FunctionKind.SIN: np.sin,
    FunctionKind.COS: np.cos,
    FunctionKind.TAN: np.tan,
    FunctionKind.ASIN: np.arcsin,
    FunctionKind.ACOS: np.arccos,
    FunctionKind.ATAN: np.arctan,
    FunctionKind.SQRT: np.sqrt,
    FunctionKind.LOG: np.log,
    FunctionKind.FLOOR: np.floor,
}

BINARY_OPERATORS: dict[OperatorKind, Callable[[np.float64, np.float64], np.float64]] = {
    OperatorKind.ADD: np.add,
    OperatorKind.SUB: np.subtract,
    OperatorKind.MUL: np.multiply,
    OperatorKind.DIV: np.divide,
    OperatorKind.MOD: np.fmod,
    OperatorKind.POW: np.power,
}


def apply_function(kind: FunctionKind, operand: float) -> float:
    with np.errstate(all="ignore"):
        return float(UNARY_FUNCTIONS[kind](np.float64(operand)))


def apply_operator(kind: OperatorKind, left: float, right: float) -> float:
    """Apply a binary operator; ``left`` is the base for ``^`` and the dividend for ``/`` and ``%``."""
    with np.errstate(all="ignore"):
        return float(BINARY_OPERATORS[kind](np.float64(left), np.float64(right)))


def _arity(op: Operator | Function) -> int:
    return 1 if isinstance(op, Function) else 2


def _pop_operator(stack: list[Token]) -> tuple[Operator | Function | None, ErrorKind]:
    """Pop the operator candidate on top of ``stack``."""
    if not stack:
        return None, ErrorKind.SYNTAX_ERROR
    op = stack.pop()
    if not isinstance(op, (Operator, Function)):
        return None, ErrorKind.SYNTAX_ERROR
    return op, ErrorKind.NONE


def reduce(stack: list[Token]) -> ErrorKind:
    """Resolve the operator on top of ``stack`` in place, leaving its value there.

    Operators still waiting for operands are kept on an explicit work-list, so
    the interpreter's call stack does not grow with the expression. More than
    ``config.MAX_EXPRESSION_DEPTH`` operators waiting at once stops the
    reduction with ``DEPTH_LIMIT_ERROR``.
    """
    op, err = _pop_operator(stack)
    if err is not ErrorKind.NONE:
        return err
    # Each entry is an operator and the operands popped for it so far
    pending: list[tuple[Operator | Function, list[float]]] = [(op, [])]

    while pending:
        op, operands = pending[-1]

        if len(operands) == _arity(op):
            pending.pop()
            if isinstance(op, Function):
                stack.append(Number(apply_function(op.kind, operands[0])))
            else:
                # The operand popped last was written first
                stack.append(Number(apply_operator(op.kind, operands[1], operands[0])))
            continue

        if not stack:
            return ErrorKind.SYNTAX_ERROR
        if isinstance(stack[-1], Number):
            operands.append(stack.pop().value)
            continue

        # A nested subexpression has to be resolved before this operand is known
        nested, err = _pop_operator(stack)
        if err is not ErrorKind.NONE:
            return err
        pending.append((nested, []))
        if len(pending) - 1 > config.MAX_EXPRESSION_DEPTH:
            return ErrorKind.DEPTH_LIMIT_ERROR

    return ErrorKind.NONE


def evaluate(stack: list[Token]) -> tuple[float, ErrorKind]:
    """Reduce ``stack`` to a single value. The stack is consumed."""
    if len(stack) == 1 and isinstance(stack[0], Number):
        return stack.pop().value, ErrorKind.NONE

    err = reduce(stack)
    if err is not ErrorKind.NONE:
        return -1.0, err

    if len(stack) != 1:
        return -1.0, ErrorKind.SYNTAX_ERROR

    return stack.pop().value, ErrorKind.NONE
