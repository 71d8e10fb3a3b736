"""Token and result types shared by every stage of the evaluation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ErrorKind(Enum):
    """Outcome of a fallible pipeline stage. ``NONE`` means success."""

    NONE = "none"
    SYNTAX_ERROR = "syntax_error"
    PARSE_NUMBER_ERROR = "parse_number_error"
    DEPTH_LIMIT_ERROR = "depth_limit_error"

    @property
    def code(self) -> str:
        """Upper-case error code used in machine-readable output."""
        return self.name


class OperatorKind(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"


class FunctionKind(Enum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    SQRT = "sqrt"
    LOG = "log"
    FLOOR = "floor"


@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class Operator:
    kind: OperatorKind
    precedence: int
    left_associative: bool

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class Function:
    kind: FunctionKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class OpenParen:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class CloseParen:
    def __str__(self) -> str:
        return ")"


Token = Union[Number, Operator, Function, OpenParen, CloseParen]

# Precedence (higher binds tighter) and associativity of every binary operator.
OPERATORS: dict[OperatorKind, Operator] = {
    OperatorKind.ADD: Operator(OperatorKind.ADD, 1, True),
    OperatorKind.SUB: Operator(OperatorKind.SUB, 1, True),
    OperatorKind.MUL: Operator(OperatorKind.MUL, 2, True),
    OperatorKind.DIV: Operator(OperatorKind.DIV, 2, True),
    OperatorKind.MOD: Operator(OperatorKind.MOD, 2, True),
    OperatorKind.POW: Operator(OperatorKind.POW, 3, False),
}


@dataclass
class EvalResult:
    """Result of evaluating an arithmetic expression."""

    ok: bool
    result: float | None = None
    error: str | None = None
    error_kind: ErrorKind = ErrorKind.NONE

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.error is not None:
            result_dict["error"] = self.error
            result_dict["error_code"] = self.error_kind.code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_kind={self.error_kind.name})"
        return f"EvalResult(ok={self.ok}, result={self.result!r})"
