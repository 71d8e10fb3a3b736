"""Test that API functions return typed dataclasses."""

import math

from erebus_pkg.api import error_message, evaluate, validate_expression
from erebus_pkg.types import ErrorKind, EvalResult


class TestAPITypedReturns:
    """Test that all API functions return typed values."""

    def test_evaluate_returns_eval_result(self):
        """Test that evaluate() returns EvalResult."""
        result = evaluate("2 + 2")
        assert isinstance(result, EvalResult)
        assert result.ok is True
        assert result.result == 4.0
        assert result.error is None
        assert result.error_kind is ErrorKind.NONE

    def test_evaluate_error_returns_eval_result(self):
        """Test that evaluate() errors return EvalResult."""
        result = evaluate("2 & 3")
        assert isinstance(result, EvalResult)
        assert result.ok is False
        assert result.result is None
        assert result.error == "Syntax Error"
        assert result.error_kind is ErrorKind.SYNTAX_ERROR

    def test_parse_number_error_message(self):
        result = evaluate(".")
        assert result.ok is False
        assert result.error == "Parse Number Error"
        assert result.error_kind is ErrorKind.PARSE_NUMBER_ERROR

    def test_special_values_are_successes(self):
        result = evaluate("0 / 0")
        assert result.ok is True
        assert math.isnan(result.result)

    def test_validate_expression_returns_tuple(self):
        """Test that validate_expression() returns tuple."""
        assert validate_expression("2 + 2") == (True, None)
        assert validate_expression("(2 + 2") == (False, "Syntax Error")
        assert validate_expression("2 # 2") == (False, "Syntax Error")

    def test_validate_does_not_check_arity(self):
        # operand counts are only checked during evaluation
        assert validate_expression("2 +") == (True, None)
        assert evaluate("2 +").ok is False

    def test_error_message(self):
        assert error_message(ErrorKind.DEPTH_LIMIT_ERROR) == "Expression too deeply nested"
        assert error_message(ErrorKind.NONE) == "Unknown error"


class TestResultSerialization:
    """Test EvalResult.to_dict and repr."""

    def test_success_to_dict(self):
        assert evaluate("(2 + 3) * 4").to_dict() == {"ok": True, "result": 20.0}

    def test_error_to_dict(self):
        assert evaluate("2 + 3)").to_dict() == {
            "ok": False,
            "error": "Syntax Error",
            "error_code": "SYNTAX_ERROR",
        }

    def test_repr(self):
        assert repr(evaluate("1 + 1")) == "EvalResult(ok=True, result=2.0)"
        assert repr(evaluate("1 +")) == (
            "EvalResult(ok=False, error='Syntax Error', error_kind=SYNTAX_ERROR)"
        )
