"""Tests for failure modes and awkward input handling."""

import pytest

from erebus_pkg import config
from erebus_pkg.api import evaluate
from erebus_pkg.solver import ERROR_SENTINEL
from erebus_pkg.solver import evaluate as solve
from erebus_pkg.types import ErrorKind


class TestInputFailures:
    """Malformed input is reported as a value, never raised."""

    @pytest.mark.parametrize(
        "source",
        ["", " ", "\t\n", ",,,", "()", "(())"],
    )
    def test_empty_expressions(self, source):
        assert solve(source) == (ERROR_SENTINEL, ErrorKind.SYNTAX_ERROR)

    @pytest.mark.parametrize("source", ["π", "2 × 3", "√4", "½", "1 ² "])
    def test_non_ascii_input(self, source):
        _, err = solve(source)
        assert err in (ErrorKind.SYNTAX_ERROR, ErrorKind.PARSE_NUMBER_ERROR)

    def test_huge_literal(self):
        assert solve("1" * 500 + " + 1")[1] == ErrorKind.PARSE_NUMBER_ERROR

    def test_unknown_word_in_the_middle(self):
        assert solve("sin(1) + cosh(1)")[1] == ErrorKind.SYNTAX_ERROR

    def test_unary_minus_after_paren_only(self):
        assert solve("(-3) * 2") == (-6.0, ErrorKind.NONE)
        assert solve("3 * (-2)") == (-6.0, ErrorKind.NONE)
        assert solve("3 * -2") == (ERROR_SENTINEL, ErrorKind.SYNTAX_ERROR)
        assert solve("(- 3)") == (ERROR_SENTINEL, ErrorKind.SYNTAX_ERROR)


class TestResourceLimits:
    """Deep input is reduced without growing the interpreter call stack."""

    def test_deep_parentheses(self):
        source = "(" * 2000 + "7" + ")" * 2000
        assert solve(source) == (7.0, ErrorKind.NONE)

    def test_deep_function_nesting(self):
        source = "sqrt(" * 1000 + "16" + ")" * 1000
        result = evaluate(source)
        assert result.ok is True
        assert result.result == 1.0

    def test_long_flat_chain(self):
        source = " * ".join(["1"] * 5000)
        assert solve(source) == (1.0, ErrorKind.NONE)

    def test_nesting_beyond_limit(self, monkeypatch):
        monkeypatch.setattr(config, "MAX_EXPRESSION_DEPTH", 500)
        source = "floor(" * 1000 + "2.5" + ")" * 1000
        result = evaluate(source)
        assert result.ok is False
        assert result.error_kind is ErrorKind.DEPTH_LIMIT_ERROR

    def test_right_associative_chain(self):
        # 1 ^ 1 ^ ... nests on the first operand instead of the second
        source = " ^ ".join(["1"] * 150)
        assert solve(source) == (1.0, ErrorKind.NONE)
