"""Tests for the tree-walking evaluator."""

import math

import pytest

from jlox.common.errors import InternalError
from jlox.parse import nodes
from jlox.parse.lexer import Lexer
from jlox.parse.parser import Parser
from jlox.parse.tokens import Token, TokenKind
from jlox.runtime.errors import TypeMismatch
from jlox.runtime.interpreter import Interpreter


def parse(src: str) -> nodes.Expression:
    return Parser().parse(Lexer().lex(src).tokens)


def evaluate(src: str):
    return Interpreter().evaluate(parse(src))


class TestLiterals:
    def test_number(self) -> None:
        val = evaluate("42")
        assert val == 42.0
        assert type(val) is float

    def test_string(self) -> None:
        assert evaluate('"hi there"') == "hi there"

    def test_keywords(self) -> None:
        assert evaluate("true") is True
        assert evaluate("false") is False
        assert evaluate("nil") is None

    def test_grouping_is_transparent(self) -> None:
        assert evaluate("((7))") == 7.0


class TestArithmetic:
    @pytest.mark.parametrize(
        "src,expected",
        [
            ("1 + 2", 3.0),
            ("2 * (3 + 4)", 14.0),
            ("1 + 2 * 3", 7.0),
            ("10 - 4 - 3", 3.0),
            ("8 / 4 / 2", 1.0),
            ("7 / 2", 3.5),
            ("-5", -5.0),
            ("--5", 5.0),
            ("-(2 - 5)", 3.0),
        ],
    )
    def test_numbers(self, src: str, expected: float) -> None:
        assert evaluate(src) == expected

    def test_concatenation(self) -> None:
        assert evaluate('"a" + "b"') == "ab"
        assert evaluate('"" + ""') == ""

    def test_division_by_zero(self) -> None:
        assert evaluate("1 / 0") == math.inf
        assert evaluate("-1 / 0") == -math.inf
        assert evaluate("1 / -0") == -math.inf
        assert math.isnan(evaluate("0 / 0"))

    def test_nan_is_not_equal_to_itself(self) -> None:
        assert evaluate("0 / 0 == 0 / 0") is False
        assert evaluate("0 / 0 != 0 / 0") is True
        assert evaluate("0 / 0 < 1") is False

    def test_long_flat_chain(self) -> None:
        assert evaluate(" + ".join(["1"] * 5000)) == 5000.0


class TestLogic:
    @pytest.mark.parametrize(
        "src,expected",
        [
            ("!true", False),
            ("!false", True),
            ("!nil", True),
            ("!0", False),
            ('!""', False),
            ("!!nil", False),
            ("!!1", True),
        ],
    )
    def test_not_uses_truthiness(self, src: str, expected: bool) -> None:
        assert evaluate(src) is expected

    @pytest.mark.parametrize(
        "src,expected",
        [
            ("1 < 2", True),
            ("2 <= 2", True),
            ("3 > 4", False),
            ("4 >= 4.5", False),
            ("1 == 1.0", True),
            ('1 == "1"', False),
            ("nil == nil", True),
            ("nil == false", False),
            ("true == 1", False),
            ("false == 0", False),
            ('"a" != "b"', True),
            ('"a" == "a"', True),
            ("true != true", False),
        ],
    )
    def test_comparison_and_equality(self, src: str, expected: bool) -> None:
        assert evaluate(src) is expected


class TestTypeMismatch:
    def test_plus_mixed(self) -> None:
        with pytest.raises(TypeMismatch) as exc_info:
            evaluate('"a" + 1')
        err = exc_info.value
        assert err.operator.kind == TokenKind.PLUS
        assert err.msg.startswith("+ requires two numbers or two strings")
        assert (err.line, err.col) == (1, 5)

    def test_negate_string(self) -> None:
        with pytest.raises(TypeMismatch) as exc_info:
            evaluate('-"a"')
        assert exc_info.value.msg.startswith("- requires a number")

    @pytest.mark.parametrize(
        "src",
        ['"a" - "b"', "1 * nil", "true / 2", '"a" < "b"', "true > 1", "nil <= nil"],
    )
    def test_numeric_operators(self, src: str) -> None:
        with pytest.raises(TypeMismatch):
            evaluate(src)

    def test_first_failure_wins(self) -> None:
        with pytest.raises(TypeMismatch) as exc_info:
            evaluate('"a" * 1 + nil')
        assert exc_info.value.operator.kind == TokenKind.STAR

    def test_left_operand_evaluated_first(self) -> None:
        with pytest.raises(TypeMismatch) as exc_info:
            evaluate('(1 + "a") == -"b"')
        assert exc_info.value.operator.kind == TokenKind.PLUS

    def test_equality_never_fails(self) -> None:
        assert evaluate('"a" == nil') is False


class TestProperties:
    def test_idempotent(self) -> None:
        interpreter = Interpreter()
        for src in ["1 + 2 * 3", '"x" + "y"', "!nil == true", "1 / 0"]:
            ast = parse(src)
            assert interpreter.evaluate(ast) == interpreter.evaluate(ast)

    @pytest.mark.parametrize(
        "numeral", ["0", "1", "42", "3.14", "0.1", "2.5", "123456789.987654321"]
    )
    def test_numeral_round_trip(self, numeral: str) -> None:
        assert evaluate(numeral) == float(numeral)

    def test_unknown_node_is_internal(self) -> None:
        with pytest.raises(InternalError):
            Interpreter().evaluate("1 + 2")

    def test_unknown_operator_is_internal(self) -> None:
        one = nodes.Literal(1, 1, Token(TokenKind.NUMBER, "1", 1.0, 1, 1))
        bogus = Token(TokenKind.COMMA, ",", None, 1, 2)
        with pytest.raises(InternalError):
            Interpreter().evaluate(nodes.Binary(1, 1, one, bogus, one))
        with pytest.raises(InternalError):
            Interpreter().evaluate(nodes.Unary(1, 1, bogus, one))
