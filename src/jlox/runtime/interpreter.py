import logging
import math
import operator
from typing import Callable

from jlox.common.errors import InternalError
from jlox.parse import nodes
from jlox.parse.tokens import Token, TokenKind
from jlox.runtime.errors import TypeMismatch
from jlox.runtime.values import (
    Value,
    is_number,
    is_string,
    is_truthy,
    type_name,
    values_equal,
)

logger = logging.getLogger(__name__)


def _divide(a: float, b: float):
    try:
        return a / b
    except ZeroDivisionError:
        # IEEE-754: x/0 is a signed infinity, 0/0 is nan
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


ARITHMETIC_OPS: dict[TokenKind, Callable[[float, float], float]] = {
    TokenKind.MINUS: operator.sub,
    TokenKind.STAR: operator.mul,
    TokenKind.SLASH: _divide,
}

COMPARISON_OPS: dict[TokenKind, Callable[[float, float], bool]] = {
    TokenKind.GREATER: operator.gt,
    TokenKind.GREATER_EQUAL: operator.ge,
    TokenKind.LESS: operator.lt,
    TokenKind.LESS_EQUAL: operator.le,
}


class Interpreter:
    """Tree-walking evaluator for expression trees.

    Holds no state between calls; evaluating the same tree twice gives the
    same result.
    """

    def evaluate(self, expr: nodes.Expression) -> Value:
        val = self._evaluate_expr(expr)
        logger.debug(
            "evaluated %s expression to %s", type(expr).__name__, type_name(val)
        )
        return val

    def _evaluate_expr(self, expr: nodes.Expression) -> Value:
        if isinstance(expr, nodes.Literal):
            return self._evaluate_literal_expr(expr)
        elif isinstance(expr, nodes.Grouping):
            return self._evaluate_expr(expr.expr)
        elif isinstance(expr, nodes.Unary):
            return self._evaluate_unary_expr(expr)
        elif isinstance(expr, nodes.Binary):
            return self._evaluate_binary_expr(expr)
        else:
            raise InternalError(f"unhandled expr node type: {type(expr).__name__}")

    def _evaluate_literal_expr(self, lit: nodes.Literal) -> Value:
        kind = lit.token.kind
        if kind == TokenKind.NUMBER or kind == TokenKind.STRING:
            return lit.token.literal
        elif kind == TokenKind.TRUE:
            return True
        elif kind == TokenKind.FALSE:
            return False
        elif kind == TokenKind.NIL:
            return None
        else:
            raise InternalError(f"unhandled literal token kind: {kind}")

    def _evaluate_unary_expr(self, unary: nodes.Unary) -> Value:
        operand = self._evaluate_expr(unary.operand)
        op = unary.operator
        if op.kind == TokenKind.MINUS:
            if not is_number(operand):
                raise TypeMismatch(
                    op, f"- requires a number, got {type_name(operand)}"
                )
            return -operand
        elif op.kind == TokenKind.BANG:
            return not is_truthy(operand)
        else:
            raise InternalError(f"unhandled unary operator: {op.kind}")

    def _evaluate_binary_expr(self, binary: nodes.Binary) -> Value:
        # Walk down the left spine so that long same-precedence chains such as
        # 1 + 2 + 3 + ... are folded in a loop rather than by recursion.
        spine: list[nodes.Binary] = []
        cur: nodes.Expression = binary
        while isinstance(cur, nodes.Binary):
            spine.append(cur)
            cur = cur.left

        val = self._evaluate_expr(cur)
        for node in reversed(spine):
            right = self._evaluate_expr(node.right)
            val = self._apply_binary_op(node.operator, val, right)
        return val

    def _apply_binary_op(self, op: Token, left: Value, right: Value) -> Value:
        if op.kind == TokenKind.PLUS:
            if is_number(left) and is_number(right):
                return left + right
            elif is_string(left) and is_string(right):
                return left + right
            raise TypeMismatch(
                op,
                "+ requires two numbers or two strings, "
                f"got {type_name(left)} and {type_name(right)}",
            )
        elif op.kind in ARITHMETIC_OPS or op.kind in COMPARISON_OPS:
            if not (is_number(left) and is_number(right)):
                raise TypeMismatch(
                    op,
                    f"{op.lexeme} requires two numbers, "
                    f"got {type_name(left)} and {type_name(right)}",
                )
            fn = ARITHMETIC_OPS.get(op.kind) or COMPARISON_OPS[op.kind]
            return fn(left, right)
        elif op.kind == TokenKind.EQUAL_EQUAL:
            return values_equal(left, right)
        elif op.kind == TokenKind.BANG_EQUAL:
            return not values_equal(left, right)
        else:
            raise InternalError(f"unhandled binary operator: {op.kind}")
