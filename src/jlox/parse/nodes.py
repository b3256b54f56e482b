from dataclasses import dataclass
from json import dumps
from typing import Union

from jlox.parse.tokens import Token, TokenKind

Expression = Union["Literal", "Grouping", "Unary", "Binary"]


@dataclass(frozen=True)
class Node:
    line: int
    col: int


@dataclass(frozen=True)
class Literal(Node):
    token: Token

    def __str__(self):
        tok = self.token
        if tok.kind == TokenKind.STRING:
            return dumps(tok.literal)
        elif tok.kind == TokenKind.NUMBER:
            return format_number(tok.literal)
        return tok.lexeme

    __repr__ = __str__


@dataclass(frozen=True)
class Grouping(Node):
    expr: Expression

    def __str__(self):
        return f"({self.expr})"

    __repr__ = __str__


@dataclass(frozen=True)
class Unary(Node):
    operator: Token
    operand: Expression

    def __str__(self):
        return f"{self.operator.lexeme}{self.operand}"

    __repr__ = __str__


@dataclass(frozen=True)
class Binary(Node):
    left: Expression
    operator: Token
    right: Expression

    def __str__(self):
        # the left spine of a long chain is printed in a loop, not by recursion
        spine: list[Binary] = []
        cur: Expression = self
        while isinstance(cur, Binary):
            spine.append(cur)
            cur = cur.left
        parts = [str(cur)]
        for node in reversed(spine):
            parts.append(f" {node.operator.lexeme} {node.right}")
        return "".join(parts)

    __repr__ = __str__


def format_number(val: float):
    if val.is_integer():
        return str(int(val))
    return repr(val)
