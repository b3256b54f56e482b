import logging
import sys
from contextlib import contextmanager

from jlox.common.errors import InternalError
from jlox.parse import nodes
from jlox.parse.errors import (
    ExpectedExpression,
    MissingClosingParen,
    NestingTooDeep,
    UnexpectedToken,
)
from jlox.parse.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64


def max_depth_limit():
    # each nesting level costs about eight Python frames in the parser
    return sys.getrecursionlimit() // 12


class Parser:
    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        limit = max_depth_limit()
        if not 1 <= max_depth <= limit:
            raise ValueError(f"max_depth must be between 1 and {limit}, got {max_depth}")
        self._tokens: list[Token] = []
        self._pos = 0
        self._depth = 0
        self._max_depth = max_depth

    # Program = Expression EOF
    def parse(self, tokens: list[Token]) -> nodes.Expression:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise InternalError("parser: token stream must end with EOF")
        self._tokens = tokens
        self._reset()

        expr = self._parse_expression()
        if not self._is_done():
            raise UnexpectedToken(self._peek())
        logger.debug(
            "parsed %s expression from %d tokens", type(expr).__name__, len(tokens)
        )
        return expr

    def _reset(self):
        self._pos = 0
        self._depth = 0

    # Expression = Equality
    def _parse_expression(self) -> nodes.Expression:
        return self._parse_equality()

    # Equality = Comparison { ( "!=" | "==" ) Comparison }
    def _parse_equality(self):
        expr = self._parse_comparison()
        while self._lookahead(TokenKind.BANG_EQUAL, TokenKind.EQUAL_EQUAL):
            op = self._next()
            right = self._parse_comparison()
            expr = nodes.Binary(expr.line, expr.col, expr, op, right)
        return expr

    # Comparison = Term { ( ">" | ">=" | "<" | "<=" ) Term }
    def _parse_comparison(self):
        expr = self._parse_term()
        while self._lookahead(
            TokenKind.GREATER,
            TokenKind.GREATER_EQUAL,
            TokenKind.LESS,
            TokenKind.LESS_EQUAL,
        ):
            op = self._next()
            right = self._parse_term()
            expr = nodes.Binary(expr.line, expr.col, expr, op, right)
        return expr

    # Term = Factor { ( "-" | "+" ) Factor }
    def _parse_term(self):
        expr = self._parse_factor()
        while self._lookahead(TokenKind.MINUS, TokenKind.PLUS):
            op = self._next()
            right = self._parse_factor()
            expr = nodes.Binary(expr.line, expr.col, expr, op, right)
        return expr

    # Factor = Unary { ( "/" | "*" ) Unary }
    def _parse_factor(self):
        expr = self._parse_unary()
        while self._lookahead(TokenKind.SLASH, TokenKind.STAR):
            op = self._next()
            right = self._parse_unary()
            expr = nodes.Binary(expr.line, expr.col, expr, op, right)
        return expr

    # Unary = ( "!" | "-" ) Unary | Primary
    def _parse_unary(self) -> nodes.Expression:
        if self._lookahead(TokenKind.BANG, TokenKind.MINUS):
            op = self._next()
            with self._nested(op):
                operand = self._parse_unary()
            return nodes.Unary(op.line, op.col, op, operand)
        return self._parse_primary()

    # Primary = NUMBER | STRING | "true" | "false" | "nil" | "(" Expression ")"
    def _parse_primary(self):
        tok = self._peek()
        if tok.kind in (
            TokenKind.NUMBER,
            TokenKind.STRING,
            TokenKind.TRUE,
            TokenKind.FALSE,
            TokenKind.NIL,
        ):
            self._ignore()
            return nodes.Literal(tok.line, tok.col, tok)
        elif tok.kind == TokenKind.LEFT_PAREN:
            self._ignore()
            with self._nested(tok):
                expr = self._parse_expression()
            self._consume(TokenKind.RIGHT_PAREN)
            return nodes.Grouping(tok.line, tok.col, expr)
        else:
            raise ExpectedExpression(tok)

    @contextmanager
    def _nested(self, tok: Token):
        if self._depth >= self._max_depth:
            raise NestingTooDeep(tok, self._max_depth)
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def _consume(self, kind: TokenKind):
        tok = self._peek()
        if tok.kind != kind:
            if kind == TokenKind.RIGHT_PAREN:
                raise MissingClosingParen(tok)
            raise UnexpectedToken(tok)
        return self._next()

    def _lookahead(self, *args: TokenKind):
        return self._peek().kind in args

    def _peek(self):
        return self._tokens[self._pos]

    def _next(self):
        tok = self._tokens[self._pos]
        if tok.kind == TokenKind.EOF:
            raise InternalError("parser: advanced past EOF")
        self._pos += 1
        return tok

    _ignore = _next  # alias for clarity

    def _is_done(self):
        return self._peek().kind == TokenKind.EOF
