from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


class TokenKind(Enum):
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    IDENTIFIER = auto()  # alphabetic identifier
    STRING = auto()  # quoted string literal
    NUMBER = auto()  # decimal number literal

    AND = auto()  # and
    CLASS = auto()  # class
    ELSE = auto()  # else
    FALSE = auto()  # false
    FUN = auto()  # fun
    FOR = auto()  # for
    IF = auto()  # if
    NIL = auto()  # nil
    OR = auto()  # or
    PRINT = auto()  # print
    RETURN = auto()  # return
    SUPER = auto()  # super
    THIS = auto()  # this
    TRUE = auto()  # true
    VAR = auto()  # var
    WHILE = auto()  # while

    EOF = auto()

    def __str__(self):
        return self.name

    __repr__ = __str__


LiteralValue = Union[float, str]


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    literal: Optional[LiteralValue] = None
    line: int = -1
    col: int = -1

    def __str__(self):
        return f"<{self.kind} {self.lexeme!r} at {self.line}:{self.col}>"

    __repr__ = __str__


KEYWORDS = {
    "and": TokenKind.AND,
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "fun": TokenKind.FUN,
    "for": TokenKind.FOR,
    "if": TokenKind.IF,
    "nil": TokenKind.NIL,
    "or": TokenKind.OR,
    "print": TokenKind.PRINT,
    "return": TokenKind.RETURN,
    "super": TokenKind.SUPER,
    "this": TokenKind.THIS,
    "true": TokenKind.TRUE,
    "var": TokenKind.VAR,
    "while": TokenKind.WHILE,
}

SYNTAX = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

# single-character kind, kind when followed by "="
EQUAL_SUFFIXED = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}
