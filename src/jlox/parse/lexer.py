import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from jlox.common.errors import InternalError
from jlox.parse.errors import (
    LexError,
    MalformedNumber,
    UnrecognizedCharacter,
    UnterminatedString,
)
from jlox.parse.tokens import EQUAL_SUFFIXED, KEYWORDS, SYNTAX, Token, TokenKind

logger = logging.getLogger(__name__)


@dataclass
class LexerState:
    line: int
    col: int
    pos: int


@dataclass
class LexResult:
    tokens: list[Token] = field(default_factory=list)
    errors: list[LexError] = field(default_factory=list)

    @property
    def ok(self):
        return not self.errors


class Lexer:
    """Single-pass scanner that keeps going after errors.

    Every well-formed token is returned, terminated by an EOF token, together
    with every lexical error found along the way.
    """

    def __init__(self):
        self._src = ""
        self._line = 1
        self._col = 1
        self._pos = 0

    def lex(self, src: str) -> LexResult:
        self._src = src
        self._reset()
        result = LexResult()
        while not self._is_done():
            try:
                tok = self._lex_any()
            except LexError as e:
                result.errors.append(e)
                continue
            if tok:
                result.tokens.append(tok)
        result.tokens.append(Token(TokenKind.EOF, "", None, self._line, self._col))
        logger.debug(
            "lexed %d tokens with %d errors", len(result.tokens), len(result.errors)
        )
        return result

    def _reset(self):
        self._line = 1
        self._col = 1
        self._pos = 0

    def _lex_any(self) -> Optional[Token]:
        self._accept_run(str.isspace)
        if self._is_done():
            return None

        line, col = self._line, self._col
        backup = self._save()
        c = self._next()

        if is_alpha(c):
            self._restore(backup)
            return self._lex_identifier()
        elif is_digit(c):
            self._restore(backup)
            return self._lex_num_lit()
        elif c in SYNTAX:
            return Token(SYNTAX[c], c, None, line, col)
        elif c in EQUAL_SUFFIXED:
            single, double = EQUAL_SUFFIXED[c]
            if self._accept("="):
                return Token(double, c + "=", None, line, col)
            return Token(single, c, None, line, col)
        elif c == "/":
            if self._accept("/"):
                self._lex_line_comment()
                return None
            return Token(TokenKind.SLASH, c, None, line, col)
        elif c == '"':
            self._restore(backup)
            return self._lex_str_lit()
        else:
            raise UnrecognizedCharacter(c, line, col)

    def _lex_identifier(self):
        line, col = self._line, self._col
        word = self._accept_run(is_alpha)
        if word in KEYWORDS:
            return Token(KEYWORDS[word], word, None, line, col)
        return Token(TokenKind.IDENTIFIER, word, word, line, col)

    def _lex_line_comment(self):
        # the newline is left for the whitespace skipper
        self._accept_run(lambda c: c != "\n")

    def _lex_num_lit(self):
        line, col = self._line, self._col
        whole = self._accept_run(is_digit)
        if self._accept("."):
            whole = f"{whole}.{self._accept_run(is_digit)}"
        try:
            val = float(whole)
        except ValueError:
            raise MalformedNumber(whole, line, col)
        return Token(TokenKind.NUMBER, whole, val, line, col)

    def _lex_str_lit(self):
        line, col, init_pos = self._line, self._col, self._pos
        self._ignore()  # ignore opening quote
        in_escape = found_close = False

        while not self._is_done():
            c = self._next()
            if in_escape:
                in_escape = False
            elif c == "\\":
                in_escape = True
            elif c == '"':
                found_close = True
                break

        if not found_close:
            raise UnterminatedString(line, col)
        lexeme = self._src[init_pos : self._pos]
        # backslash pairs are kept as written; they only stop \" from closing
        return Token(TokenKind.STRING, lexeme, lexeme[1:-1], line, col)

    def _accept(self, expected: str):
        if not self._is_done() and self._peek() == expected:
            self._next()
            return True
        return False

    def _accept_run(self, pred: Callable[[str], bool]):
        chars: list[str] = []
        while not self._is_done():
            c = self._peek()
            if pred(c):
                self._next()
                chars.append(c)
            else:
                break
        return "".join(chars)

    def _peek(self):
        init_state = self._save()
        c = self._next()
        self._restore(init_state)
        return c

    def _next(self):
        if self._is_done():
            raise InternalError("lexer: next called on finished lexer")
        c = self._src[self._pos]
        self._pos += 1
        if c == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return c

    _ignore = _next  # alias for clarity

    def _save(self):
        return LexerState(self._line, self._col, self._pos)

    def _restore(self, state: LexerState):
        self._line = state.line
        self._col = state.col
        self._pos = state.pos

    def _is_done(self):
        return self._pos >= len(self._src)


def is_alpha(c: str):
    return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"


def is_digit(c: str):
    return c.isdigit()
