from jlox.common.errors import LoxError
from jlox.parse.tokens import Token


class LexError(LoxError):
    pass


class UnrecognizedCharacter(LexError):
    def __init__(self, char: str, line: int, col: int):
        super().__init__(f"unrecognized character {char!r}", line, col)
        self.char = char


class UnterminatedString(LexError):
    def __init__(self, line: int, col: int):
        super().__init__("unterminated string literal", line, col)


class MalformedNumber(LexError):
    def __init__(self, text: str, line: int, col: int):
        super().__init__(f"malformed number literal {text!r}", line, col)
        self.text = text


class LexErrors(LoxError):
    """Raised by the pipeline when scanning reported one or more errors."""

    def __init__(self, errors: list[LexError]):
        first = errors[0]
        more = f" (and {len(errors) - 1} more)" if len(errors) > 1 else ""
        super().__init__(f"{first.msg}{more}", first.line, first.col)
        self.errors = errors


class ParseError(LoxError):
    def __init__(self, msg: str, token: Token):
        super().__init__(msg, token.line, token.col)
        self.token = token


class ExpectedExpression(ParseError):
    def __init__(self, token: Token):
        super().__init__(f"expected expression, found {describe(token)}", token)


class MissingClosingParen(ParseError):
    def __init__(self, token: Token):
        super().__init__(
            f"expected ')' after expression, found {describe(token)}", token
        )


class UnexpectedToken(ParseError):
    def __init__(self, token: Token):
        super().__init__(
            f"unexpected {describe(token)} after end of expression", token
        )


class NestingTooDeep(ParseError):
    def __init__(self, token: Token, max_depth: int):
        super().__init__(
            f"expression nested more than {max_depth} levels deep", token
        )
        self.max_depth = max_depth


def describe(token: Token) -> str:
    if not token.lexeme:
        return "end of input"
    return f"{token.lexeme!r}"
