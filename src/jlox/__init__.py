from typing import Tuple

from jlox.parse import nodes
from jlox.parse.errors import LexErrors
from jlox.parse.lexer import Lexer
from jlox.parse.parser import DEFAULT_MAX_DEPTH, Parser
from jlox.parse.tokens import Token
from jlox.runtime.interpreter import Interpreter
from jlox.runtime.values import Value


def run(
    src: str, max_depth: int = DEFAULT_MAX_DEPTH
) -> Tuple[list[Token], nodes.Expression, Value]:
    result = Lexer().lex(src)
    if result.errors:
        raise LexErrors(result.errors)
    ast = Parser(max_depth).parse(result.tokens)
    val = Interpreter().evaluate(ast)
    return result.tokens, ast, val


def evaluate(src: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    _, _, val = run(src, max_depth)
    return val
