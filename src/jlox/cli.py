import logging
from argparse import ArgumentParser
from os.path import isfile
from sys import exit
from typing import Optional

from jlox.parse.errors import ParseError
from jlox.parse.lexer import Lexer
from jlox.parse.parser import DEFAULT_MAX_DEPTH, Parser, max_depth_limit
from jlox.runtime.errors import LoxRuntimeError
from jlox.runtime.interpreter import Interpreter
from jlox.runtime.values import stringify

logger = logging.getLogger(__name__)

# sysexits.h
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70

arg_parser = ArgumentParser(description="Evaluate Lox expressions")
arg_parser.add_argument(
    "path", nargs="?", help="path to the code to evaluate; omit for a prompt"
)
arg_parser.add_argument(
    "-t", "--tokens", action="store_true", help="whether or not to show the tokens"
)
arg_parser.add_argument(
    "-a", "--ast", action="store_true", help="whether or not to show the ast"
)
arg_parser.add_argument(
    "--max-depth",
    type=int,
    default=DEFAULT_MAX_DEPTH,
    help="maximum nesting depth accepted by the parser",
)
arg_parser.add_argument(
    "-v", "--verbose", action="store_true", help="enable debug logging"
)


def run_source(
    src: str, show_tokens=False, show_ast=False, max_depth=DEFAULT_MAX_DEPTH
) -> int:
    try:
        result = Lexer().lex(src)
        if show_tokens:
            for tok in result.tokens:
                print(tok)
        if result.errors:
            for err in result.errors:
                print(f"syntax error: {err}")
            return EX_DATAERR

        ast = Parser(max_depth).parse(result.tokens)
        if show_ast:
            print(ast)

        print(stringify(Interpreter().evaluate(ast)))
    except ParseError as e:
        print(f"syntax error: {e}")
        return EX_DATAERR
    except LoxRuntimeError as e:
        print(f"runtime error: {e}")
        return EX_SOFTWARE
    return 0


def run_file(path: str, **opts) -> int:
    if not isfile(path):
        print("the path specified does not exist")
        return EX_NOINPUT
    try:
        with open(path, encoding="utf-8") as f:
            src = f.read()
    except UnicodeDecodeError:
        print("the file specified is not valid utf-8")
        return EX_DATAERR
    except OSError as e:
        print(f"the file specified could not be read: {e.strerror}")
        return EX_NOINPUT
    logger.debug("running %s (%d chars)", path, len(src))
    return run_source(src, **opts)


def run_prompt(**opts) -> int:
    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            return 0
        if not line.strip():
            continue
        # errors are reported and the prompt keeps going
        run_source(line, **opts)


def main(argv: Optional[list[str]] = None) -> int:
    args = arg_parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    if not 1 <= args.max_depth <= max_depth_limit():
        arg_parser.print_usage()
        print(f"--max-depth must be between 1 and {max_depth_limit()}")
        return EX_USAGE

    opts = dict(
        show_tokens=args.tokens, show_ast=args.ast, max_depth=args.max_depth
    )
    if args.path is None:
        return run_prompt(**opts)
    return run_file(args.path, **opts)


if __name__ == "__main__":
    exit(main())
