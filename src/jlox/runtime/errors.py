from jlox.common.errors import LoxError
from jlox.parse.tokens import Token


class LoxRuntimeError(LoxError):
    pass


class TypeMismatch(LoxRuntimeError):
    def __init__(self, operator: Token, msg: str):
        super().__init__(msg, operator.line, operator.col)
        self.operator = operator
