from typing import Union

from jlox.common.errors import InternalError
from jlox.parse.nodes import format_number

Value = Union[float, str, bool, None]


def is_number(val: Value):
    return type(val) is float


def is_string(val: Value):
    return type(val) is str


def is_truthy(val: Value):
    # nil and false are the only falsy values
    return val is not None and val is not False


def values_equal(a: Value, b: Value):
    # bool is an int subclass in Python, so compare kinds first
    return type(a) is type(b) and a == b


def type_name(val: Value):
    if val is None:
        return "nil"
    elif isinstance(val, bool):
        return "boolean"
    elif isinstance(val, float):
        return "number"
    elif isinstance(val, str):
        return "string"
    raise InternalError(f"not a lox value: {type(val).__name__}")


def stringify(val: Value):
    if val is None:
        return "nil"
    elif isinstance(val, bool):
        return "true" if val else "false"
    elif isinstance(val, float):
        return format_number(val)
    elif isinstance(val, str):
        return val
    raise InternalError(f"not a lox value: {type(val).__name__}")
