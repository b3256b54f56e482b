from typing import Optional


class InternalError(Exception):
    def __init__(self, msg: str):
        super().__init__(f"internal error: {msg}")


class LoxError(Exception):
    """Base class for every error caused by user input."""

    def __init__(self, msg: str, line: Optional[int] = -1, col: Optional[int] = -1):
        super().__init__(msg if line == -1 or col == -1 else f"{line}:{col}: {msg}")
        self.msg = msg
        self.line = line
        self.col = col
