"""Error codes and the exception raised when the game cannot proceed."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Reasons the game stops before or while running."""

    BAD_ARG = 1
    EXTENSION_ERROR = 2
    NOFILE_ERROR = 3
    EMPTY_MAP = 4
    INVALID_MAP = 5
    BAD_ROW = 6
    NO_WALLS = 7
    INVALID_ELEMENT = 8
    ELEMENT_ERROR = 9
    IMPOSIBLE_WIN = 10
    MLX_FAIL = 11


class GameError(Exception):
    """Raised with an ErrorCode describing what went wrong."""

    def __init__(self, code: ErrorCode | int) -> None:
        self.code = ErrorCode(code)
        super().__init__(f"{self.code.name} (error {int(self.code)})")