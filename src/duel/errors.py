"""Error types raised while loading and parsing board files.

Every message starts with ``ERROR: `` so the CLI can print ``str(exc)`` as-is.
"""

from duel.types import Color


class DuelError(Exception):
    """Base class for all errors reported to the user."""


class BoardFileError(DuelError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"ERROR: {reason}")


class BoardParseError(DuelError, ValueError):
    """Board text does not describe a valid two-piece board."""


class RowCountError(BoardParseError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"ERROR: Table formatted incorrectly. Table has {actual} rows, expected {expected}"
        )


class RowLengthError(BoardParseError):
    def __init__(self, row_index: int, expected: int, actual: int):
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"ERROR: Table formatted incorrectly. Row number {row_index} "
            f"has {actual} characters, expected {expected}"
        )


class InvalidPieceError(BoardParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"ERROR: Invalid piece: {token}")


class DuplicatePieceError(BoardParseError):
    def __init__(self, color: Color):
        self.color = color
        super().__init__(f"ERROR: More than one {color.value} piece inserted")


class MissingPieceError(BoardParseError):
    def __init__(self, color: Color):
        self.color = color
        super().__init__(f"ERROR: No {color.value} piece inserted")
