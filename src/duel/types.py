"""Board value types: colors, piece kinds, positions, pieces and the two-piece board."""

import enum
from dataclasses import dataclass

import chess

from duel.constants import BOARD_SIZE, KIND_CODES, KIND_TO_CHESS

__all__ = [
    "Color",
    "PieceKind",
    "Position",
    "Piece",
    "Board",
]


class Color(enum.Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def forward(self) -> int:
        """Row step a pawn of this color advances by (row 0 is the first line)."""
        return -1 if self is Color.WHITE else 1

    @property
    def chess_color(self) -> chess.Color:
        return chess.WHITE if self is Color.WHITE else chess.BLACK


class PieceKind(enum.Enum):
    KING = "king"
    QUEEN = "queen"
    BISHOP = "bishop"
    KNIGHT = "knight"
    ROOK = "rook"
    PAWN = "pawn"

    @classmethod
    def from_code(cls, code: str) -> "PieceKind | None":
        """Kind for a board letter of either case, or None for unknown letters."""
        if not code.isascii():
            return None
        name = KIND_CODES.get(code.lower())
        return cls(name) if name is not None else None

    @property
    def code(self) -> str:
        """Lowercase board letter for this kind."""
        return next(c for c, name in KIND_CODES.items() if name == self.value)

    @property
    def chess_piece_type(self) -> chess.PieceType:
        return KIND_TO_CHESS[self.value]


@dataclass(frozen=True)
class Position:
    """Cell coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at the first line of the board text).
    """

    x: int
    y: int

    @property
    def square(self) -> chess.Square:
        """python-chess square; the first text row is rank 8."""
        return chess.square(self.x, BOARD_SIZE - 1 - self.y)

    @property
    def name(self) -> str:
        return chess.square_name(self.square)


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    position: Position
    color: Color

    @property
    def symbol(self) -> str:
        """Board letter: lowercase for White, uppercase for Black."""
        code = self.kind.code
        return code if self.color is Color.WHITE else code.upper()

    def describe(self) -> str:
        return f"{self.color.value} {self.kind.value} on {self.position.name}"


@dataclass(frozen=True)
class Board:
    white: Piece
    black: Piece
