"""Board geometry and input-format constants shared across modules."""

import chess

__all__ = [
    "BOARD_SIZE",
    "ROW_LENGTH",
    "EMPTY_CELL",
    "KIND_CODES",
    "KIND_TO_CHESS",
    "on_board",
]

BOARD_SIZE = 8

# 8 one-character cells separated by single spaces
ROW_LENGTH = BOARD_SIZE * 2 - 1

EMPTY_CELL = "_"

# Lowercase letter codes used by the board files; uppercase marks Black.
# r=king, d=queen, a=bishop, c=knight, t=rook ("tower"), p=pawn
KIND_CODES: dict[str, str] = {
    "r": "king",
    "d": "queen",
    "a": "bishop",
    "c": "knight",
    "t": "rook",
    "p": "pawn",
}

KIND_TO_CHESS: dict[str, chess.PieceType] = {
    "king": chess.KING,
    "queen": chess.QUEEN,
    "bishop": chess.BISHOP,
    "knight": chess.KNIGHT,
    "rook": chess.ROOK,
    "pawn": chess.PAWN,
}


def on_board(x: int, y: int) -> bool:
    """True when (x, y) lies inside the 8x8 grid."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE
