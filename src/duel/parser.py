"""Board text parser: eight rows of space-separated cells into a two-piece Board."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from duel.constants import BOARD_SIZE, EMPTY_CELL, KIND_CODES, ROW_LENGTH
from duel.errors import (
    DuplicatePieceError,
    InvalidPieceError,
    MissingPieceError,
    RowCountError,
    RowLengthError,
)
from duel.types import Board, Color, Piece, PieceKind, Position

__all__ = ["BoardBuilder", "parse_board"]

logger = logging.getLogger(__name__)


@dataclass
class BoardBuilder:
    """Collects the two pieces while rows are scanned.

    Each slot may be filled once; a second fill for the same color is an error.
    """
    white: Piece | None = None
    black: Piece | None = None

    def place(self, kind: PieceKind, color: Color, position: Position) -> None:
        piece = Piece(kind, position, color)
        if color is Color.WHITE:
            if self.white is not None:
                raise DuplicatePieceError(Color.WHITE)
            self.white = piece
        else:
            if self.black is not None:
                raise DuplicatePieceError(Color.BLACK)
            self.black = piece
        logger.debug("placed %s (%s) at (%d, %d)", piece.symbol, piece.describe(), position.x, position.y)

    def build(self) -> Board:
        if self.white is None:
            raise MissingPieceError(Color.WHITE)
        if self.black is None:
            raise MissingPieceError(Color.BLACK)
        return Board(white=self.white, black=self.black)


def _parse_cell(token: str, row_index: int, col_index: int, builder: BoardBuilder) -> None:
    if len(token) != 1:
        raise InvalidPieceError(token)
    if token == EMPTY_CELL:
        return

    kind = PieceKind.from_code(token)
    if kind is None:
        raise InvalidPieceError(token)

    # Codes are stored lowercase; from_code already matched either case
    color = Color.WHITE if token in KIND_CODES else Color.BLACK
    builder.place(kind, color, Position(col_index, row_index))


def _parse_row(row: str, row_index: int, builder: BoardBuilder) -> None:
    if len(row) != ROW_LENGTH:
        raise RowLengthError(row_index, expected=ROW_LENGTH, actual=len(row))
    for col_index, token in enumerate(row.split()):
        _parse_cell(token, row_index, col_index, builder)


def parse_board(rows: Sequence[str]) -> Board:
    """Parse board rows into a Board.

    Validation stops at the first problem found, in this order: row count,
    then each row's length and cells top to bottom, then missing pieces
    (White before Black). Raises a BoardParseError subclass on failure.
    """
    if len(rows) != BOARD_SIZE:
        raise RowCountError(expected=BOARD_SIZE, actual=len(rows))

    builder = BoardBuilder()
    for row_index, row in enumerate(rows):
        _parse_row(row, row_index, builder)
    return builder.build()
