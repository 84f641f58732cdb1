"""Render a duel Board through python-chess for human-readable output."""

import chess

from duel.types import Board


def to_chess_board(board: Board) -> chess.Board:
    """Empty chess.Board holding just the two duel pieces.

    The first text row becomes rank 8, so the diagram reads like the input file.
    """
    cb = chess.Board(None)
    for piece in (board.white, board.black):
        cb.set_piece_at(
            piece.position.square,
            chess.Piece(piece.kind.chess_piece_type, piece.color.chess_color),
        )
    return cb
