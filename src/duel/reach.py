"""Capture reachability: can one piece's movement pattern land on the other's square.

Only two pieces exist, so nothing ever blocks a line; sliders reach every
square along their rays up to the board edge.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from duel.constants import BOARD_SIZE, on_board
from duel.types import Board, Piece, PieceKind, Position

__all__ = ["can_capture", "evaluate"]

logger = logging.getLogger(__name__)

_DIAGONAL = [(1, 1), (1, -1), (-1, 1), (-1, -1)]

# (dx, dy) pairs grouped by quadrant: up-left, up-right, down-left, down-right
_KNIGHT_JUMPS = [
    (-1, -2), (-2, -1),
    (1, -2), (2, -1),
    (-1, 2), (-2, 1),
    (1, 2), (2, 1),
]


def _walk_ray(start: Position, direction: tuple[int, int]) -> Iterator[Position]:
    """Yield every on-board square from start (exclusive) along direction."""
    dx, dy = direction
    x, y = start.x + dx, start.y + dy
    while on_board(x, y):
        yield Position(x, y)
        x += dx
        y += dy


def _king_reaches(a: Position, t: Position) -> bool:
    # The attacker's own square counts as reached.
    return abs(a.x - t.x) <= 1 and abs(a.y - t.y) <= 1


def _rook_reaches(a: Position, t: Position) -> bool:
    return a.x == t.x or a.y == t.y


def _bishop_reaches(a: Position, t: Position) -> bool:
    return any(t in _walk_ray(a, d) for d in _DIAGONAL)


def _queen_reaches(a: Position, t: Position) -> bool:
    return _rook_reaches(a, t) or _bishop_reaches(a, t)


def _knight_reaches(a: Position, t: Position) -> bool:
    for dx, dy in _KNIGHT_JUMPS:
        x, y = a.x + dx, a.y + dy
        if on_board(x, y) and (x, y) == (t.x, t.y):
            return True
    return False


def _pawn_reaches_strict(attacker: Piece, t: Position) -> bool:
    """One forward diagonal step that lands on the board."""
    a = attacker.position
    y = a.y + attacker.color.forward
    for dx in (-1, 1):
        x = a.x + dx
        if on_board(x, y) and (x, y) == (t.x, t.y):
            return True
    return False


def _pawn_reaches(attacker: Piece, t: Position) -> bool:
    """Edge-file pawns reach the whole neighbouring file, whatever the row.

    Pawns off the edge files take one forward diagonal step.
    """
    a = attacker.position
    if a.x == 0:
        return t.x == 1
    if a.x == BOARD_SIZE - 1:
        return t.x == BOARD_SIZE - 2
    return _pawn_reaches_strict(attacker, t)


_REACH = {
    PieceKind.KING: _king_reaches,
    PieceKind.QUEEN: _queen_reaches,
    PieceKind.BISHOP: _bishop_reaches,
    PieceKind.KNIGHT: _knight_reaches,
    PieceKind.ROOK: _rook_reaches,
}


def can_capture(attacker: Piece, target: Piece, *, strict_pawn_edges: bool = False) -> bool:
    """True when attacker's movement pattern reaches target's square."""
    if attacker.kind is PieceKind.PAWN:
        pawn_rule = _pawn_reaches_strict if strict_pawn_edges else _pawn_reaches
        result = pawn_rule(attacker, target.position)
    else:
        result = _REACH[attacker.kind](attacker.position, target.position)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%s %s %s",
            attacker.describe(),
            "reaches" if result else "does not reach",
            target.describe(),
        )
    return result


def evaluate(board: Board, *, strict_pawn_edges: bool = False) -> tuple[bool, bool]:
    """Return (white_can_capture, black_can_capture)."""
    return (
        can_capture(board.white, board.black, strict_pawn_edges=strict_pawn_edges),
        can_capture(board.black, board.white, strict_pawn_edges=strict_pawn_edges),
    )
