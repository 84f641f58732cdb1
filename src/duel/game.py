"""Outcome of a two-piece duel: who can capture whom."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from duel.parser import parse_board
from duel.reach import evaluate


class Outcome(enum.Enum):
    DRAW = "E"        # both can capture
    WHITE_WINS = "B"
    BLACK_WINS = "N"
    NEITHER = "P"     # neither can capture

    @property
    def code(self) -> str:
        return self.value


def outcome_for(white_can_capture: bool, black_can_capture: bool) -> Outcome:
    if white_can_capture and black_can_capture:
        return Outcome.DRAW
    if white_can_capture:
        return Outcome.WHITE_WINS
    if black_can_capture:
        return Outcome.BLACK_WINS
    return Outcome.NEITHER


def play_game(rows: Sequence[str], *, strict_pawn_edges: bool = False) -> Outcome:
    """Parse rows and decide the outcome. Parse errors propagate."""
    board = parse_board(rows)
    return outcome_for(*evaluate(board, strict_pawn_edges=strict_pawn_edges))
