"""Decide a two-piece duel from a board file.

Usage:
    python -m duel.cli <file.txt> [--json] [--show] [--strict-pawn-edges]
        [--log-level LEVEL]

Prints one outcome code: E (draw), B (white wins), N (black wins),
P (neither captures). Errors go to stderr and exit with status 1.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from duel.boardfile import read_board_file
from duel.config import Settings
from duel.diagram import to_chess_board
from duel.errors import DuelError
from duel.game import outcome_for
from duel.parser import parse_board
from duel.reach import evaluate

logger = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="duel",
        description="Decide which of two pieces can capture the other",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("board", help="Board file (8 rows of 8 space-separated cells)")
    parser.add_argument(
        "--json", action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--show", action="store_true",
        help="Print a board diagram before the result",
    )
    parser.add_argument(
        "--strict-pawn-edges", action="store_true", default=None,
        help="Edge-file pawns capture one forward diagonal step only",
    )
    parser.add_argument(
        "--log-level", choices=_LOG_LEVELS, type=str.upper,
        help="Logging level (default: DUEL_LOG_LEVEL or WARNING)",
    )
    return parser


def run(args: argparse.Namespace, settings: Settings) -> str:
    """Execute one duel and return the text to print. Raises DuelError."""
    if settings.require_txt_suffix and not args.board.endswith(".txt"):
        raise DuelError("ERROR: Arguments should be entered in format: <file.txt>")

    strict = settings.strict_pawn_edges if args.strict_pawn_edges is None else args.strict_pawn_edges

    board = parse_board(read_board_file(args.board))
    white, black = evaluate(board, strict_pawn_edges=strict)
    outcome = outcome_for(white, black)

    lines = []
    if args.show:
        lines.append(to_chess_board(board).unicode(empty_square="_"))
    if args.json:
        lines.append(json.dumps({
            "outcome": outcome.code,
            "white": board.white.describe(),
            "black": board.black.describe(),
            "white_can_capture": white,
            "black_can_capture": black,
        }, indent=2))
    else:
        lines.append(outcome.code)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = Settings()

    logging.basicConfig(
        level=args.log_level or settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        output = run(args, settings)
    except DuelError as e:
        logger.debug("duel failed for %s", args.board, exc_info=True)
        print(e, file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
