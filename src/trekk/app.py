"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from trekk.core.enums import Color
from trekk.core.move_generator import legal_moves
from trekk.core.notation import moves_to_text, position_from_fen, position_to_fen
from trekk.core.notation.algebraic import move_to_text
from trekk.core.perft import perft, perft_divide
from trekk.core.rules import Rules
from trekk.core.state import BoardState
from trekk.selection import FirstMoveSelector, MoveSelector
from trekk.settings import AppSettings

_LOGGER = logging.getLogger(__name__)

_COLORS = {"white": Color.WHITE, "black": Color.BLACK}


def _load_state(args: argparse.Namespace, settings: AppSettings) -> BoardState:
    state = position_from_fen(args.fen or settings.start_fen)
    color = getattr(args, "color", None)
    if color is not None:
        state = state.with_side_to_move(_COLORS[color])
    return state


def cmd_moves(
    args: argparse.Namespace,
    settings: AppSettings,
    selector: MoveSelector | None = None,
) -> int:
    state = _load_state(args, settings)
    moves = legal_moves(state)
    locale = settings.locale

    print("Legal moves:")
    for text in moves_to_text(state, moves, locale):
        print(f"\t{text}")
    print()

    chosen = (selector or FirstMoveSelector()).select(state, moves)
    if chosen is None:
        print("No legal moves")
        print("Checkmate." if Rules.is_in_check(state) else "Stalemate.")
    else:
        print(f"Selected move: {move_to_text(state, chosen, locale, legal=moves)}")
    return 0


def cmd_perft(args: argparse.Namespace, settings: AppSettings) -> int:
    state = _load_state(args, settings)
    if args.divide:
        out = perft_divide(state, args.depth)
        for key in sorted(out):
            print(f"{key}: {out[key]}")
        print(f"Total: {sum(out.values())}")
    else:
        print(perft(state, args.depth))
    return 0


def cmd_show(args: argparse.Namespace, settings: AppSettings) -> int:
    state = _load_state(args, settings)
    print(repr(state.board))
    print()
    print(position_to_fen(state))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trekk", description="Legal chess move generator")
    parser.add_argument("--language", help="piece letters: Norwegian or English")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    sub = parser.add_subparsers(dest="command", required=True)

    p_moves = sub.add_parser("moves", help="list legal moves and the selected move")
    p_moves.add_argument("--fen", help="position in FEN (default: starting position)")
    p_moves.add_argument("--color", choices=sorted(_COLORS), help="side to generate for")
    p_moves.set_defaults(handler=cmd_moves)

    p_perft = sub.add_parser("perft", help="count leaf nodes of the legal move tree")
    p_perft.add_argument("depth", type=int)
    p_perft.add_argument("--fen", help="position in FEN (default: starting position)")
    p_perft.add_argument("--divide", action="store_true", help="per-move breakdown")
    p_perft.set_defaults(handler=cmd_perft)

    p_show = sub.add_parser("show", help="print the board and its FEN")
    p_show.add_argument("--fen", help="position in FEN (default: starting position)")
    p_show.set_defaults(handler=cmd_show)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the ``trekk`` command line and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = AppSettings.from_env()
        if args.language:
            settings = replace(settings, language=args.language)
        if args.log_level:
            settings = replace(settings, log_level=args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    settings.configure_logging()

    try:
        return args.handler(args, settings)
    except ValueError as exc:
        _LOGGER.debug("Rejected input", exc_info=True)
        print(f"trekk: error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
