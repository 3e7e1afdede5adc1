"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from trekk.core import BoardState, legal_moves, move_to_text

    state = BoardState.initial()
    for move in legal_moves(state):
        print(move_to_text(state, move))
"""

from trekk.core.attacks import is_square_attacked
from trekk.core.board import Board
from trekk.core.enums import CastlingRights, Color, GameResult, MoveFlag, PieceKind
from trekk.core.errors import (
    AmbiguousNotationError,
    BoardInvariantError,
    ChessError,
    IllegalMoveError,
    OutOfBoardError,
)
from trekk.core.legality import filter_legal, is_in_check, is_legal
from trekk.core.move import Move
from trekk.core.move_generator import MoveGenerator, legal_moves
from trekk.core.notation import (
    STARTING_FEN,
    move_to_text,
    moves_to_text,
    position_from_fen,
    position_to_fen,
)
from trekk.core.perft import perft, perft_divide
from trekk.core.piece import Piece
from trekk.core.piece_rules import RULES, moves_for_piece
from trekk.core.rules import Rules
from trekk.core.state import BoardState
from trekk.core.types import (
    Square,
    column_to_letter,
    letter_to_column,
    parse_square,
    rank_text,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceKind",
    # Errors
    "AmbiguousNotationError",
    "BoardInvariantError",
    "ChessError",
    "IllegalMoveError",
    "OutOfBoardError",
    # Types / helpers
    "Square",
    "column_to_letter",
    "letter_to_column",
    "parse_square",
    "rank_text",
    "square_name",
    # Domain objects
    "Board",
    "BoardState",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Generation
    "RULES",
    "filter_legal",
    "is_in_check",
    "is_legal",
    "is_square_attacked",
    "legal_moves",
    "moves_for_piece",
    "perft",
    "perft_divide",
    # Notation
    "STARTING_FEN",
    "move_to_text",
    "moves_to_text",
    "position_from_fen",
    "position_to_fen",
]
