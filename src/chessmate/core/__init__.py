"""Core domain layer — board, pieces, move generation and king safety.

Quick start::

    from chessmate.game import GameState

    state = GameState()
    state.setup()
    pawn = state.piece_at(6, 4)
    print(state.legal_destinations_for(pawn.id))
"""

from chessmate.core.board import Board
from chessmate.core.check import CheckEvaluator
from chessmate.core.enums import Color, PieceType
from chessmate.core.move_generator import MoveGenerator
from chessmate.core.piece import Piece
from chessmate.core.types import (
    Square,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "CheckEvaluator",
    "MoveGenerator",
    "Piece",
]
