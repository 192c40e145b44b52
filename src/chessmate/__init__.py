"""chessmate — a standard chess rules engine."""

from chessmate.config import EngineSettings
from chessmate.core import Board, CheckEvaluator, Color, MoveGenerator, Piece, PieceType
from chessmate.errors import (
    ChessError,
    IllegalMove,
    InvalidPieceReference,
    OutOfBounds,
    SnapshotError,
)
from chessmate.game import GamePhase, GameState, GameStatus, MoveRecord, StatusKind

__version__ = "0.1.0"

__all__ = [
    "Board",
    "CheckEvaluator",
    "ChessError",
    "Color",
    "EngineSettings",
    "GamePhase",
    "GameState",
    "GameStatus",
    "IllegalMove",
    "InvalidPieceReference",
    "MoveGenerator",
    "MoveRecord",
    "OutOfBounds",
    "Piece",
    "PieceType",
    "SnapshotError",
    "StatusKind",
    "__version__",
]
