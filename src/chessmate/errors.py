"""Exceptions raised by the engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessmate.core.types import Square


class ChessError(Exception):
    """Base class for every engine error."""


class OutOfBounds(ChessError, IndexError):
    """A coordinate outside the 8x8 grid. Always a programming error."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Square ({row}, {col}) is off the board")
        self.row = row
        self.col = col


class IllegalMove(ChessError):
    """The requested move was rejected; the caller may ask again."""

    def __init__(self, piece_id: int, destination: Square, reason: str) -> None:
        super().__init__(f"Illegal move of piece {piece_id} to {destination}: {reason}")
        self.piece_id = piece_id
        self.destination = destination
        self.reason = reason


class InvalidPieceReference(ChessError, LookupError):
    """Unknown piece id, or a piece that has already been captured."""

    def __init__(self, piece_id: int, reason: str = "unknown piece") -> None:
        super().__init__(f"Piece {piece_id}: {reason}")
        self.piece_id = piece_id


class SnapshotError(ChessError, ValueError):
    """Serialized game state could not be restored."""
