"""Piece record stored in the game's piece table."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessmate.core.enums import Color, PieceType
from chessmate.core.types import Square

# Letter code ↔ (Color, PieceType); upper case is white.
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "R": (Color.WHITE, PieceType.ROOK),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "K": (Color.WHITE, PieceType.KING),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "p": (Color.BLACK, PieceType.PAWN),
    "r": (Color.BLACK, PieceType.ROOK),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "k": (Color.BLACK, PieceType.KING),
    "q": (Color.BLACK, PieceType.QUEEN),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.KING): "♚",
    (Color.BLACK, PieceType.QUEEN): "♛",
}

_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(slots=True)
class Piece:
    """A single piece of the game.

    ``id``, ``color`` and ``kind`` never change.  Position, ``alive`` and the
    cached destination list are updated by the owning game state.
    """

    id: int
    color: Color
    kind: PieceType
    row: int
    col: int
    alive: bool = True
    moves: list[Square] = field(default_factory=list)

    @property
    def square(self) -> Square:
        return (self.row, self.col)

    @property
    def char(self) -> str:
        """Letter code (uppercase = white, lowercase = black)."""
        return _CHARS[(self.color, self.kind)]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.kind)]

    @staticmethod
    def parse_char(char: str) -> tuple[Color, PieceType]:
        """Color and kind for a letter code, e.g. 'N' → white knight."""
        try:
            return _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None

    def capture(self) -> None:
        self.alive = False
        self.moves = []

    def copy(self) -> Piece:
        return Piece(
            self.id,
            self.color,
            self.kind,
            self.row,
            self.col,
            self.alive,
            self.moves.copy(),
        )
