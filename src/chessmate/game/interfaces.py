"""Phase and status types for the game layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from chessmate.core.enums import Color

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class StatusKind(IntEnum):
    """Classification of the position for the side to move."""

    IN_PROGRESS = 0
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()


# ── Status value object ──────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Position verdict.

    ``player`` is the side in check or checkmated; it is ``None`` for
    in-progress and stalemate positions.
    """

    kind: StatusKind
    player: Color | None = None

    @classmethod
    def in_progress(cls) -> GameStatus:
        return cls(StatusKind.IN_PROGRESS)

    @classmethod
    def check(cls, player: Color) -> GameStatus:
        return cls(StatusKind.CHECK, player)

    @classmethod
    def checkmate(cls, player: Color) -> GameStatus:
        return cls(StatusKind.CHECKMATE, player)

    @classmethod
    def stalemate(cls) -> GameStatus:
        return cls(StatusKind.STALEMATE)

    @property
    def is_over(self) -> bool:
        return self.kind in (StatusKind.CHECKMATE, StatusKind.STALEMATE)

    @property
    def winner(self) -> Color | None:
        """The side that delivered mate, if any."""
        if self.kind == StatusKind.CHECKMATE and self.player is not None:
            return self.player.opposite
        return None

    def __str__(self) -> str:
        name = self.kind.name.lower().replace("_", " ")
        if self.player is None:
            return name
        return f"{name} ({self.player})"
