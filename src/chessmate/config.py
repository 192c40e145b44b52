"""Engine settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EngineSettings:
    """Behaviour switches for a :class:`~chessmate.game.state.GameState`.

    ``enforce_king_safety`` filters each piece's destinations down to the ones
    that do not leave its own king attacked.  Turning it off makes
    ``apply_move`` accept any pseudo-legal destination; game status is still
    judged on king-safe moves either way.

    ``validate_after_move`` re-checks the board/piece consistency after every
    applied move.
    """

    enforce_king_safety: bool = True
    validate_after_move: bool = False
