"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessmate.config import EngineSettings
from chessmate.core.enums import Color
from chessmate.core.piece import Piece
from chessmate.core.types import parse_square
from chessmate.game.state import GameState

StateFactory = Callable[..., GameState]


@pytest.fixture
def state() -> GameState:
    """A game in the standard starting position, White to move."""
    gs = GameState()
    gs.setup()
    return gs


@pytest.fixture
def make_state() -> StateFactory:
    """Build a custom position from ``{"e1": "K", "e8": "k", ...}``."""

    def _make(
        placement: dict[str, str],
        side_to_move: Color = Color.WHITE,
        settings: EngineSettings | None = None,
    ) -> GameState:
        gs = GameState(settings)
        gs.clear()
        for name, char in placement.items():
            color, kind = Piece.parse_char(char)
            row, col = parse_square(name)
            gs.add_piece(color, kind, row, col)
        gs.start(side_to_move)
        return gs

    return _make
