"""Game management layer — state machine, status and serialization.

Quick start::

    from chessmate.game import GameState

    state = GameState()
    state.setup()
    state.apply_move(state.piece_at(6, 4).id, (4, 4))  # e2-e4
    print(state.render())
"""

from chessmate.game.interfaces import GamePhase, GameStatus, StatusKind
from chessmate.game.snapshot import dumps, loads, state_from_dict, state_to_dict
from chessmate.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "GameStatus",
    "StatusKind",
    # Concrete
    "GameState",
    "MoveRecord",
    # Serialization
    "dumps",
    "loads",
    "state_from_dict",
    "state_to_dict",
]
