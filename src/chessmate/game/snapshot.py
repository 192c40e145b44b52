"""Serializable game state for save/load collaborators.

The representation is a plain ``dict`` (JSON-friendly)::

    {
        "version": 1,
        "current_player": "white",
        "pieces": [{"kind": "pawn", "color": "white", "row": 6, "col": 4}, ...],
    }

Only live pieces are written.  Restoring replays them into a fresh
:class:`GameState` and recomputes every move.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from chessmate.config import EngineSettings
from chessmate.core.check import CheckEvaluator
from chessmate.core.enums import Color, PieceType
from chessmate.core.types import is_on_board
from chessmate.errors import SnapshotError
from chessmate.game.state import GameState

_LOGGER = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1

_COLORS: dict[str, Color] = {str(c): c for c in Color}
_KINDS: dict[str, PieceType] = {str(k): k for k in PieceType}


def state_to_dict(state: GameState) -> dict[str, Any]:
    """Serialize the live pieces and the side to move."""
    return {
        "version": SNAPSHOT_VERSION,
        "current_player": str(state.current_player),
        "pieces": [
            {"kind": str(p.kind), "color": str(p.color), "row": p.row, "col": p.col}
            for p in state.pieces
            if p.alive
        ],
    }


def state_from_dict(
    data: dict[str, Any], settings: EngineSettings | None = None
) -> GameState:
    """Rebuild a :class:`GameState` from :func:`state_to_dict` output."""
    if not isinstance(data, dict):
        raise SnapshotError(f"Snapshot must be a mapping, got {type(data).__name__}")

    version = data.get("version", SNAPSHOT_VERSION)
    if version != SNAPSHOT_VERSION:
        raise SnapshotError(f"Unsupported snapshot version: {version!r}")

    side = _lookup(_COLORS, data.get("current_player"), "current_player")

    entries = data.get("pieces")
    if not isinstance(entries, list):
        raise SnapshotError("Snapshot 'pieces' must be a list")

    state = GameState(settings)
    state.clear()
    kings = {Color.WHITE: 0, Color.BLACK: 0}

    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise SnapshotError(f"Piece #{idx} must be a mapping")
        kind = _lookup(_KINDS, entry.get("kind"), f"pieces[{idx}].kind")
        color = _lookup(_COLORS, entry.get("color"), f"pieces[{idx}].color")
        row, col = entry.get("row"), entry.get("col")
        if not (_is_index(row) and _is_index(col) and is_on_board(row, col)):
            raise SnapshotError(f"Piece #{idx} has an invalid square: ({row!r}, {col!r})")
        if state.board.get(row, col) is not None:
            raise SnapshotError(f"Piece #{idx} shares square ({row}, {col})")
        state.add_piece(color, kind, row, col)
        if kind == PieceType.KING:
            kings[color] += 1

    for color, count in kings.items():
        if count != 1:
            raise SnapshotError(f"Snapshot needs exactly one {color} king, found {count}")

    state.start(side)
    if CheckEvaluator.is_in_check(state, side.opposite):
        raise SnapshotError(f"{side.opposite} is in check but {side} is to move")
    _LOGGER.debug("Restored %d pieces, %s to move", len(entries), side)
    return state


def dumps(state: GameState, **kwargs: Any) -> str:
    """JSON text of :func:`state_to_dict`; extra arguments go to ``json.dumps``."""
    return json.dumps(state_to_dict(state), **kwargs)


def loads(text: str, settings: EngineSettings | None = None) -> GameState:
    """Restore a state from :func:`dumps` output."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot is not valid JSON: {exc}") from exc
    return state_from_dict(data, settings)


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _lookup(table: dict[str, Any], value: object, where: str) -> Any:
    try:
        return table[value]  # type: ignore[index]
    except (KeyError, TypeError):
        raise SnapshotError(f"Invalid value for {where}: {value!r}") from None
