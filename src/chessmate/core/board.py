"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessmate.core.types import BOARD_SIZE, Square, is_on_board
from chessmate.errors import OutOfBounds


class Board:
    """8x8 grid holding the id of the piece on each square, or ``None``.

    Pieces live in the game's piece table; the board only stores indices
    into it, so copying a board is a plain structural copy.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[int | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def get(self, row: int, col: int) -> int | None:
        if not is_on_board(row, col):
            raise OutOfBounds(row, col)
        return self._grid[row][col]

    def set(self, row: int, col: int, piece_id: int | None) -> None:
        """Store *piece_id* on the square, replacing whatever was there."""
        if not is_on_board(row, col):
            raise OutOfBounds(row, col)
        self._grid[row][col] = piece_id

    def __getitem__(self, sq: Square) -> int | None:
        return self.get(*sq)

    def __setitem__(self, sq: Square, piece_id: int | None) -> None:
        self.set(sq[0], sq[1], piece_id)

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, int]]:
        """``((row, col), piece_id)`` for every occupied square, row-major."""
        for row, cells in enumerate(self._grid):
            for col, piece_id in enumerate(cells):
                if piece_id is not None:
                    yield (row, col), piece_id

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [cells.copy() for cells in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for cells in self._grid:
            rows.append(
                " ".join(".." if pid is None else f"{pid:02d}" for pid in cells)
            )
        return "\n".join(rows)
