"""Pseudo-legal move generation for every piece kind."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from chessmate.core.board import Board
from chessmate.core.enums import Color, PieceType
from chessmate.core.piece import Piece
from chessmate.core.types import BOARD_SIZE, Square, is_on_board

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    """[row][col] -> on-board squares one offset away."""
    table: list[tuple[tuple[Square, ...], ...]] = []
    for row in range(BOARD_SIZE):
        cells: list[tuple[Square, ...]] = []
        for col in range(BOARD_SIZE):
            cells.append(
                tuple(
                    (row + dr, col + dc)
                    for dr, dc in offsets
                    if is_on_board(row + dr, col + dc)
                )
            )
        table.append(tuple(cells))
    return tuple(table)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[tuple[Square, ...], ...], ...], ...]:
    """[row][col] -> one ray per direction, nearest square first."""
    table: list[tuple[tuple[tuple[Square, ...], ...], ...]] = []
    for row in range(BOARD_SIZE):
        cells: list[tuple[tuple[Square, ...], ...]] = []
        for col in range(BOARD_SIZE):
            square_rays: list[tuple[Square, ...]] = []
            for dr, dc in directions:
                r, c = row + dr, col + dc
                ray: list[Square] = []
                while is_on_board(r, c):
                    ray.append((r, c))
                    r += dr
                    c += dc
                square_rays.append(tuple(ray))
            cells.append(tuple(square_rays))
        table.append(tuple(cells))
    return tuple(table)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class MoveGenerator:
    """Computes destination squares for pieces on a :class:`Board`.

    Moves are pseudo-legal: movement rules and blocking are honoured but a
    move may still leave the mover's own king attacked.  King safety is the
    job of :class:`~chessmate.core.check.CheckEvaluator`.

    *pieces* is the piece table the board's ids index into.
    """

    __slots__ = ("_board", "_pieces")

    def __init__(self, board: Board, pieces: Sequence[Piece]) -> None:
        self._board = board
        self._pieces = pieces

    # -- Public API ---------------------------------------------------------

    def destinations(self, piece: Piece) -> list[Square]:
        """Pseudo-legal destinations of *piece*; empty for a captured piece."""
        if not piece.alive:
            return []

        moves: list[Square] = []
        row, col = piece.row, piece.col
        kind = piece.kind
        if kind == PieceType.PAWN:
            self._gen_pawn(row, col, piece.color, moves)
        elif kind == PieceType.KNIGHT:
            self._gen_stepping(_KNIGHT_TARGETS[row][col], piece.color, moves)
        elif kind == PieceType.KING:
            self._gen_stepping(_KING_TARGETS[row][col], piece.color, moves)
        elif kind == PieceType.ROOK:
            self._gen_sliding(_ROOK_RAYS[row][col], piece.color, moves)
        elif kind == PieceType.BISHOP:
            self._gen_sliding(_BISHOP_RAYS[row][col], piece.color, moves)
        elif kind == PieceType.QUEEN:
            self._gen_sliding(_QUEEN_RAYS[row][col], piece.color, moves)
        return moves

    def recompute(self, pieces: Iterable[Piece] | None = None) -> None:
        """Replace the cached move list of every piece.

        Captured pieces get an empty list.  Defaults to the whole table.
        """
        for piece in self._pieces if pieces is None else pieces:
            piece.moves = self.destinations(piece)

    def attacks(self, sq: Square, by_color: Color) -> bool:
        """Does any live *by_color* piece have *sq* in its cached moves?"""
        return any(
            piece.alive and piece.color == by_color and sq in piece.moves
            for piece in self._pieces
        )

    # -- Per-kind generators ------------------------------------------------

    def _color_at(self, row: int, col: int) -> Color | None:
        piece_id = self._board.get(row, col)
        if piece_id is None:
            return None
        return self._pieces[piece_id].color

    def _gen_pawn(self, row: int, col: int, color: Color, moves: list[Square]) -> None:
        step = color.forward
        ahead = row + step
        if not 0 <= ahead < BOARD_SIZE:
            return

        if self._board.is_empty(ahead, col):
            moves.append((ahead, col))
            two_ahead = ahead + step
            if row == color.pawn_row and self._board.is_empty(two_ahead, col):
                moves.append((two_ahead, col))

        for cap_col in (col - 1, col + 1):
            if not 0 <= cap_col < BOARD_SIZE:
                continue
            target = self._color_at(ahead, cap_col)
            if target is not None and target != color:
                moves.append((ahead, cap_col))

    def _gen_stepping(
        self,
        targets: tuple[Square, ...],
        color: Color,
        moves: list[Square],
    ) -> None:
        for to_row, to_col in targets:
            target = self._color_at(to_row, to_col)
            if target is None or target != color:
                moves.append((to_row, to_col))

    def _gen_sliding(
        self,
        rays: tuple[tuple[Square, ...], ...],
        color: Color,
        moves: list[Square],
    ) -> None:
        for ray in rays:
            for to_row, to_col in ray:
                target = self._color_at(to_row, to_col)
                if target is None:
                    moves.append((to_row, to_col))
                    continue
                if target != color:
                    moves.append((to_row, to_col))
                break
