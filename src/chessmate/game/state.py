"""Game state machine — owns the board and pieces, applies moves, tracks history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import NoReturn

from chessmate.config import EngineSettings
from chessmate.core.board import Board
from chessmate.core.check import CheckEvaluator
from chessmate.core.enums import Color, PieceType
from chessmate.core.move_generator import MoveGenerator
from chessmate.core.piece import Piece
from chessmate.core.types import BOARD_SIZE, Square, square_name
from chessmate.errors import ChessError, IllegalMove, InvalidPieceReference
from chessmate.game.interfaces import GamePhase, GameStatus

_LOGGER = logging.getLogger(__name__)

# Back-rank files per kind, in piece-table order.
_BACK_RANK: tuple[tuple[PieceType, tuple[int, ...]], ...] = (
    (PieceType.ROOK, (0, 7)),
    (PieceType.KNIGHT, (1, 6)),
    (PieceType.BISHOP, (2, 5)),
    (PieceType.KING, (4,)),
    (PieceType.QUEEN, (3,)),
)

Occupant = tuple[Color, PieceType]


def _is_coordinate_pair(value: object) -> bool:
    return (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and all(isinstance(v, int) and not isinstance(v, bool) for v in value)
    )


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    piece_id: int
    color: Color
    kind: PieceType
    from_sq: Square
    to_sq: Square
    captured_id: int | None
    status_after: GameStatus

    @property
    def was_capture(self) -> bool:
        return self.captured_id is not None

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"


@dataclass(slots=True)
class _UndoState:
    """Snapshot saved before each move so we can undo it."""

    board: Board
    pieces: list[Piece]
    side_to_move: Color
    phase: GamePhase
    status: GameStatus


@dataclass
class GameState:
    """Authoritative game: board, piece table, side to move, phase and history.

    Pieces are kept in a table indexed by id; the board stores ids.  Every
    applied move is followed by a full recomputation of all cached moves.
    This is a pure data/logic class — no I/O, no threading.
    """

    settings: EngineSettings | None = None
    board: Board = field(default_factory=Board, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    _pieces: list[Piece] = field(default_factory=list, init=False, repr=False)
    _side_to_move: Color = field(default=Color.WHITE, init=False)
    _status: GameStatus = field(
        default_factory=GameStatus.in_progress, init=False, repr=False
    )
    _undo_stack: list[_UndoState] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.settings is None:
            self.settings = EngineSettings()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self) -> None:
        """Initialise (or reset) the game to the standard starting layout."""
        self.clear()
        for color in (Color.WHITE, Color.BLACK):
            for col in range(BOARD_SIZE):
                self.add_piece(color, PieceType.PAWN, color.pawn_row, col)
        for kind, cols in _BACK_RANK:
            for color in (Color.WHITE, Color.BLACK):
                for col in cols:
                    self.add_piece(color, kind, color.back_row, col)
        self.start(Color.WHITE)

    def clear(self) -> None:
        """Remove every piece and forget the history."""
        self.board.clear()
        self._pieces = []
        self._side_to_move = Color.WHITE
        self._status = GameStatus.in_progress()
        self.phase = GamePhase.NOT_STARTED
        self.move_history.clear()
        self._undo_stack.clear()

    def add_piece(self, color: Color, kind: PieceType, row: int, col: int) -> Piece:
        """Append a new piece to the table and put it on ``(row, col)``."""
        if self.board.get(row, col) is not None:
            raise ChessError(f"Square {square_name((row, col))} is already occupied")
        piece = Piece(len(self._pieces), color, kind, row, col)
        self._pieces.append(piece)
        self.board.set(row, col, piece.id)
        return piece

    def start(self, side_to_move: Color = Color.WHITE) -> None:
        """Begin play from the pieces placed so far."""
        self._side_to_move = side_to_move
        self._refresh()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, piece_id: int, destination: Square) -> MoveRecord:
        """Validate and play a move, returning its history record.

        Raises :class:`InvalidPieceReference` for an unknown id and
        :class:`IllegalMove` for anything the current position does not allow.
        """
        piece = self.piece(piece_id)
        if not _is_coordinate_pair(destination):
            self._reject(piece_id, destination, "malformed destination")
        dest = (destination[0], destination[1])

        if self.is_game_over:
            self._reject(piece_id, dest, "the game is over")
        if not piece.alive:
            self._reject(piece_id, dest, "the piece has been captured")
        if piece.color != self._side_to_move:
            self._reject(piece_id, dest, f"it is {self._side_to_move}'s turn")
        if dest not in self._legal_set(piece):
            self._reject(piece_id, dest, "destination is not reachable")
        target = self.piece_at(*dest)
        if target is not None and target.kind == PieceType.KING:
            # Only reachable once a side has left its own king attacked.
            self._reject(piece_id, dest, "kings cannot be captured")

        undo = self._snapshot()
        from_sq = piece.square
        captured_id = self.move_piece(piece_id, dest)
        self._side_to_move = self._side_to_move.opposite
        self._refresh()

        record = MoveRecord(
            piece_id=piece_id,
            color=piece.color,
            kind=piece.kind,
            from_sq=from_sq,
            to_sq=dest,
            captured_id=captured_id,
            status_after=self._status,
        )
        self.move_history.append(record)
        self._undo_stack.append(undo)
        _LOGGER.debug(
            "Applied %s %s %s (%s)", piece.color, piece.kind, record, self._status
        )

        if self.settings.validate_after_move:
            self.validate()
        return record

    def move_piece(self, piece_id: int, destination: Square) -> int | None:
        """Relocate a piece, capturing whatever stands on *destination*.

        No validation, no recomputation and no turn change; callers are
        :meth:`apply_move` and move simulation.  Returns the captured id.
        """
        piece = self._pieces[piece_id]
        row, col = destination
        captured_id = self.board.get(row, col)
        if captured_id is not None:
            self._pieces[captured_id].capture()
        self.board.set(piece.row, piece.col, None)
        self.board.set(row, col, piece_id)
        piece.row, piece.col = row, col
        return captured_id

    def undo_last_move(self) -> MoveRecord | None:
        """Undo the last move. Returns its record, or None if history is empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        undo = self._undo_stack.pop()
        self.board = undo.board
        self._pieces = undo.pieces
        self._side_to_move = undo.side_to_move
        self.phase = undo.phase
        self._status = undo.status
        _LOGGER.debug("Undid %s", record)
        return record

    # ── Simulation support ───────────────────────────────────────────────

    def clone(self) -> GameState:
        """Independent structural copy without history."""
        other = GameState(self.settings)
        other.board = self.board.copy()
        other._pieces = [p.copy() for p in self._pieces]
        other._side_to_move = self._side_to_move
        other.phase = self.phase
        other._status = self._status
        return other

    @property
    def generator(self) -> MoveGenerator:
        return MoveGenerator(self.board, self._pieces)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def current_player(self) -> Color:
        return self._side_to_move

    @property
    def game_status(self) -> GameStatus:
        return self._status

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def pieces(self) -> tuple[Piece, ...]:
        """The whole piece table, captured pieces included."""
        return tuple(self._pieces)

    @property
    def pawns(self) -> list[Piece]:
        return self._of_kind(PieceType.PAWN)

    @property
    def rooks(self) -> list[Piece]:
        return self._of_kind(PieceType.ROOK)

    @property
    def knights(self) -> list[Piece]:
        return self._of_kind(PieceType.KNIGHT)

    @property
    def bishops(self) -> list[Piece]:
        return self._of_kind(PieceType.BISHOP)

    @property
    def kings(self) -> list[Piece]:
        return self._of_kind(PieceType.KING)

    @property
    def queens(self) -> list[Piece]:
        return self._of_kind(PieceType.QUEEN)

    def pieces_of(self, color: Color, alive_only: bool = True) -> list[Piece]:
        return [
            p
            for p in self._pieces
            if p.color == color and (p.alive or not alive_only)
        ]

    def piece(self, piece_id: int) -> Piece:
        if isinstance(piece_id, bool) or not 0 <= piece_id < len(self._pieces):
            raise InvalidPieceReference(piece_id)
        return self._pieces[piece_id]

    def piece_at(self, row: int, col: int) -> Piece | None:
        piece_id = self.board.get(row, col)
        return None if piece_id is None else self._pieces[piece_id]

    def king(self, color: Color) -> Piece:
        for piece in self._pieces:
            if piece.alive and piece.color == color and piece.kind == PieceType.KING:
                return piece
        raise ChessError(f"No {color} king on board")

    def legal_destinations_for(self, piece_id: int) -> set[Square]:
        """Squares *piece_id* may move to now, ignoring whose turn it is."""
        piece = self.piece(piece_id)
        if not piece.alive:
            raise InvalidPieceReference(piece_id, "piece has been captured")
        return self._legal_set(piece)

    def occupant_grid(self) -> tuple[tuple[Occupant | None, ...], ...]:
        """Read-only ``[row][col]`` view of (color, kind) for rendering."""
        return tuple(
            tuple(
                None if (p := self.piece_at(row, col)) is None else (p.color, p.kind)
                for col in range(BOARD_SIZE)
            )
            for row in range(BOARD_SIZE)
        )

    def render(self) -> str:
        """Text diagram of the board, row 0 on top."""
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self.piece_at(row, col)
                cells.append(p.symbol if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

    def validate(self) -> None:
        """Check board/piece consistency; raise :class:`ChessError` on mismatch."""
        for (row, col), piece_id in self.board.occupied():
            piece = self.piece(piece_id)
            if not piece.alive:
                raise ChessError(f"Captured piece {piece_id} still on ({row}, {col})")
            if piece.square != (row, col):
                raise ChessError(
                    f"Piece {piece_id} at {piece.square} referenced from ({row}, {col})"
                )
        for piece in self._pieces:
            if piece.alive and self.board.get(piece.row, piece.col) != piece.id:
                raise ChessError(f"Piece {piece.id} missing from {piece.square}")
        for color in (Color.WHITE, Color.BLACK):
            kings = [p for p in self.pieces_of(color) if p.kind == PieceType.KING]
            if len(kings) != 1:
                raise ChessError(f"{color} has {len(kings)} kings")

    # ── Internal ─────────────────────────────────────────────────────────

    def _of_kind(self, kind: PieceType) -> list[Piece]:
        return [p for p in self._pieces if p.kind == kind]

    def _legal_set(self, piece: Piece) -> set[Square]:
        if self.settings.enforce_king_safety:
            return CheckEvaluator.legal_destinations(self, piece.id)
        return set(piece.moves)

    def _refresh(self) -> None:
        self.generator.recompute()
        self._status = CheckEvaluator.status(self)
        if self._status.is_over:
            self.phase = GamePhase.GAME_OVER
            _LOGGER.info("Game over: %s", self._status)
        else:
            self.phase = GamePhase.AWAITING_MOVE

    def _snapshot(self) -> _UndoState:
        return _UndoState(
            board=self.board.copy(),
            pieces=[p.copy() for p in self._pieces],
            side_to_move=self._side_to_move,
            phase=self.phase,
            status=self._status,
        )

    def _reject(self, piece_id: int, dest: Square, reason: str) -> NoReturn:
        _LOGGER.warning("Rejected move of piece %d to %s: %s", piece_id, dest, reason)
        raise IllegalMove(piece_id, dest, reason)
