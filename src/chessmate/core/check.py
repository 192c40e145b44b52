"""King safety: check, checkmate and stalemate detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessmate.core.enums import Color
from chessmate.core.types import Square

if TYPE_CHECKING:
    from chessmate.game.interfaces import GameStatus
    from chessmate.game.state import GameState


class CheckEvaluator:
    """Static rule-checker that operates on a :class:`GameState`.

    Attack information comes from the cached move lists, so the state must
    have been recomputed since its last mutation.  Candidate moves are tried
    on a clone; the state passed in is never modified.
    """

    @staticmethod
    def is_in_check(state: GameState, color: Color) -> bool:
        king = state.king(color)
        return state.generator.attacks(king.square, color.opposite)

    @staticmethod
    def is_safe_move(state: GameState, piece_id: int, destination: Square) -> bool:
        """Would moving *piece_id* to *destination* leave its king unattacked?"""
        mover = state.piece(piece_id)
        color = mover.color

        scratch = state.clone()
        scratch.move_piece(piece_id, destination)
        scratch.generator.recompute(scratch.pieces_of(color.opposite))
        return not CheckEvaluator.is_in_check(scratch, color)

    @staticmethod
    def legal_destinations(state: GameState, piece_id: int) -> set[Square]:
        """Cached destinations of *piece_id* that keep its own king safe."""
        piece = state.piece(piece_id)
        return {
            dest
            for dest in piece.moves
            if CheckEvaluator.is_safe_move(state, piece_id, dest)
        }

    @staticmethod
    def has_legal_move(state: GameState, color: Color) -> bool:
        for piece in state.pieces_of(color):
            for dest in piece.moves:
                if CheckEvaluator.is_safe_move(state, piece.id, dest):
                    return True
        return False

    @staticmethod
    def is_checkmate(state: GameState, color: Color) -> bool:
        if not CheckEvaluator.is_in_check(state, color):
            return False
        return not CheckEvaluator.has_legal_move(state, color)

    @staticmethod
    def is_stalemate(state: GameState, color: Color) -> bool:
        if CheckEvaluator.is_in_check(state, color):
            return False
        return not CheckEvaluator.has_legal_move(state, color)

    @staticmethod
    def status(state: GameState) -> GameStatus:
        """Verdict for the side to move."""
        from chessmate.game.interfaces import GameStatus

        color = state.current_player
        in_check = CheckEvaluator.is_in_check(state, color)
        if CheckEvaluator.has_legal_move(state, color):
            return GameStatus.check(color) if in_check else GameStatus.in_progress()
        return GameStatus.checkmate(color) if in_check else GameStatus.stalemate()
