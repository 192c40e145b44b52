"""Tests for Board and square helpers."""

import pytest

from chessmate.core.board import Board
from chessmate.core.types import (
    A1, A8, E2, E4, H1, H8,
    is_on_board,
    parse_square,
    square_name,
)
from chessmate.errors import ChessError, OutOfBounds


class TestSquareHelpers:
    def test_named_corners(self) -> None:
        assert A8 == (0, 0)
        assert H8 == (0, 7)
        assert A1 == (7, 0)
        assert H1 == (7, 7)

    def test_square_name(self) -> None:
        assert square_name(E2) == "e2"
        assert square_name((4, 4)) == "e4"

    def test_parse_square(self) -> None:
        assert parse_square("e2") == (6, 4)
        assert parse_square("a8") == (0, 0)
        assert parse_square("h1") == (7, 7)

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "a0", "e22"])
    def test_parse_square_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_square_name_off_board(self) -> None:
        with pytest.raises(ValueError):
            square_name((8, 0))

    def test_is_on_board(self) -> None:
        assert is_on_board(0, 0)
        assert is_on_board(7, 7)
        assert not is_on_board(-1, 3)
        assert not is_on_board(3, 8)


class TestBoardOperations:
    def test_new_board_is_empty(self) -> None:
        board = Board()
        assert all(board.get(r, c) is None for r in range(8) for c in range(8))
        assert list(board.occupied()) == []

    def test_set_and_get(self) -> None:
        board = Board()
        board.set(4, 4, 7)
        assert board.get(4, 4) == 7
        assert board[E4] == 7
        assert board.is_empty(*E2)

    def test_set_overwrites(self) -> None:
        board = Board()
        board[E4] = 1
        board[E4] = 2
        assert board[E4] == 2
        board[E4] = None
        assert board.is_empty(4, 4)

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (8, 0), (0, 8), (9, 9)])
    def test_get_out_of_bounds(self, row: int, col: int) -> None:
        board = Board()
        with pytest.raises(OutOfBounds):
            board.get(row, col)

    @pytest.mark.parametrize("row, col", [(-1, 0), (8, 3), (2, 8)])
    def test_set_out_of_bounds(self, row: int, col: int) -> None:
        board = Board()
        with pytest.raises(OutOfBounds) as info:
            board.set(row, col, 0)
        assert (info.value.row, info.value.col) == (row, col)

    def test_out_of_bounds_is_chess_and_index_error(self) -> None:
        board = Board()
        with pytest.raises(ChessError):
            board.get(8, 8)
        with pytest.raises(IndexError):
            board.get(8, 8)

    def test_occupied_row_major(self) -> None:
        board = Board()
        board[H1] = 3
        board[A8] = 1
        board[E4] = 2
        assert list(board.occupied()) == [(A8, 1), (E4, 2), (H1, 3)]

    def test_copy_independence(self) -> None:
        board = Board()
        board[E2] = 5
        copy = board.copy()
        assert board == copy
        copy[E2] = None
        assert board != copy
        assert board[E2] == 5

    def test_clear(self) -> None:
        board = Board()
        board[E2] = 0
        board[E4] = 1
        board.clear()
        assert list(board.occupied()) == []

    def test_repr_shape(self) -> None:
        board = Board()
        board[A8] = 0
        lines = repr(board).splitlines()
        assert len(lines) == 8
        assert lines[0].startswith("00 ..")
