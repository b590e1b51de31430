"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessgrid.core.board import Board


@pytest.fixture
def empty_board() -> Board:
    """A board with no pieces and no castling rights."""
    board = Board()
    board.clear()
    return board


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()
