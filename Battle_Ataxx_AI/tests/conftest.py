"""Shared fixtures: full-state snapshots and a small blocked-off board."""

import pytest

from Battle_Ataxx_AI.Board import Board, PieceColor
from Battle_Ataxx_AI.Move import EXTENDED_SIDE


# Blocks (with reflections) leaving only the corners and b2, f2, b6, f6 open.
EIGHT_SQUARE_BLOCKS = [
    "b1", "a2", "c1", "c2", "c3", "a3", "b3",
    "d1", "d2", "d3", "a4", "b4", "c4", "d4",
]


def take_snapshot(board):
    return {
        "cells": tuple(board.get_square(sq) for sq in range(EXTENDED_SIDE * EXTENDED_SIDE)),
        "whose_move": board.whose_move,
        "counts": tuple(board.num_pieces(c) for c in PieceColor),
        "jumps": board.num_jumps,
        "winner": board.winner,
        "moves": board.all_moves(),
    }


@pytest.fixture
def snapshot():
    return take_snapshot


@pytest.fixture
def eight_square_blocks():
    return list(EIGHT_SQUARE_BLOCKS)


@pytest.fixture
def eight_square_board():
    """Open squares: a1, g7 (red), a7, g1 (blue), and b2, f2, b6, f6."""
    b = Board()
    for square in EIGHT_SQUARE_BLOCKS:
        b.set_block(square)
    return b


@pytest.fixture
def ten_square_blocks():
    """Like the eight-square layout, with d2 and d6 left open as well."""
    return [sq for sq in EIGHT_SQUARE_BLOCKS if sq != "d2"]


# On the ten-square layout RED ends up owning the whole top half and is
# stuck after move 11, while BLUE still has moves below.
RED_SHUT_IN_LINE = [
    "g7-f6", "g1-f2", "f6-d6", "f2-d2", "d6-b6", "d2-b2",
    "g7-f6", "g1-f2", "b6-d6", "b2-d2", "a7-b6",
]


@pytest.fixture
def red_shut_in_board(ten_square_blocks):
    b = Board()
    for square in ten_square_blocks:
        b.set_block(square)
    for mv in RED_SHUT_IN_LINE:
        b.make_move(mv)
    return b


@pytest.fixture
def red_shut_in_line():
    return list(RED_SHUT_IN_LINE)
