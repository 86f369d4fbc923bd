"""Referee checks: time, turn order, legality."""

import time

import pytest

from Battle_Ataxx_AI.Board import Board, PieceColor
from Battle_Ataxx_AI.Move import Move, PASS
from Battle_Ataxx_AI.engine import referee
from Battle_Ataxx_AI.engine.errors import IllegalMove
from Battle_Ataxx_AI.utils import timer


def test_accepts_legal_move():
    assert referee.check_move(Move.parse("a1-a2"), Board(), PieceColor.RED)


def test_rejects_out_of_turn():
    with pytest.raises(IllegalMove, match="out of turn"):
        referee.check_move(Move.parse("a7-a6"), Board(), PieceColor.BLUE)


def test_rejects_illegal_move_with_index():
    with pytest.raises(IllegalMove, match=r"move 3"):
        referee.check_move(Move.parse("g1-f1"), Board(), PieceColor.RED, move_index=2)


def test_rejects_needless_pass():
    with pytest.raises(IllegalMove):
        referee.check_move(PASS, Board(), PieceColor.RED)


def test_rejects_late_move():
    with pytest.raises(TimeoutError):
        referee.check_move(Move.parse("a1-a2"), Board(), PieceColor.RED, deadline=time.time() - 1)


def test_deadline_helpers():
    assert timer.deadline_after(None) is None
    assert not timer.expired(None)
    assert not timer.expired(timer.deadline_after(60))
    assert timer.expired(timer.deadline_after(-1))
