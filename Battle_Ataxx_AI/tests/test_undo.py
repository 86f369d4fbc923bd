"""Undo restores the exact prior state, including counters and the winner."""

import random

import pytest

from Battle_Ataxx_AI.Board import Board, PieceColor
from Battle_Ataxx_AI.Move import PASS
from Battle_Ataxx_AI.engine.errors import GameError
from Battle_Ataxx_AI.ai import move_selector


def test_undo_empty_history_raises():
    with pytest.raises(GameError):
        Board().undo()


def test_random_game_unwinds_to_start(snapshot):
    rng = random.Random(2024)
    b = Board()
    history = [snapshot(b)]
    while b.winner is None and b.num_moves < 120:
        b.make_move(rng.choice(move_selector.legal_moves(b)))
        history.append(snapshot(b))

    while history:
        assert snapshot(b) == history.pop()
        if history:
            b.undo()
    assert b == Board()
    assert b.num_moves == 0


def test_undo_extend_restores_jump_counter():
    b = Board()
    b.make_move("a1-c1")
    b.make_move("a7-c7")
    assert b.num_jumps == 2
    b.make_move("c1-c2")
    assert b.num_jumps == 0
    b.undo()
    assert b.num_jumps == 2
    assert b.whose_move == PieceColor.RED


def test_undo_restores_captures():
    b = Board()
    for mv in ["a1-b2", "a7-b6", "b2-b4", "b6-b5"]:
        b.make_move(mv)
    b.undo()
    assert b.get(1, 3) == PieceColor.RED
    assert b.get(1, 4) == PieceColor.EMPTY
    assert b.red_pieces == 3 and b.blue_pieces == 3
    assert b.whose_move == PieceColor.BLUE


def test_undo_pass(monkeypatch, snapshot):
    b = Board()
    b.make_move("a1-a2")
    before = snapshot(b)
    monkeypatch.setattr(b, "can_move", lambda color: color != PieceColor.BLUE)
    b.make_move(PASS)
    assert b.whose_move == PieceColor.RED
    b.undo()
    assert snapshot(b) == before


def test_undo_after_win_reopens_game():
    b = Board()
    for mv in ["g7-f6", "g1-g3", "f6-f4", "a7-c5", "f4-d4"]:
        b.make_move(mv)
    assert b.winner == PieceColor.RED
    b.undo()
    assert b.winner is None
    assert b.blue_pieces == 1
    assert b.whose_move == PieceColor.RED


def test_undo_notifies():
    seen = []
    b = Board()
    b.make_move("a1-a2")
    b.set_notifier(seen.append)
    b.undo()
    assert len(seen) == 2
