"""Tests for Ataxxgame turn handling, disqualification, and end-of-game state."""

import pytest

from Battle_Ataxx_AI.Ataxxgame import Ataxxgame, RESULT_TEXT
from Battle_Ataxx_AI.AIPlayer import AIPlayer
from Battle_Ataxx_AI.Board import PieceColor
from Battle_Ataxx_AI.Move import Move
from Battle_Ataxx_AI.Player import Player, HumanPlayer

RED, BLUE = PieceColor.RED, PieceColor.BLUE


class SeqPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    def __init__(self, color, moves):
        super().__init__(color)
        self._moves = [Move.parse(m) for m in moves]
        self._idx = 0

    def next_move(self, board, deadline=None):
        if self._idx >= len(self._moves):
            raise ValueError("No more scripted moves")
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


def scripted_game(blocks, red_moves, blue_moves, **kwargs):
    logs = []
    game = Ataxxgame(
        SeqPlayer(RED, red_moves),
        SeqPlayer(BLUE, blue_moves),
        blocks=blocks,
        logger=logs.append,
        **kwargs,
    )
    return game, logs


def test_full_board_draw(eight_square_blocks):
    game, logs = scripted_game(eight_square_blocks, ["a1-b2", "g7-f6"], ["a7-b6", "g1-f2"])
    assert game.play() == PieceColor.EMPTY
    assert logs[:4] == [
        "Move 1: RED a1-b2",
        "Move 2: BLUE a7-b6",
        "Move 3: RED g7-f6",
        "Move 4: BLUE g1-f2",
    ]
    assert logs[-1] == "Result: Draw (red=4, blue=4)"


def test_illegal_move_disqualifies():
    game, logs = scripted_game((), ["a7-a6"], [])
    assert game.play() == BLUE
    assert logs[-1].startswith("Disqualification: RED")
    assert game.board.num_moves == 0


def test_running_out_of_moves_disqualifies():
    game, logs = scripted_game((), ["a1-a2"], [])
    assert game.play() == RED
    assert logs == ["Move 1: RED a1-a2", "Disqualification: BLUE - No more scripted moves"]


def test_timeout_disqualifies():
    game, logs = scripted_game((), ["a1-a2"], [], move_timeout=-1)
    assert game.play() == BLUE
    assert "Move exceeded allotted time" in logs[-1]


def test_human_timeout_disqualifies():
    game = Ataxxgame(
        HumanPlayer(RED, input_fn=lambda prompt: "a1-a2"),
        SeqPlayer(BLUE, []),
        move_timeout=-1,
        logger=lambda msg: None,
    )
    assert game.play() == BLUE


def test_human_move_text_is_parsed():
    game, logs = scripted_game((), [], [])
    game.players[RED] = HumanPlayer(RED, input_fn=lambda prompt: " a1-a2 ")
    assert game.play() == RED
    assert logs[0] == "Move 1: RED a1-a2"


def test_bad_human_text_disqualifies():
    game, logs = scripted_game((), [], [])
    game.players[RED] = HumanPlayer(RED, input_fn=lambda prompt: "hello")
    assert game.play() == BLUE


def test_renderer_sees_every_change(eight_square_blocks):
    frames = []
    game, _ = scripted_game(
        eight_square_blocks,
        ["a1-b2", "g7-f6"],
        ["a7-b6", "g1-f2"],
        renderer=lambda board: frames.append(board.num_moves),
    )
    game.play()
    assert frames == [0, 1, 2, 3, 4]


def test_blocks_applied_before_play(eight_square_blocks):
    game, _ = scripted_game(eight_square_blocks, [], [])
    assert game.board.total_open == 8


def test_ai_game_runs_to_completion(eight_square_blocks):
    logs = []
    game = Ataxxgame(
        AIPlayer(RED, depth=2),
        AIPlayer(BLUE, depth=2),
        blocks=eight_square_blocks,
        logger=logs.append,
    )
    result = game.play()
    assert result == PieceColor.EMPTY
    assert logs[-1].startswith(f"Result: {RESULT_TEXT[result]}")


@pytest.mark.parametrize("color", [RED, BLUE, PieceColor.EMPTY])
def test_result_text_covers_outcomes(color):
    assert color in RESULT_TEXT
