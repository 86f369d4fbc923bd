"""Automated player: seeded random openings, then fixed-depth minimax."""

import random

try:
    from Player import Player
    from Move import PASS
    from ai import move_selector, search_minimax
except ImportError:
    from Battle_Ataxx_AI.Player import Player
    from Battle_Ataxx_AI.Move import PASS
    from Battle_Ataxx_AI.ai import move_selector, search_minimax


class AIPlayer(Player):
    def __init__(self, color, depth=search_minimax.DEFAULT_DEPTH, seed=None, random_open=0, stats=None):
        super().__init__(color)
        self.depth = depth
        self.random_open = random_open
        self.rng = random.Random(seed)
        self.stats = stats

    def next_move(self, board, deadline=None):
        # Search has a fixed depth; the deadline is only enforced by the referee.
        if not board.can_move(self.color):
            return PASS

        if board.num_moves < self.random_open:
            return self.rng.choice(move_selector.legal_moves(board, include_pass=False))

        return search_minimax.choose_move(board, depth=self.depth, stats=self.stats)
