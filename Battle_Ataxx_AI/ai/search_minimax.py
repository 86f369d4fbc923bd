"""Fixed-depth minimax with alpha-beta pruning over make/undo on a private board copy."""

import logging
import time

from . import heuristic
from . import move_selector

try:
    from Board import Board, PieceColor
except ImportError:
    from Battle_Ataxx_AI.Board import Board, PieceColor


LOGGER = logging.getLogger(__name__)

INF = heuristic.INF
WINNING_VALUE = heuristic.WINNING_VALUE
DEFAULT_DEPTH = 4


class MinimaxSearcher:
    """Encapsulates the state of one search. RED maximizes, BLUE minimizes."""

    def __init__(self, depth=DEFAULT_DEPTH, prune=True, stats=None):
        if depth < 1:
            raise ValueError("search depth must be at least 1")
        self.depth = depth
        self.prune = prune
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.start_time = None
        self.best_move = None
        self.best_score = None

    def choose_move(self, board):
        """
        Return the best move for the side to move on board. The search runs on a
        fork of board, so the caller's board is never touched. Raises ValueError
        when the game is over or the side to move has nothing but a pass.
        """
        if board.winner is not None:
            raise ValueError("Game is over; nothing to search")
        work = Board(board)
        if not move_selector.generate_moves(work):
            raise ValueError("No legal moves available; the side to move must pass")

        self.node_counter = 0
        self.start_time = time.time()
        self.best_move = None
        sense = 1 if work.whose_move == PieceColor.RED else -1
        self.best_score = self._minimax(work, self.depth, True, sense, -INF, INF)

        if self.stats_list is not None:
            self._record_stats(work.whose_move)
        LOGGER.debug(
            "searched depth=%d nodes=%d best=%s score=%d",
            self.depth, self.node_counter, self.best_move, self.best_score,
        )
        return self.best_move

    def _minimax(self, board, depth, save_move, sense, alpha, beta):
        """
        Value of board searched depth plies deep; sense is 1 when the side to move
        maximizes, -1 when it minimizes. Only the root call (save_move) records
        the chosen move. Every move is undone before the next sibling is tried.
        """
        self.node_counter += 1
        if depth == 0 or board.winner is not None:
            return heuristic.score_board(board, WINNING_VALUE + depth)

        best_score = -INF if sense == 1 else INF
        for move in move_selector.legal_moves(board):
            board.make_move(move)
            try:
                score = self._minimax(board, depth - 1, False, -sense, alpha, beta)
            finally:
                board.undo()

            if score * sense > best_score * sense:
                best_score = score
                if save_move:
                    self.best_move = move

            if not self.prune:
                continue
            if sense == 1:
                alpha = max(alpha, best_score)
            else:
                beta = min(beta, best_score)
            if alpha >= beta:
                break

        return best_score

    def _record_stats(self, color):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "color": color.name,
            "depth": self.depth,
            "move": str(self.best_move),
            "score": self.best_score,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
        })


def choose_move(board, depth=DEFAULT_DEPTH, stats=None, prune=True):
    """Public entry point: build a MinimaxSearcher and return its move."""
    searcher = MinimaxSearcher(depth=depth, prune=prune, stats=stats)
    return searcher.choose_move(board)


def search(board, depth=DEFAULT_DEPTH, prune=True):
    """Return (move, score) for the side to move."""
    searcher = MinimaxSearcher(depth=depth, prune=prune)
    move = searcher.choose_move(board)
    return move, searcher.best_score
