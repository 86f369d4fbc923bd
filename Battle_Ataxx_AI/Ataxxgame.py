"""Game loop and turn management for Ataxx."""

try:
    from Board import Board, PieceColor
    from engine import referee
    from utils import timer
except ImportError:
    from Battle_Ataxx_AI.Board import Board, PieceColor
    from Battle_Ataxx_AI.engine import referee
    from Battle_Ataxx_AI.utils import timer


RESULT_TEXT = {
    PieceColor.RED: "Red wins",
    PieceColor.BLUE: "Blue wins",
    PieceColor.EMPTY: "Draw",
}


class Ataxxgame:
    def __init__(self, red_player, blue_player, blocks=(), move_timeout=None, logger=print, renderer=None):
        self.board = Board()
        for square in blocks:
            self.board.set_block(square)
        self.move_timeout = move_timeout
        self.players = {PieceColor.RED: red_player, PieceColor.BLUE: blue_player}
        self.logger = logger
        self.renderer = renderer
        if renderer:
            self.board.set_notifier(renderer)

    def play(self):
        """Run a single game. Returns the winning PieceColor, EMPTY for a draw."""
        board = self.board
        while board.winner is None:
            color = board.whose_move
            player = self.players[color]
            deadline = timer.deadline_after(self.move_timeout)

            try:
                move = player.next_move(board, deadline=deadline)
                referee.check_move(move, board, color, deadline, move_index=board.num_moves)
                board.make_move(move)
            except (TimeoutError, ValueError) as exc:
                self.logger(f"Disqualification: {color.name} - {exc}")
                return color.opposite()

            if move.is_pass():
                self.logger(f"Move {board.num_moves}: {color.name} passes")
            else:
                self.logger(f"Move {board.num_moves}: {color.name} {move}")

        self.logger(
            f"Result: {RESULT_TEXT[board.winner]} "
            f"(red={board.red_pieces}, blue={board.blue_pieces})"
        )
        return board.winner
