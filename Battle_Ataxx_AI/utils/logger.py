"""Lightweight logging utilities for matches and debugging."""

import datetime


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def board_logger(log=log_event):
    """Return a board notifier that narrates each change through log."""

    def notify(board):
        moves = board.all_moves()
        last = f", last {moves[-1]}" if moves else ""
        status = "to move" if board.winner is None else "game over"
        log(
            f"{board.whose_move.name} {status}: red={board.red_pieces} "
            f"blue={board.blue_pieces} jumps={board.num_jumps}{last}"
        )

    return notify
