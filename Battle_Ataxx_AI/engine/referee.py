"""Move validation, time control, and disqualification handling."""

try:
    from engine.errors import IllegalMove
    from utils.timer import expired
except ImportError:
    from Battle_Ataxx_AI.engine.errors import IllegalMove
    from Battle_Ataxx_AI.utils.timer import expired


def check_move(move, board, color, deadline=None, move_index=None):
    """
    Validate a move against time, turn order, and board legality.
    Raises TimeoutError past the deadline and IllegalMove for anything else.
    """
    if expired(deadline):
        raise TimeoutError("Move exceeded allotted time")

    if board.whose_move != color:
        raise IllegalMove(f"{color.name} moved out of turn")

    if not board.legal_move(move):
        where = f" (move {move_index + 1})" if move_index is not None else ""
        raise IllegalMove(f"Illegal move{where}: {move}")

    return True
