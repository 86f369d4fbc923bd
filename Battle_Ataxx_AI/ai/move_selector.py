"""Legal move generation for the side to move (deterministic order)."""

try:
    from Board import PLAYABLE, WINDOW_DELTAS, PieceColor
    from Move import Move, PASS, EXTENDED_SIDE, BORDER
except ImportError:
    from Battle_Ataxx_AI.Board import PLAYABLE, WINDOW_DELTAS, PieceColor
    from Battle_Ataxx_AI.Move import Move, PASS, EXTENDED_SIDE, BORDER


def _xy(sq):
    return sq % EXTENDED_SIDE - BORDER, sq // EXTENDED_SIDE - BORDER


def generate_moves(board, color=None):
    """
    All non-pass moves for color (default: side to move) that land on an empty square.
    Sources are scanned a1, b1, ..., g7; destinations row by row within the 5x5 window.
    Border squares read BLOCKED, so no bounds checks are needed.
    """
    color = board.whose_move if color is None else color
    moves = []
    for sq in PLAYABLE:
        if board.get_square(sq) != color:
            continue
        x0, y0 = _xy(sq)
        for d in WINDOW_DELTAS:
            if board.get_square(sq + d) != PieceColor.EMPTY:
                continue
            x1, y1 = _xy(sq + d)
            moves.append(Move.move(x0, y0, x1, y1))
    return moves


def legal_moves(board, include_pass=True):
    """
    Legal moves for the side to move. When none exists and include_pass is set,
    the only legal move is a pass.
    """
    moves = generate_moves(board)
    if not moves and include_pass:
        return [PASS]
    return moves
