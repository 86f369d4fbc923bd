"""Static evaluation for Ataxx positions. Positive scores favor RED, negative favor BLUE."""

try:
    from Board import PieceColor
except ImportError:
    from Battle_Ataxx_AI.Board import PieceColor


INF = 10 ** 9
# Magnitude of a decided game. Search adds the remaining depth so faster wins score higher.
WINNING_VALUE = 10 ** 6


def material(board):
    """Piece difference, RED minus BLUE."""
    return board.red_pieces - board.blue_pieces


def score_board(board, winning_value=WINNING_VALUE):
    """
    +winning_value if RED has won, -winning_value if BLUE has won, 0 for a draw,
    otherwise the material difference.
    """
    winner = board.winner
    if winner is None:
        return material(board)
    if winner == PieceColor.RED:
        return winning_value
    if winner == PieceColor.BLUE:
        return -winning_value
    return 0


def score_for(board, color):
    """score_board from color's point of view."""
    score = score_board(board)
    return score if color == PieceColor.RED else -score
