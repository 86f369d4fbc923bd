"""Ataxx board state: legality, moves with captures, undo, blocks, and winner detection."""

from dataclasses import dataclass, field
from enum import IntEnum

try:
    from Move import Move, PASS, SIDE, EXTENDED_SIDE, index, on_board, parse_square, ROWS, COLUMNS
    from engine.errors import GameError, IllegalMove, IllegalBlock
except ImportError:
    from Battle_Ataxx_AI.Move import Move, PASS, SIDE, EXTENDED_SIDE, index, on_board, parse_square, ROWS, COLUMNS
    from Battle_Ataxx_AI.engine.errors import GameError, IllegalMove, IllegalBlock


# Consecutive jumps (no intervening extend) that end the game.
JUMP_LIMIT = 25

AREA = SIDE * SIDE


class PieceColor(IntEnum):
    EMPTY = 0
    RED = 1
    BLUE = 2
    BLOCKED = 3

    def opposite(self):
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    def is_piece(self):
        return self is PieceColor.RED or self is PieceColor.BLUE

    @property
    def symbol(self):
        return _SYMBOLS[self]


_SYMBOLS = {
    PieceColor.EMPTY: "-",
    PieceColor.RED: "r",
    PieceColor.BLUE: "b",
    PieceColor.BLOCKED: "X",
}

# Playable squares in row-major order a1, b1, ..., g7.
PLAYABLE = tuple(index(x, y) for y in range(SIDE) for x in range(SIDE))
NEAR_DELTAS = tuple(
    dx + dy * EXTENDED_SIDE for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)
WINDOW_DELTAS = tuple(
    dx + dy * EXTENDED_SIDE for dy in range(-2, 3) for dx in range(-2, 3) if (dx, dy) != (0, 0)
)


def _nop(board):
    pass


@dataclass
class UndoGroup:
    """Everything one move changed: (square index, previous color) pairs plus counters."""

    move: Move
    jumps: int
    winner: object
    changes: list = field(default_factory=list)


class Board:
    def __init__(self, board0=None):
        """A board in the starting position, or a fork of board0 with empty history."""
        self._notifier = _nop
        if board0 is None:
            self._cells = [PieceColor.BLOCKED] * (EXTENDED_SIDE * EXTENDED_SIDE)
            self.clear()
            return
        self._cells = board0._cells[:]
        self._counts = board0._counts[:]
        self._whose_move = board0._whose_move
        self._num_jumps = board0._num_jumps
        self._winner = board0._winner
        self._all_moves = []
        self._undo = []
        self._blocks_locked = board0._blocks_locked or board0.num_moves > 0

    def copy(self):
        return Board(self)

    def clear(self):
        """Reset to the starting position: RED at a1/g7, BLUE at a7/g1, RED to move."""
        cells = self._cells
        for sq in range(len(cells)):
            cells[sq] = PieceColor.BLOCKED
        for sq in PLAYABLE:
            cells[sq] = PieceColor.EMPTY
        for x, y, color in ((0, 0, PieceColor.RED), (6, 6, PieceColor.RED),
                            (0, 6, PieceColor.BLUE), (6, 0, PieceColor.BLUE)):
            cells[index(x, y)] = color
        self._counts = [0] * len(PieceColor)
        self._counts[PieceColor.EMPTY] = AREA - 4
        self._counts[PieceColor.RED] = 2
        self._counts[PieceColor.BLUE] = 2
        self._whose_move = PieceColor.RED
        self._num_jumps = 0
        self._winner = None
        self._all_moves = []
        self._undo = []
        self._blocks_locked = False
        self._announce()

    @property
    def whose_move(self):
        return self._whose_move

    @property
    def winner(self):
        """RED or BLUE once decided, EMPTY for a draw, None while the game is on."""
        return self._winner

    @property
    def num_jumps(self):
        return self._num_jumps

    @property
    def num_moves(self):
        return len(self._all_moves)

    @property
    def red_pieces(self):
        return self._counts[PieceColor.RED]

    @property
    def blue_pieces(self):
        return self._counts[PieceColor.BLUE]

    @property
    def total_open(self):
        """Number of playable squares that are not blocked."""
        return AREA - self._counts[PieceColor.BLOCKED]

    def num_pieces(self, color):
        return self._counts[color]

    def all_moves(self):
        return list(self._all_moves)

    def get(self, x, y):
        """Contents of (x, y); anything within two squares outside the board reads BLOCKED."""
        return self._cells[index(x, y)]

    def get_square(self, sq):
        return self._cells[sq]

    def legal_move(self, move):
        """False for any move once the game is decided."""
        if self._winner is not None:
            return False
        try:
            move = self._coerce_move(move)
        except IllegalMove:
            return False
        if move.is_pass():
            return not self.can_move(self._whose_move)
        if not (on_board(move.x0, move.y0) and on_board(move.x1, move.y1)):
            return False
        if move.distance() not in (1, 2):
            return False
        cells = self._cells
        return cells[move.from_index] == self._whose_move and cells[move.to_index] == PieceColor.EMPTY

    def can_move(self, color):
        """True iff some square of color has an empty square within distance 2."""
        cells = self._cells
        empty = PieceColor.EMPTY
        for sq in PLAYABLE:
            if cells[sq] != color:
                continue
            for d in WINDOW_DELTAS:
                if cells[sq + d] == empty:
                    return True
        return False

    def make_move(self, move):
        """Apply move (a Move or text like 'a1-a2' / '-'); raise IllegalMove if not legal."""
        move = self._coerce_move(move)
        if not self.legal_move(move):
            raise IllegalMove(f"Illegal move: {move}")
        if move.is_pass():
            self.pass_turn()
            return

        mover = self._whose_move
        opponent = mover.opposite()
        group = UndoGroup(move=move, jumps=self._num_jumps, winner=self._winner)
        self._set(move.to_index, mover, group)
        if move.is_jump():
            self._set(move.from_index, PieceColor.EMPTY, group)
            self._num_jumps += 1
        else:
            self._num_jumps = 0

        cells = self._cells
        for d in NEAR_DELTAS:
            sq = move.to_index + d
            if cells[sq] == opponent:
                self._set(sq, mover, group)

        self._undo.append(group)
        self._all_moves.append(move)
        self._whose_move = opponent
        self._update_winner()
        self._announce()

    def pass_turn(self):
        """Give the move to the opponent; only legal when the side to move is stuck."""
        if self._winner is not None:
            raise IllegalMove("Illegal move: the game is over")
        if self.can_move(self._whose_move):
            raise IllegalMove("Illegal move: cannot pass while a move exists")
        self._undo.append(UndoGroup(move=PASS, jumps=self._num_jumps, winner=self._winner))
        self._all_moves.append(PASS)
        self._whose_move = self._whose_move.opposite()
        self._announce()

    def undo(self):
        """Take back the last move or pass."""
        if not self._undo:
            raise GameError("nothing to undo")
        group = self._undo.pop()
        cells = self._cells
        counts = self._counts
        for sq, previous in reversed(group.changes):
            counts[cells[sq]] -= 1
            counts[previous] += 1
            cells[sq] = previous
        self._num_jumps = group.jumps
        self._winner = group.winner
        self._whose_move = self._whose_move.opposite()
        self._all_moves.pop()
        self._announce()

    def _set(self, sq, color, group):
        previous = self._cells[sq]
        group.changes.append((sq, previous))
        self._counts[previous] -= 1
        self._counts[color] += 1
        self._cells[sq] = color

    def _update_winner(self):
        red, blue = self.red_pieces, self.blue_pieces
        if red + blue == self.total_open:
            self._winner = self._by_count()
        elif red == 0:
            self._winner = PieceColor.BLUE
        elif blue == 0:
            self._winner = PieceColor.RED
        elif self._num_jumps >= JUMP_LIMIT:
            self._winner = self._by_count()
        elif not self.can_move(PieceColor.RED) and not self.can_move(PieceColor.BLUE):
            self._winner = self._by_count()
        else:
            self._winner = None

    def _by_count(self):
        red, blue = self.red_pieces, self.blue_pieces
        if red > blue:
            return PieceColor.RED
        if blue > red:
            return PieceColor.BLUE
        return PieceColor.EMPTY

    def legal_block(self, square):
        """True iff a block (with its reflections) may go on square ('c3' or (x, y))."""
        if self.num_moves > 0 or self._blocks_locked:
            return False
        try:
            x, y = self._coerce_square(square)
        except IllegalBlock:
            return False
        return all(self._cells[sq] == PieceColor.EMPTY for sq in block_squares(x, y))

    def set_block(self, square):
        """Block square together with its mirror images about the center lines of the board."""
        if not self.legal_block(square):
            raise IllegalBlock(f"illegal block placement: {square}")
        x, y = self._coerce_square(square)
        for sq in block_squares(x, y):
            self._counts[self._cells[sq]] -= 1
            self._counts[PieceColor.BLOCKED] += 1
            self._cells[sq] = PieceColor.BLOCKED
        self._update_winner()
        self._announce()

    def set_notifier(self, notify):
        """Call notify(board) after every change from now on (None restores the no-op)."""
        self._notifier = notify or _nop
        self._announce()

    def _announce(self):
        self._notifier(self)

    @staticmethod
    def _coerce_move(move):
        if move is None:
            raise IllegalMove("no move")
        if isinstance(move, str):
            return Move.parse(move)
        return move

    @staticmethod
    def _coerce_square(square):
        if isinstance(square, str):
            try:
                return parse_square(square)
            except IllegalMove as exc:
                raise IllegalBlock(str(exc)) from exc
        x, y = square
        if not on_board(x, y):
            raise IllegalBlock(f"square off the board: {square}")
        return x, y

    def to_string(self, legend=False):
        lines = []
        for y in range(SIDE - 1, -1, -1):
            row = " ".join(self.get(x, y).symbol for x in range(SIDE))
            lines.append(f"{ROWS[y]} {row}" if legend else row)
        if legend:
            lines.append("  " + " ".join(COLUMNS))
        return "\n".join(lines)

    def __str__(self):
        return self.to_string()

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._whose_move == other._whose_move and self._cells == other._cells

    def __hash__(self):
        return hash((self._whose_move, tuple(self._cells)))


def block_squares(x, y):
    """Linearized indices of (x, y) and its distinct reflections, in ascending order."""
    far = SIDE - 1
    return sorted({index(x, y), index(far - x, y), index(x, far - y), index(far - x, far - y)})
