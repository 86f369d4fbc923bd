"""Ataxx move values and their text encoding ("a1-a2" or "-" for pass)."""

try:
    from engine.errors import IllegalMove
except ImportError:
    from Battle_Ataxx_AI.engine.errors import IllegalMove


SIDE = 7
# Two layers of permanently blocked border around the playable 7x7 region.
BORDER = 2
EXTENDED_SIDE = SIDE + 2 * BORDER

COLUMNS = "abcdefg"
ROWS = "1234567"


def index(x, y):
    """Linearized index of (x, y) in the bordered grid; valid for -2 <= x, y <= 8."""
    return (y + BORDER) * EXTENDED_SIDE + (x + BORDER)


def on_board(x, y):
    return 0 <= x < SIDE and 0 <= y < SIDE


def square_name(x, y):
    return f"{COLUMNS[x]}{ROWS[y]}"


def parse_square(text):
    """Return (x, y) for a square name such as 'c3'."""
    if not isinstance(text, str) or len(text) != 2:
        raise IllegalMove(f"bad square: {text!r}")
    col, row = text[0].lower(), text[1]
    if col not in COLUMNS or row not in ROWS:
        raise IllegalMove(f"square off the board: {text!r}")
    return COLUMNS.index(col), ROWS.index(row)


class Move:
    """A pass, or a source/destination pair within Chebyshev distance 2.

    Instances are interned: build them with Move.move() or Move.parse()
    and compare with == (identity also holds).
    """

    __slots__ = ("x0", "y0", "x1", "y1", "from_index", "to_index", "_text")

    def __init__(self, x0=None, y0=None, x1=None, y1=None):
        self.x0, self.y0, self.x1, self.y1 = x0, y0, x1, y1
        if x0 is None:
            self.from_index = self.to_index = None
            self._text = "-"
        else:
            self.from_index = index(x0, y0)
            self.to_index = index(x1, y1)
            self._text = f"{square_name(x0, y0)}-{square_name(x1, y1)}"

    @staticmethod
    def move(x0, y0, x1, y1):
        """Return the move (x0, y0) -> (x1, y1), or None if no such move exists."""
        return _ALL_MOVES.get((x0, y0, x1, y1))

    @staticmethod
    def parse(text):
        """Decode 'c0r0-c1r1' or '-' (pass). Raises IllegalMove on malformed text."""
        text = text.strip()
        if text == "-":
            return PASS
        parts = text.split("-")
        if len(parts) != 2:
            raise IllegalMove(f"bad move text: {text!r}")
        x0, y0 = parse_square(parts[0])
        x1, y1 = parse_square(parts[1])
        mv = Move.move(x0, y0, x1, y1)
        if mv is None:
            raise IllegalMove(f"squares too far apart: {text!r}")
        return mv

    def is_pass(self):
        return self.x0 is None

    def distance(self):
        if self.is_pass():
            return 0
        return max(abs(self.x1 - self.x0), abs(self.y1 - self.y0))

    def is_extend(self):
        return self.distance() == 1

    def is_jump(self):
        return self.distance() == 2

    @property
    def source(self):
        return None if self.is_pass() else (self.x0, self.y0)

    @property
    def dest(self):
        return None if self.is_pass() else (self.x1, self.y1)

    def __str__(self):
        return self._text

    def __repr__(self):
        return f"Move({self._text!r})"

    def __eq__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return self._text == other._text

    def __hash__(self):
        return hash(self._text)


PASS = Move()


def _build_moves():
    table = {}
    for y0 in range(SIDE):
        for x0 in range(SIDE):
            for dy in range(-2, 3):
                for dx in range(-2, 3):
                    x1, y1 = x0 + dx, y0 + dy
                    if (dx, dy) == (0, 0) or not on_board(x1, y1):
                        continue
                    table[(x0, y0, x1, y1)] = Move(x0, y0, x1, y1)
    return table


_ALL_MOVES = _build_moves()
