"""Abstract player interface for human or AI controllers."""

try:
    from Move import Move
    from utils.timer import expired
except ImportError:
    from Battle_Ataxx_AI.Move import Move
    from Battle_Ataxx_AI.utils.timer import expired


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board, deadline=None):
        """Return the Move to play (Move.parse('-') to pass) within the time limit."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, color, input_fn=input):
        super().__init__(color)
        self.input_fn = input_fn

    def next_move(self, board, deadline=None):
        """Text-input player; raises TimeoutError if the answer comes after the deadline."""
        if expired(deadline):
            raise TimeoutError("Move exceeded allotted time")

        raw = self.input_fn(f"{self.color.name} move (e.g. a1-a2, '-' to pass): ").strip()
        if expired(deadline):
            raise TimeoutError("Move exceeded allotted time")
        return Move.parse(raw)
