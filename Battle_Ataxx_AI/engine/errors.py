"""Errors raised by the Ataxx board when a caller breaks the rules."""


class GameError(ValueError):
    """Base class; a ValueError so drivers can treat it like bad input."""


class IllegalMove(GameError):
    """Move application or move text that fails the legality check."""


class IllegalBlock(GameError):
    """Block placement after the first move or on an occupied square."""
