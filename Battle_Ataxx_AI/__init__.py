"""Battle_Ataxx_AI package exports."""

from .Board import Board, PieceColor, JUMP_LIMIT
from .Move import Move, PASS
from .engine.errors import GameError, IllegalMove, IllegalBlock
from .Ataxxgame import Ataxxgame
from .Player import Player, HumanPlayer
from .AIPlayer import AIPlayer

# Subpackages for rule enforcement, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "PieceColor",
    "JUMP_LIMIT",
    "Move",
    "PASS",
    "GameError",
    "IllegalMove",
    "IllegalBlock",
    "Ataxxgame",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "ai",
    "engine",
    "utils",
]
