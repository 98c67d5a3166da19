"""Omok_AI package exports."""

from .Board import Board, IllegalMove, BLACK, WHITE, EMPTY
from .Omokgame import Omokgame, Status, BoardSnapshot
from .Player import Player, HumanPlayer, GuiHumanPlayer, MoveSourceError
from .AiPlayer import SearchPlayer
from .RemotePlayer import RemotePlayer

# Subpackages for rules, AI search, GUI, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "IllegalMove",
    "BLACK",
    "WHITE",
    "EMPTY",
    "Omokgame",
    "Status",
    "BoardSnapshot",
    "Player",
    "HumanPlayer",
    "GuiHumanPlayer",
    "MoveSourceError",
    "SearchPlayer",
    "RemotePlayer",
    "ai",
    "engine",
    "gui",
    "utils",
]
