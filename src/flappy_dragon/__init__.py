"""
Flappy Dragon: a Flappy-Bird-style game drawn on a grid of character cells.
"""

from .console import Cell, Console, Key
from .data_models import Obstacle, Player
from .game_state import GameMode, State

__all__ = ["Cell", "Console", "Key", "Obstacle", "Player", "GameMode", "State"]
