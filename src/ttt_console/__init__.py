"""ttt_console package.

Board model with win/draw detection, plus the console game around it.

Convenience imports are exposed for common workflows.
"""

from .board import Board, OccupiedCellError, OutOfBoundsError, axis_to_winner
from .config import GameConfig, load_config
from .game import Game, GameResult, Session
from .player import Player

__all__ = [
    "Board",
    "OccupiedCellError",
    "OutOfBoundsError",
    "axis_to_winner",
    "GameConfig",
    "load_config",
    "Game",
    "GameResult",
    "Session",
    "Player",
]
