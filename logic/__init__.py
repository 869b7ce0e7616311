"""
Logic module for the TicTacToe arbiter.
Handles game state, rules, and the stored record format.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .errors import (
    GameError,
    TileOutOfBounds,
    TileAlreadySet,
    GameAlreadyOver,
    NotPlayersTurn,
    AlreadyStarted,
    NotStarted,
    InvalidPlayers,
)
from .types import GameStatus, Sign, StatusKind, Tile, new_identity
from .game_state import Game
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .record import RecordError, decode, encode
