"""
Errors raised by the TicTacToe engine.

Every error is a plain validation failure: the operation that raised it
changed nothing, and retrying the same call fails the same way.
Each error has a stable numeric code, numbered in declaration order
starting at GameConfig.ERROR_CODE_OFFSET.
"""

from .config import GameConfig


class GameError(Exception):
    """Base class for all game rule violations."""

    code = None
    message = "Game rule violated"

    def __init__(self, message=None):
        super().__init__(message or self.message)

    @property
    def name(self) -> str:
        return type(self).__name__


class TileOutOfBounds(GameError):
    message = "Tile is outside the 3x3 board"


class TileAlreadySet(GameError):
    message = "Tile is already occupied"


class GameAlreadyOver(GameError):
    message = "Game is already over"


class NotPlayersTurn(GameError):
    message = "It is not this player's turn"


class AlreadyStarted(GameError):
    message = "Game has already been started"


class NotStarted(GameError):
    message = "Game has not been started"


class InvalidPlayers(GameError):
    message = "Players must be two distinct 32-byte identities"


# Order matters: it fixes the numeric codes
ERRORS = [
    TileOutOfBounds,
    TileAlreadySet,
    GameAlreadyOver,
    NotPlayersTurn,
    AlreadyStarted,
    NotStarted,
    InvalidPlayers,
]

for _index, _error in enumerate(ERRORS):
    _error.code = GameConfig.ERROR_CODE_OFFSET + _index

del _index, _error


def error_for_code(code: int) -> type:
    """Look up an error class by its numeric code."""
    for error in ERRORS:
        if error.code == code:
            return error
    raise KeyError(code)
