"""
Basic types for the TicTacToe engine.
Signs, tiles, game status and board helpers.
"""

import secrets
from enum import Enum
from dataclasses import dataclass
from typing import List, Optional

from .config import GameConfig


# A player identity: 32 opaque bytes
Identity = bytes

# Identity stored in a record that was never started
ZERO_IDENTITY: Identity = bytes(GameConfig.IDENTITY_SIZE)


def new_identity() -> Identity:
    """Create a fresh random player identity."""
    return secrets.token_bytes(GameConfig.IDENTITY_SIZE)


def is_identity(value: object) -> bool:
    """Check that a value looks like a player identity."""
    return isinstance(value, bytes) and len(value) == GameConfig.IDENTITY_SIZE


class Sign(Enum):
    """The two marks a player can place."""
    X = 0
    O = 1

    @classmethod
    def for_index(cls, player_index: int) -> "Sign":
        """Player 0 plays X, player 1 plays O."""
        return cls(player_index)


# None means the cell is empty
Cell = Optional[Sign]
Board = List[List[Cell]]


def new_board() -> Board:
    """Create an empty 3x3 board."""
    size = GameConfig.BOARD_SIZE
    return [[None for _ in range(size)] for _ in range(size)]


@dataclass(frozen=True)
class Tile:
    """
    A position picked by a player.

    Row and column come straight from the caller, so they can be any
    integer. The engine checks the bounds.
    """
    row: int
    column: int

    def in_bounds(self) -> bool:
        last = GameConfig.BOARD_SIZE - 1
        return 0 <= self.row <= last and 0 <= self.column <= last


class StatusKind(Enum):
    """Where the game is at. Values are the record tags."""
    ACTIVE = 0
    TIE = 1
    WON = 2


@dataclass(frozen=True)
class GameStatus:
    """
    Status of a game.

    Only WON carries a winner. ACTIVE -> TIE and ACTIVE -> WON are the
    only transitions, both are final.
    """
    kind: StatusKind = StatusKind.ACTIVE
    winner: Optional[Identity] = None

    @classmethod
    def active(cls) -> "GameStatus":
        return cls(StatusKind.ACTIVE)

    @classmethod
    def tie(cls) -> "GameStatus":
        return cls(StatusKind.TIE)

    @classmethod
    def won(cls, winner: Identity) -> "GameStatus":
        return cls(StatusKind.WON, winner)

    @property
    def is_over(self) -> bool:
        return self.kind is not StatusKind.ACTIVE

    def __str__(self) -> str:
        if self.kind is StatusKind.WON:
            return f"won by {self.winner.hex()[:8]}"
        return self.kind.name.lower()
