"""
Move validator for the TicTacToe engine.
Validates that a move follows the rules before anything is changed.
"""

from typing import Optional
from dataclasses import dataclass

from .errors import (
    GameAlreadyOver,
    GameError,
    NotStarted,
    TileAlreadySet,
    TileOutOfBounds,
)
from .types import Tile


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[GameError] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order (first failure wins):
    0. Game must have been started
    1. Game must not be over
    2. Tile must be on the board
    3. Tile must be empty

    Whose turn it is gets checked by the caller, before the engine runs.
    """

    def validate_move(self, game, tile: Tile) -> ValidationResult:
        """
        Validate a move.

        Args:
            game: Current game.
            tile: Where the current player wants to place their sign.

        Returns:
            ValidationResult with is_valid and error.
        """
        if game.turn == 0:
            return ValidationResult(is_valid=False, error=NotStarted())

        if not game.is_active():
            return ValidationResult(is_valid=False, error=GameAlreadyOver())

        if not tile.in_bounds():
            return ValidationResult(
                is_valid=False,
                error=TileOutOfBounds(
                    f"Invalid position ({tile.row}, {tile.column}). Must be 0-2."
                )
            )

        occupant = game.board[tile.row][tile.column]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error=TileAlreadySet(
                    f"Cell ({tile.row}, {tile.column}) is already occupied by {occupant.name}"
                )
            )

        return ValidationResult(is_valid=True)
