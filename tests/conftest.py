"""
Shared fixtures for the TicTacToe arbiter tests.
"""

import pytest

from logic.game_state import Game
from logic.types import new_identity


@pytest.fixture
def players():
    """Two distinct player identities, first mover first."""
    return (new_identity(), new_identity())


@pytest.fixture
def game(players):
    """A started game."""
    game = Game()
    game.start(players)
    return game
