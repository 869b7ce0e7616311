"""
Game storage for the TicTacToe arbiter.

Owns the mapping from address to stored game record. This is where the
engine is called from: setup_game() provisions a record and starts it,
play() checks who is moving before handing the move to the engine.
"""

import logging
import threading
from typing import Dict, Hashable, Optional

from logic.errors import GameError, NotPlayersTurn
from logic.game_state import Game
from logic.record import SPACE, decode, encode
from logic.types import Identity, Tile
from logic.win_checker import WinChecker

from .errors import AccountInUse, AccountNotFound

logger = logging.getLogger(__name__)


class GameStore:
    """
    In-memory store of fixed-size game records.

    Every change goes through the store's lock, so a game is only ever
    mutated by one call at a time. A call that fails leaves the stored
    record untouched.
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        """
        Initialize the store.

        Args:
            win_checker: Rules used for every game in this store.
        """
        self.win_checker = win_checker or WinChecker()
        self._records: Dict[Hashable, bytearray] = {}
        self._lock = threading.Lock()

    def __contains__(self, address: Hashable) -> bool:
        return address in self._records

    def __len__(self) -> int:
        return len(self._records)

    def setup_game(
        self,
        address: Hashable,
        player_one: Identity,
        player_two: Identity
    ) -> Game:
        """
        Allocate a record for a new game and start it.

        Args:
            address: Where to store the game.
            player_one: Moves first (plays X).
            player_two: Moves second (plays O).

        Returns:
            The started game.

        Raises:
            AccountInUse: If the address already holds a game.
            GameError: If the game could not be started.
        """
        with self._lock:
            if address in self._records:
                raise AccountInUse(f"Address {address!r} already holds a game")

            record = bytearray(SPACE)
            game = decode(record, self.win_checker)
            game.start([player_one, player_two])

            self._records[address] = bytearray(encode(game))

        logger.info("Set up game at %r", address)
        return game

    def load(self, address: Hashable) -> Game:
        """
        Load the game stored at an address.

        Raises:
            AccountNotFound: If nothing is stored there.
        """
        record = self._records.get(address)
        if record is None:
            raise AccountNotFound(f"No game at {address!r}")
        return decode(record, self.win_checker)

    def play(self, address: Hashable, player: Identity, tile: Tile) -> Game:
        """
        Play a move on behalf of a player.

        Args:
            address: The game to play in.
            player: Who is making the move.
            tile: Where they want to place their sign.

        Returns:
            The game after the move.

        Raises:
            AccountNotFound: If there is no game at the address.
            NotPlayersTurn: If it is not the player's turn.
            GameError: If the engine rejects the move.
        """
        with self._lock:
            game = self.load(address)

            if game.is_started() and game.current_player() != player:
                logger.warning("Rejected move at %r: not the player's turn", address)
                raise NotPlayersTurn()

            try:
                game.play(tile)
            except GameError as e:
                logger.warning("Rejected move at %r: %s", address, e)
                raise

            self._records[address] = bytearray(encode(game))

        return game
