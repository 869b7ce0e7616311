"""
Game state management for the TicTacToe engine.
Tracks the players, the board, the turn counter and the game status.
"""

import logging
from typing import List, Sequence, Tuple, Union
from dataclasses import dataclass, field

from .config import GameConfig
from .errors import AlreadyStarted, InvalidPlayers, NotStarted
from .move_validator import MoveValidator
from .types import (
    Board,
    GameStatus,
    Identity,
    Sign,
    Tile,
    ZERO_IDENTITY,
    is_identity,
    new_board,
)
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


@dataclass
class Game:
    """
    The complete state of one TicTacToe game.

    A default Game() is the zero-valued record handed out by storage:
    turn 0 means it has never been started. start() fills it in once,
    then every accepted play() changes exactly one cell.

    Tracks:
    - The two players (player 0 moves first and plays X)
    - The 1-based turn counter (whose move is pending)
    - The 3x3 board
    - Game status (active, tie, won)
    """

    players: Tuple[Identity, Identity] = (ZERO_IDENTITY, ZERO_IDENTITY)

    # 0 until start() is called
    turn: int = 0

    # The 3x3 board - None means empty, otherwise a Sign
    board: Board = field(default_factory=new_board)

    status: GameStatus = field(default_factory=GameStatus.active)

    # Rules used to decide wins, not part of the stored state
    win_checker: WinChecker = field(
        default_factory=WinChecker, repr=False, compare=False
    )

    def start(self, players: Sequence[Identity]):
        """
        Start the game.

        Args:
            players: The two player identities, first mover first.

        Raises:
            AlreadyStarted: If start() was already called.
            InvalidPlayers: If the players are not two distinct identities.
        """
        if self.turn != 0:
            raise AlreadyStarted()

        players = tuple(players)
        if (len(players) != GameConfig.PLAYER_COUNT
                or not all(is_identity(p) for p in players)
                or players[0] == players[1]):
            raise InvalidPlayers()

        self.players = players
        self.turn = 1
        self.board = new_board()
        self.status = GameStatus.active()
        logger.info(
            "Game started: %s vs %s", players[0].hex()[:8], players[1].hex()[:8]
        )

    def is_started(self) -> bool:
        return self.turn != 0

    def is_active(self) -> bool:
        return not self.status.is_over

    def current_player_index(self) -> int:
        """Player 0 moves on odd turns, player 1 on even turns."""
        if self.turn == 0:
            raise NotStarted()
        return (self.turn - 1) % 2

    def current_player(self) -> Identity:
        """Get the identity of the player whose move is pending."""
        return self.players[self.current_player_index()]

    def play(self, tile: Union[Tile, Tuple[int, int]]):
        """
        Place the current player's sign on a tile.

        The caller must already have checked that the acting player is
        current_player(). After the move the game may be won or tied;
        the turn counter only moves on while the game stays active.

        Args:
            tile: Where to place the sign, a Tile or a (row, column) pair.
                Any integers are accepted here.

        Raises:
            NotStarted, GameAlreadyOver, TileOutOfBounds, TileAlreadySet.
        """
        if not isinstance(tile, Tile):
            tile = Tile(*tile)

        result = MoveValidator().validate_move(self, tile)
        if not result.is_valid:
            raise result.error

        player_index = self.current_player_index()
        mover = self.players[player_index]
        self.board[tile.row][tile.column] = Sign.for_index(player_index)
        logger.debug(
            "Turn %d: %s at (%d, %d)",
            self.turn, Sign.for_index(player_index).name, tile.row, tile.column
        )

        self.status = self.win_checker.evaluate(self.board, mover)
        if self.is_active():
            self.turn += 1
        else:
            logger.info("Game over on turn %d: %s", self.turn, self.status)

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples.
        """
        empty = []
        for row in range(GameConfig.BOARD_SIZE):
            for col in range(GameConfig.BOARD_SIZE):
                if self.board[row][col] is None:
                    empty.append((row, col))
        return empty

    def copy(self) -> "Game":
        """Create a deep copy of the game."""
        return Game(
            players=self.players,
            turn=self.turn,
            board=[[cell for cell in row] for row in self.board],
            status=self.status,
            win_checker=self.win_checker,
        )

    def render(self) -> str:
        """Draw the board as text."""
        lines = ["  0   1   2", "┌───┬───┬───┐"]

        for row in range(GameConfig.BOARD_SIZE):
            row_str = "│"
            for col in range(GameConfig.BOARD_SIZE):
                cell = self.board[row][col]
                mark = " " if cell is None else cell.name
                row_str += f" {mark} │"
            lines.append(f"{row_str} {row}")

            if row < GameConfig.BOARD_SIZE - 1:
                lines.append("├───┼───┼───┤")

        lines.append("└───┴───┴───┘")
        return "\n".join(lines)
