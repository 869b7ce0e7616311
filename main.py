"""
Command-line driver for the TicTacToe arbiter.

Replays a list of moves on a fresh game:
- Two random players are created
- A game record is provisioned in a GameStore
- Each move is played for whoever's turn it is
- The board is printed after every move, then the result

Example:
    python main.py 0,0 1,1 0,1 1,0 0,2
"""

import logging
import sys
from typing import List, Optional

from logic.config import GameConfig
from logic.errors import GameError
from logic.types import StatusKind, Tile, new_identity
from logic.win_checker import WinChecker
from host.store import GameStore


def parse_move(text: str) -> Tile:
    """
    Parse a "row,column" argument.

    Args:
        text: Move as typed on the command line.

    Returns:
        The Tile. Bounds are left to the engine.
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"Move must look like row,column: {text!r}")
    row, column = (int(p.strip()) for p in parts)
    return Tile(row, column)


class MatchRunner:
    """
    Plays a scripted list of moves through the game store.
    """

    ADDRESS = "game"

    def __init__(self, check_diagonals: bool = GameConfig.CHECK_DIAGONALS):
        self.store = GameStore(WinChecker(check_diagonals=check_diagonals))
        self.players = [new_identity(), new_identity()]
        self.names = {self.players[0]: "Player 1 (X)", self.players[1]: "Player 2 (O)"}

    def run(self, moves: List[Tile]) -> int:
        """
        Play all moves.

        Returns:
            Exit code: 0 if every move was accepted, 1 otherwise.
        """
        game = self.store.setup_game(self.ADDRESS, *self.players)

        for tile in moves:
            player = game.current_player()
            print(f"\n>>> {self.names[player]} plays ({tile.row}, {tile.column})")

            try:
                game = self.store.play(self.ADDRESS, player, tile)
            except GameError as e:
                print(f"ERROR: {e.name} ({e.code}): {e}")
                return 1

            print(game.render())

        self._show_result(game)
        return 0

    def _show_result(self, game):
        print("\n" + "="*40)
        if game.status.kind is StatusKind.WON:
            print(f"   {self.names[game.status.winner]} WINS on turn {game.turn}!")
        elif game.status.kind is StatusKind.TIE:
            print("   It's a TIE!")
        else:
            print(f"   Game still active, turn {game.turn}")
        print("="*40)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe arbiter replay")
    parser.add_argument(
        "moves",
        nargs="*",
        help="Moves as row,column, played alternately starting with player 1"
    )
    parser.add_argument(
        "--legacy-diagonals",
        action="store_true",
        help="Do not count diagonal lines as wins"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show engine log messages"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        moves = [parse_move(m) for m in args.moves]
    except ValueError as e:
        parser.error(str(e))

    runner = MatchRunner(check_diagonals=not args.legacy_diagonals)
    return runner.run(moves)


if __name__ == "__main__":
    sys.exit(main())
