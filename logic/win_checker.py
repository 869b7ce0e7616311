"""
Win checker for the TicTacToe engine.
Decides whether a move won the game, filled the board, or neither.
"""

from typing import Optional, List, Tuple

from .config import GameConfig
from .types import Board, GameStatus, Identity, Sign


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same sign in a row
    (horizontally, vertically, or diagonally).

    Lines are scanned in a fixed order: rows top to bottom, columns left
    to right, then the two diagonals. The evaluation only looks at the
    board, so running it twice on the same board gives the same answer.
    """

    ROW_LINES = [
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
    ]

    COLUMN_LINES = [
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
    ]

    DIAGONAL_LINES = [
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def __init__(self, check_diagonals: bool = GameConfig.CHECK_DIAGONALS):
        """
        Initialize the win checker.

        Args:
            check_diagonals: If False, only rows and columns can win.
        """
        self.check_diagonals = check_diagonals
        self.winning_lines = self.ROW_LINES + self.COLUMN_LINES
        if check_diagonals:
            self.winning_lines = self.winning_lines + self.DIAGONAL_LINES

    def check_winner(self, board: Board) -> Optional[Sign]:
        """
        Check if there's a winner.

        Args:
            board: The game board.

        Returns:
            The winning Sign, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        row, col = line[0]
        return board[row][col]

    def get_winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the first winning line if there is one.

        Args:
            board: The game board.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.winning_lines:
            if self._is_winning_line(board, line):
                return line
        return None

    def _is_winning_line(self, board: Board, line: List[Tuple[int, int]]) -> bool:
        """All three cells are taken and hold the same sign."""
        first, second, third = (board[row][col] for row, col in line)
        return first is not None and first == second == third

    def is_full(self, board: Board) -> bool:
        """Check if every cell is taken."""
        return all(cell is not None for row in board for cell in row)

    def evaluate(self, board: Board, mover: Identity) -> GameStatus:
        """
        Work out the game status after a move.

        A win is checked before a tie, so a move that fills the board and
        completes a line is a win.

        Args:
            board: The board, with the new mark already placed.
            mover: The player who just moved.

        Returns:
            WON for the mover, TIE, or ACTIVE.
        """
        if self.get_winning_line(board) is not None:
            return GameStatus.won(mover)

        if self.is_full(board):
            return GameStatus.tie()

        return GameStatus.active()
