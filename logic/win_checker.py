"""
Win checker for TicTacToe.
Finds the winning line on a board, and tells full-board draws apart.
"""

from typing import Optional, Tuple

import numpy as np

from .config import GameConfig
from .game_state import Board, Cell, is_full


WinningLine = Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # One row per line, in priority order: rows, columns, diagonals
    WINNING_LINES = np.array(GameConfig.WINNING_LINES, dtype=np.intp)

    def detect(self, board: Board) -> Optional[WinningLine]:
        """
        Find the winning line on a board.

        All 8 lines are checked at once; if more than one line matches,
        the first one in WINNING_LINES is returned.

        Args:
            board: A 9-cell board snapshot.

        Returns:
            The 3 board indices of the line, or None if nobody has won.
        """
        codes = np.fromiter((cell.value for cell in board), dtype=np.int8, count=len(board))
        triples = codes[self.WINNING_LINES]

        hits = (
            (triples[:, 0] != Cell.EMPTY.value)
            & (triples[:, 0] == triples[:, 1])
            & (triples[:, 1] == triples[:, 2])
        )
        matches = np.flatnonzero(hits)
        if matches.size == 0:
            return None

        line = self.WINNING_LINES[matches[0]]
        return (int(line[0]), int(line[1]), int(line[2]))

    def check_winner(self, board: Board) -> Optional[Cell]:
        """
        Check if there's a winner.

        Returns:
            The winning mark, or None if no winner yet.
        """
        line = self.detect(board)
        if line is None:
            return None
        return board[line[0]]

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw (board full AND no winner).
        """
        # A full board can still hold a winning line
        if self.detect(board) is not None:
            return False
        return is_full(board)


# Quick test
if __name__ == "__main__":
    from .game_state import parse_board

    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    line = checker.detect(parse_board("XXX.OO..."))
    print(f"Test 1 (horizontal): line = {line}")
    assert line == (0, 1, 2)

    # Test 2: Diagonal win
    line = checker.detect(parse_board("XOO.X...X"))
    print(f"Test 2 (diagonal): line = {line}")
    assert line == (0, 4, 8)

    # Test 3: No winner
    line = checker.detect(parse_board("XO.XO.OX."))
    print(f"Test 3 (no winner): line = {line}")
    assert line is None

    # Test 4: Draw (full board, no winner)
    is_draw = checker.check_draw(parse_board("XOXXOOOXX"))
    print(f"Test 4 (draw): is_draw = {is_draw}")
    assert is_draw

    print("\nWinChecker test done!")
