"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import List, Optional
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board, Cell, as_index, get_empty_cells
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Cell must be on the board (0-8)
    2. Can only place on empty cells
    3. Game must not be over (no winning line on the board)
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Board the move would be played on.
            index: Cell to place the next mark in.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if the game is already won
        winner = self.win_checker.check_winner(board)
        if winner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over! {winner.name} won."
            )

        # Check if index is an integer in valid range
        cell = as_index(index)
        if cell is None or not 0 <= cell < GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        # Check if cell is empty
        if board[cell] != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[cell].name}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all cells the next player may still play.

        Returns:
            List of cell indices, empty once the game is won or the board is full.
        """
        if self.win_checker.detect(board) is not None:
            return []
        return get_empty_cells(board)
