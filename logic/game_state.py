"""
Board state for TicTacToe.
Defines the cell marks and the immutable 9-cell board snapshots.
"""

import operator
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .config import GameConfig


class Cell(Enum):
    """What a single board cell holds."""
    EMPTY = 0
    X = 1
    O = 2

    def symbol(self) -> str:
        """Character used when drawing the board."""
        return {0: "", 1: "X", 2: "O"}[self.value]

    @property
    def tag(self) -> str:
        """Player tag shown next to the score ("P1" for X, "P2" for O)."""
        return GameConfig.PLAYER_TAGS.get(self.name, "")


# A board is a row-major tuple of 9 cells. Tuples keep stored snapshots immutable.
Board = Tuple[Cell, ...]


def make_board(cells: Iterable[Cell]) -> Board:
    """
    Build a board snapshot from any iterable of cells.

    Raises:
        ValueError if there are not exactly 9 cells, or a value is not a Cell.
    """
    board = tuple(cells)
    if len(board) != GameConfig.CELL_COUNT:
        raise ValueError(
            f"A board needs {GameConfig.CELL_COUNT} cells, got {len(board)}"
        )
    for cell in board:
        if not isinstance(cell, Cell):
            raise ValueError(f"Not a board cell: {cell!r}")
    return board


def as_index(value) -> Optional[int]:
    """
    Turn a cell or move number into a plain int.

    Accepts Python and numpy integers. Returns None for anything else,
    including bools and floats like 0.0.
    """
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def empty_board() -> Board:
    """The blank board every session starts from."""
    return (Cell.EMPTY,) * GameConfig.CELL_COUNT


def parse_board(text: str) -> Board:
    """
    Build a board from a 9-character string like "XO_.X...X".

    Any character other than X or O (case-insensitive) is an empty cell.
    """
    cells = []
    for char in text.upper():
        if char == "X":
            cells.append(Cell.X)
        elif char == "O":
            cells.append(Cell.O)
        else:
            cells.append(Cell.EMPTY)
    return make_board(cells)


def place(board: Board, index: int, mark: Cell) -> Board:
    """
    Return a new board with `mark` placed at `index`.

    The original board is left untouched.

    Raises:
        ValueError if the index is off the board, the cell is taken, or mark is EMPTY.
    """
    if mark == Cell.EMPTY:
        raise ValueError("Cannot place EMPTY")
    if not 0 <= index < GameConfig.CELL_COUNT:
        raise ValueError(f"Invalid cell {index}. Must be 0-{GameConfig.CELL_COUNT - 1}.")
    if board[index] != Cell.EMPTY:
        raise ValueError(f"Cell {index} is already occupied by {board[index].name}")

    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def get_empty_cells(board: Board) -> List[int]:
    """Indices of all empty cells."""
    return [i for i, cell in enumerate(board) if cell == Cell.EMPTY]


def is_full(board: Board) -> bool:
    return all(cell != Cell.EMPTY for cell in board)


def changed_cell(before: Board, after: Board) -> Optional[int]:
    """
    Index of the single cell that went from EMPTY to a mark between two boards.

    Returns:
        The index, or None if the boards differ in any other way.
    """
    changed = [i for i, (old, new) in enumerate(zip(before, after)) if old != new]
    if len(changed) != 1:
        return None

    index = changed[0]
    if before[index] != Cell.EMPTY or after[index] == Cell.EMPTY:
        return None
    return index


def format_board(board: Board) -> str:
    """Render the board as text for console output."""
    size = GameConfig.BOARD_SIZE
    lines = []
    for row in range(size):
        row_cells = []
        for col in range(size):
            index = row * size + col
            # Empty cells show their index so players know what to type
            row_cells.append(board[index].symbol() or str(index))
        lines.append(" " + " | ".join(row_cells))
        if row < size - 1:
            lines.append("---+---+---")
    return "\n".join(lines)
