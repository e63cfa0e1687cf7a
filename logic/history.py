"""
Move history for TicTacToe.
Keeps every board snapshot of the current game so players can jump back and forth.
"""

from typing import List, Optional, Tuple

from .game_state import Board, as_index, changed_cell, empty_board, make_board


class GameHistory:
    """
    Ordered log of board snapshots plus a pointer to the one being viewed.

    Index 0 is the empty board, index k the board after k moves.
    The log is linear: playing from an earlier move throws away every
    later snapshot instead of starting a branch.
    """

    def __init__(self, initial: Optional[Board] = None):
        self._boards: List[Board] = [make_board(initial) if initial is not None else empty_board()]
        self._current_move = 0

    def __len__(self) -> int:
        return len(self._boards)

    @property
    def boards(self) -> Tuple[Board, ...]:
        """All snapshots, oldest first."""
        return tuple(self._boards)

    @property
    def current_move(self) -> int:
        return self._current_move

    @property
    def current_board(self) -> Board:
        return self._boards[self._current_move]

    @property
    def latest_board(self) -> Board:
        return self._boards[-1]

    @property
    def is_at_latest(self) -> bool:
        """True when the player is looking at the newest move."""
        return self._current_move == len(self._boards) - 1

    def play(self, board: Board) -> None:
        """
        Commit the board that follows the current one.

        Drops every snapshot after the current move, appends `board`,
        and moves the pointer onto it.

        Raises:
            ValueError if `board` is not the current board plus one new mark.
        """
        board = make_board(board)
        if changed_cell(self.current_board, board) is None:
            raise ValueError("Board must add exactly one mark to the current board")

        self._boards = self._boards[:self._current_move + 1]
        self._boards.append(board)
        self._current_move = len(self._boards) - 1

    def check_move(self, move) -> int:
        """
        Check that `move` is an index into the log.

        Returns:
            The move as a plain int.

        Raises:
            ValueError if `move` is not an integer in 0..len-1.
        """
        index = as_index(move)
        if index is None or not 0 <= index < len(self._boards):
            raise ValueError(
                f"Move {move!r} is out of range. Must be 0-{len(self._boards) - 1}."
            )
        return index

    def jump_to(self, move: int) -> None:
        """
        View an earlier (or later) snapshot without changing the log.

        Raises:
            ValueError if `move` is not an index into the log.
        """
        self._current_move = self.check_move(move)


# Quick test
if __name__ == "__main__":
    from .game_state import Cell, place

    print("Testing GameHistory...")

    history = GameHistory()
    first = place(history.current_board, 4, Cell.X)
    history.play(first)
    history.play(place(first, 0, Cell.O))
    print(f"After 2 moves: len={len(history)}, current={history.current_move}")

    history.jump_to(1)
    history.play(place(first, 8, Cell.O))
    print(f"Branch from move 1: len={len(history)}, current={history.current_move}")
    assert len(history) == 3

    try:
        history.jump_to(5)
    except ValueError as e:
        print(f"Jump to 5: {e}")

    print("\nGameHistory test done!")
