"""
Game controller for TicTacToe.

Ties together the move history, the win checker and the score ledger.
The UI (or console) only ever calls two things on it:
- play_at(cell)   when a cell is clicked
- jump_to(move)   when a move in the history list is clicked
and redraws from snapshot() afterwards.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

from .config import GameConfig
from .game_state import Board, Cell, as_index, place
from .history import GameHistory
from .move_validator import MoveValidator
from .score_ledger import ScoreLedger, WinEvent
from .win_checker import WinChecker, WinningLine


@dataclass(frozen=True)
class GameSnapshot:
    """
    Read-only view of everything a renderer needs.
    """
    board: Board
    current_move: int
    history: Tuple[Board, ...]
    next_player: Cell
    winning_line: Optional[WinningLine]
    status: str
    wins: Dict[Cell, int]
    winner_log: Tuple[WinEvent, ...]
    move_descriptions: Tuple[str, ...]


class GameController:
    """
    Owns one session: the current game's history and the running score.

    Whose turn it is and whether the game is over are always worked out
    from the history (move parity and the win checker), never stored.

    Scoring happens in exactly one place: jumping back to the start
    while viewing the final, winning move of the game.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        """
        Start a new session.

        Args:
            clock: Wall clock used to timestamp recorded wins (default: datetime.now).
        """
        self.win_checker = WinChecker()
        self.validator = MoveValidator(self.win_checker)
        self.history = GameHistory()
        self.ledger = ScoreLedger(self.win_checker, clock=clock)

    # -------------------------
    # Derived state
    # -------------------------

    @property
    def board(self) -> Board:
        return self.history.current_board

    @property
    def current_move(self) -> int:
        return self.history.current_move

    @property
    def next_player(self) -> Cell:
        """X moves on even moves, O on odd ones."""
        return Cell.X if self.current_move % 2 == 0 else Cell.O

    @property
    def winning_line(self) -> Optional[WinningLine]:
        return self.win_checker.detect(self.board)

    @property
    def winner(self) -> Optional[Cell]:
        return self.win_checker.check_winner(self.board)

    @property
    def is_draw(self) -> bool:
        return self.win_checker.check_draw(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None or self.is_draw

    @property
    def wins(self) -> Dict[Cell, int]:
        return self.ledger.wins

    @property
    def winner_log(self) -> Tuple[WinEvent, ...]:
        return self.ledger.winner_log

    # -------------------------
    # User intents
    # -------------------------

    def play_at(self, cell_index: int) -> bool:
        """
        Play the next player's mark in a cell.

        Args:
            cell_index: Cell to play (0-8, row-major).

        Returns:
            True if the move was made, False if it was rejected
            (cell taken, game already won, or no such cell).
        """
        result = self.validator.validate_move(self.board, cell_index)
        if not result.is_valid:
            print(f"Move rejected: {result.error_message}")
            return False

        next_board = place(self.board, as_index(cell_index), self.next_player)
        self.history.play(next_board)
        return True

    def jump_to(self, target_move: int) -> Optional[WinEvent]:
        """
        Jump to a move in the history.

        Going back to the start from the last move of a won game is what
        records the win in the ledger. Any other jump only moves the view.

        Args:
            target_move: Index into the history (0 = empty board).

        Returns:
            The WinEvent if this jump recorded a win, else None.

        Raises:
            ValueError if target_move is not in the history.
        """
        # Range check comes before scoring
        move = self.history.check_move(target_move)

        event = None
        if move == 0 and self.history.is_at_latest:
            event = self.ledger.record_win(self.history.latest_board)

        self.history.jump_to(move)
        return event

    # -------------------------
    # Display helpers
    # -------------------------

    def status_text(self) -> str:
        """Status line shown above the board."""
        winner = self.winner
        if winner is not None:
            return GameConfig.STATUS_WINNER.format(mark=winner.name)
        if self.is_draw:
            return GameConfig.STATUS_DRAW
        return GameConfig.STATUS_TURN.format(mark=self.next_player.name)

    def move_descriptions(self) -> List[str]:
        """Label for each entry in the move list, in history order."""
        labels = []
        for move in range(len(self.history)):
            if move == 0:
                labels.append(GameConfig.MOVE_START)
            elif move == self.current_move:
                labels.append(GameConfig.MOVE_CURRENT.format(move=move))
            else:
                labels.append(GameConfig.MOVE_OTHER.format(move=move))
        return labels

    def snapshot(self) -> GameSnapshot:
        """Capture the current state for rendering."""
        return GameSnapshot(
            board=self.board,
            current_move=self.current_move,
            history=self.history.boards,
            next_player=self.next_player,
            winning_line=self.winning_line,
            status=self.status_text(),
            wins=self.wins,
            winner_log=self.winner_log,
            move_descriptions=tuple(self.move_descriptions()),
        )
