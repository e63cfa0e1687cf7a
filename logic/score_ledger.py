"""
Score ledger for TicTacToe.
Counts wins per player over a session and keeps a newest-first winner log.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

from .config import GameConfig
from .game_state import Board, Cell
from .win_checker import WinChecker


def format_clock(moment: datetime) -> str:
    """
    Format a time as a short 12-hour label, e.g. "9:05am" or "12:30pm".
    """
    hours = moment.hour % 12 or 12
    am_pm = "pm" if moment.hour >= 12 else "am"
    return f"{hours}:{moment.minute:02d}{am_pm}"


@dataclass(frozen=True)
class WinEvent:
    """Immutable record of one recorded win."""
    timestamp: str          # 12-hour label, e.g. "3:07pm"
    player: Cell            # X or O
    message: str            # "P1 (X) Wins" / "P2 (O) Wins"
    recorded_at: datetime = field(compare=False, default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.timestamp} {self.message}"


class ScoreLedger:
    """
    Win tally for both players plus a log of every recorded win.

    The ledger does not check whether a board was already counted:
    recording the same winning board twice counts it twice.
    """

    def __init__(
        self,
        win_checker: Optional[WinChecker] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize an empty ledger.

        Args:
            win_checker: Detector used to find the winner (default: new WinChecker).
            clock: Returns the current wall-clock time (default: datetime.now).
        """
        self.win_checker = win_checker or WinChecker()
        self.clock = clock
        self._wins: Dict[Cell, int] = {Cell.X: 0, Cell.O: 0}
        self._winner_log: List[WinEvent] = []

    @property
    def wins(self) -> Dict[Cell, int]:
        """Copy of the tally, keyed by mark."""
        return dict(self._wins)

    @property
    def winner_log(self) -> Tuple[WinEvent, ...]:
        """Recorded wins, newest first."""
        return tuple(self._winner_log)

    def wins_for(self, mark: Cell) -> int:
        return self._wins.get(mark, 0)

    def record_win(self, board: Board) -> Optional[WinEvent]:
        """
        Count the win on `board`, if there is one.

        Args:
            board: A finished board.

        Returns:
            The new WinEvent, or None if the board has no winning line.
        """
        line = self.win_checker.detect(board)
        if line is None:
            return None

        winner = board[line[0]]
        self._wins[winner] = self._wins.get(winner, 0) + 1

        now = self.clock()
        event = WinEvent(
            timestamp=format_clock(now),
            player=winner,
            message=GameConfig.WIN_MESSAGES[winner.name],
            recorded_at=now,
        )
        self._winner_log.insert(0, event)

        print(f"Recorded win: {event}")
        return event
