"""
Logic module for TicTacToe.
Handles board state, rules, move history and session scores.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import Board, Cell, empty_board, make_board, parse_board
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult
from .history import GameHistory
from .score_ledger import ScoreLedger, WinEvent, format_clock
from .game_controller import GameController, GameSnapshot
