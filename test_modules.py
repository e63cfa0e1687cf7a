"""
Tests for the TicTacToe logic modules.
Run with pytest, or directly as a script for a quick summary.
"""

import sys
from datetime import datetime

import numpy as np
import pytest

from logic import (
    Cell,
    GameController,
    GameHistory,
    MoveValidator,
    ScoreLedger,
    WinChecker,
    empty_board,
    format_clock,
    make_board,
    parse_board,
)
from logic.game_state import changed_cell, place


def fixed_clock(hour=15, minute=7):
    return lambda: datetime(2024, 5, 1, hour, minute)


def play_moves(controller, cells):
    for cell in cells:
        assert controller.play_at(cell)


# ==================== BOARD ====================

def test_make_board_needs_nine_cells():
    with pytest.raises(ValueError):
        make_board([Cell.X, Cell.O])
    with pytest.raises(ValueError):
        make_board(["X"] * 9)


def test_place_returns_new_board():
    board = empty_board()
    after = place(board, 4, Cell.X)

    assert board[4] == Cell.EMPTY
    assert after[4] == Cell.X
    assert changed_cell(board, after) == 4

    with pytest.raises(ValueError):
        place(after, 4, Cell.O)


def test_changed_cell_rejects_two_changes():
    assert changed_cell(parse_board("........."), parse_board("XO.......")) is None
    assert changed_cell(parse_board("X........"), parse_board("O........")) is None


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("text, line", [
    ("XXX.OO...", (0, 1, 2)),
    ("XX.OOOX..", (3, 4, 5)),
    ("XX.X..OOO", (6, 7, 8)),
    ("OX.OX.O..", (0, 3, 6)),
    ("OX..X..XO", (1, 4, 7)),
    ("X.OX.O..O", (2, 5, 8)),
    ("XO..XO..X", (0, 4, 8)),
    ("XXO.O.O..", (2, 4, 6)),
])
def test_detect_each_line(text, line):
    assert WinChecker().detect(parse_board(text)) == line


def test_detect_no_winner():
    checker = WinChecker()
    assert checker.detect(empty_board()) is None
    assert checker.detect(parse_board("XO.XO.OX.")) is None
    # Full board, no line
    assert checker.detect(parse_board("XOXXOOOXX")) is None


def test_detect_prefers_first_line():
    # Row 0 and column 0 both match; rows are checked first
    board = parse_board("XXXX..X..")
    assert WinChecker().detect(board) == (0, 1, 2)


def test_winner_and_draw():
    checker = WinChecker()

    assert checker.check_winner(parse_board("OOOXX.X..")) == Cell.O
    assert checker.check_draw(parse_board("XOXXOOOXX"))
    assert not checker.check_draw(parse_board("XO.XO...."))
    # Full board with a line is a win, not a draw
    assert not checker.check_draw(parse_board("XXXOOXOXO"))


# ==================== MOVE VALIDATOR ====================

def test_validator_rejections():
    validator = MoveValidator()

    assert validator.validate_move(empty_board(), 0).is_valid
    assert not validator.validate_move(parse_board("X........"), 0).is_valid
    assert not validator.validate_move(empty_board(), 9).is_valid
    assert not validator.validate_move(empty_board(), -1).is_valid

    result = validator.validate_move(parse_board("XXXOO...."), 8)
    assert not result.is_valid
    assert "over" in result.error_message


def test_validator_valid_moves():
    validator = MoveValidator()
    assert validator.get_valid_moves(parse_board("XO.XO....")) == [2, 5, 6, 7, 8]
    assert validator.get_valid_moves(parse_board("XXXOO....")) == []


# ==================== HISTORY ====================

def test_history_starts_with_empty_board():
    history = GameHistory()
    assert len(history) == 1
    assert history.current_move == 0
    assert history.current_board == empty_board()
    assert history.is_at_latest


def test_history_play_appends():
    history = GameHistory()
    first = place(empty_board(), 0, Cell.X)
    second = place(first, 1, Cell.O)

    history.play(first)
    history.play(second)

    assert len(history) == 3
    assert history.current_move == 2
    assert history.boards == (empty_board(), first, second)


def test_history_play_truncates_future():
    history = GameHistory()
    first = place(empty_board(), 0, Cell.X)
    history.play(first)
    history.play(place(first, 1, Cell.O))
    history.play(place(history.current_board, 2, Cell.X))

    history.jump_to(1)
    branch = place(first, 8, Cell.O)
    history.play(branch)

    assert len(history) == history.current_move + 1 == 3
    assert history.latest_board == branch
    assert history.boards[1] == first


def test_history_play_rejects_non_successor():
    history = GameHistory()
    with pytest.raises(ValueError):
        history.play(parse_board("XO......."))
    with pytest.raises(ValueError):
        history.play(empty_board())
    assert len(history) == 1


def test_history_jump_out_of_range():
    history = GameHistory()
    history.play(place(empty_board(), 0, Cell.X))

    with pytest.raises(ValueError):
        history.jump_to(2)
    with pytest.raises(ValueError):
        history.jump_to(-1)
    assert history.current_move == 1

    history.jump_to(0)
    assert history.current_move == 0
    assert len(history) == 2
    assert not history.is_at_latest


def test_history_check_move_types():
    history = GameHistory()
    history.play(place(empty_board(), 0, Cell.X))

    assert history.check_move(np.int64(1)) == 1
    for bad in (0.0, True, "1", None):
        with pytest.raises(ValueError):
            history.check_move(bad)
    assert history.current_move == 1


# ==================== SCORE LEDGER ====================

@pytest.mark.parametrize("hour, minute, label", [
    (0, 5, "12:05am"),
    (9, 30, "9:30am"),
    (12, 0, "12:00pm"),
    (15, 7, "3:07pm"),
    (23, 59, "11:59pm"),
])
def test_format_clock(hour, minute, label):
    assert format_clock(datetime(2024, 1, 1, hour, minute)) == label


def test_record_win_counts_and_logs():
    ledger = ScoreLedger(clock=fixed_clock(15, 7))

    event = ledger.record_win(parse_board("XO.OX...X"))

    assert event is not None
    assert event.player == Cell.X
    assert event.message == "P1 (X) Wins"
    assert event.timestamp == "3:07pm"
    assert ledger.wins == {Cell.X: 1, Cell.O: 0}
    assert ledger.winner_log == (event,)


def test_record_win_newest_first():
    ledger = ScoreLedger(clock=fixed_clock())

    ledger.record_win(parse_board("XXXOO...."))
    ledger.record_win(parse_board("OOOXX.X.."))

    assert [e.message for e in ledger.winner_log] == ["P2 (O) Wins", "P1 (X) Wins"]
    assert ledger.wins_for(Cell.O) == 1


def test_record_win_without_line_is_noop():
    ledger = ScoreLedger(clock=fixed_clock())
    assert ledger.record_win(parse_board("XO.......")) is None
    assert ledger.wins == {Cell.X: 0, Cell.O: 0}
    assert ledger.winner_log == ()


def test_record_win_is_not_idempotent():
    ledger = ScoreLedger(clock=fixed_clock())
    board = parse_board("XXXOO....")
    ledger.record_win(board)
    ledger.record_win(board)
    assert ledger.wins_for(Cell.X) == 2


# ==================== CONTROLLER ====================

def test_play_at_alternates_marks():
    game = GameController(clock=fixed_clock())

    assert game.next_player == Cell.X
    assert game.play_at(4)
    assert game.board[4] == Cell.X
    assert game.current_move == 1
    assert game.next_player == Cell.O

    assert game.play_at(0)
    assert game.board[0] == Cell.O
    assert game.current_move == 2


def test_play_at_occupied_is_noop():
    game = GameController(clock=fixed_clock())
    game.play_at(4)
    before = game.snapshot()

    assert not game.play_at(4)
    assert game.snapshot() == before


def test_play_at_out_of_range_is_noop():
    game = GameController(clock=fixed_clock())
    assert not game.play_at(9)
    assert len(game.history) == 1


def test_play_at_after_win_is_noop():
    game = GameController(clock=fixed_clock())
    play_moves(game, [0, 1, 4, 2, 8])
    before = game.snapshot()

    assert not game.play_at(5)
    assert game.snapshot() == before


def test_winning_game_scenario():
    game = GameController(clock=fixed_clock(9, 5))
    play_moves(game, [0, 1, 4, 2, 8])

    assert game.board == parse_board("XOO.X...X")
    assert game.winning_line == (0, 4, 8)
    assert game.winner == Cell.X
    assert game.status_text() == "Player X wins!"

    event = game.jump_to(0)

    assert event is not None
    assert game.current_move == 0
    assert game.wins == {Cell.X: 1, Cell.O: 0}
    assert len(game.winner_log) == 1
    assert game.winner_log[0].message == "P1 (X) Wins"
    assert game.winner_log[0].timestamp == "9:05am"
    # The old game stays in the log until the next move from the start
    assert len(game.history) == 6


def test_fresh_session_jump_to_start_is_noop():
    game = GameController(clock=fixed_clock())
    assert game.jump_to(0) is None
    assert game.wins == {Cell.X: 0, Cell.O: 0}
    assert game.winner_log == ()


def test_no_score_from_non_final_move():
    game = GameController(clock=fixed_clock())
    play_moves(game, [0, 1, 4, 2, 8])

    game.jump_to(3)
    assert game.jump_to(0) is None
    assert game.wins == {Cell.X: 0, Cell.O: 0}


def test_no_score_when_jumping_elsewhere():
    game = GameController(clock=fixed_clock())
    play_moves(game, [0, 1, 4, 2, 8])

    assert game.jump_to(2) is None
    assert game.jump_to(5) is None
    assert game.winner_log == ()


def test_score_counted_once_per_game():
    game = GameController(clock=fixed_clock())
    play_moves(game, [0, 1, 4, 2, 8])

    game.jump_to(0)
    # Back at the start: not at the final move any more
    game.jump_to(0)
    assert game.wins[Cell.X] == 1

    # Returning to the final move and resetting again does count again
    game.jump_to(5)
    game.jump_to(0)
    assert game.wins[Cell.X] == 2


def test_new_game_after_scoring():
    game = GameController(clock=fixed_clock())
    play_moves(game, [0, 1, 4, 2, 8])
    game.jump_to(0)

    # O wins the second game: X 0,3,8 ; O 1,4,7
    play_moves(game, [0, 1, 3, 4, 8, 7])
    assert len(game.history) == 7
    assert game.winner == Cell.O

    game.jump_to(0)
    assert game.wins == {Cell.X: 1, Cell.O: 1}
    assert [e.message for e in game.winner_log] == ["P2 (O) Wins", "P1 (X) Wins"]


def test_jump_out_of_range_raises():
    game = GameController(clock=fixed_clock())
    play_moves(game, [0])
    with pytest.raises(ValueError):
        game.jump_to(2)
    assert game.current_move == 1


@pytest.mark.parametrize("target", [0.0, True, "0", None])
def test_rejected_jump_does_not_score(target):
    game = GameController(clock=fixed_clock())
    play_moves(game, [0, 1, 4, 2, 8])

    with pytest.raises(ValueError):
        game.jump_to(target)

    assert game.wins == {Cell.X: 0, Cell.O: 0}
    assert game.winner_log == ()
    assert game.current_move == 5


def test_numpy_integers_are_accepted():
    game = GameController(clock=fixed_clock())

    assert game.play_at(np.int64(4))
    assert game.board[4] == Cell.X
    play_moves(game, [0, 3, 8, 5])
    assert game.winner == Cell.X

    event = game.jump_to(np.int64(0))
    assert event is not None
    assert game.current_move == 0
    assert isinstance(game.current_move, int)


def test_bool_is_not_a_cell():
    game = GameController(clock=fixed_clock())
    assert not game.play_at(True)
    assert not game.play_at(4.0)
    assert len(game.history) == 1


def test_draw_status():
    game = GameController(clock=fixed_clock())
    # X O X / X O O / O X X
    play_moves(game, [0, 1, 2, 4, 3, 5, 7, 6, 8])

    assert game.is_draw
    assert game.is_game_over
    assert game.winner is None
    assert game.status_text() == "It's a draw!"
    assert not game.play_at(0)

    assert game.jump_to(0) is None
    assert game.wins == {Cell.X: 0, Cell.O: 0}


def test_move_descriptions():
    game = GameController(clock=fixed_clock())
    play_moves(game, [0, 1, 4])

    assert game.move_descriptions() == [
        "Go to Start", "Go to move #1", "Go to move #2", "Current Move (#3)",
    ]

    game.jump_to(0)
    assert game.move_descriptions()[0] == "Go to Start"
    assert game.move_descriptions()[3] == "Go to move #3"
    assert game.status_text() == "Player turn: X"


def test_snapshot_is_read_only_view():
    game = GameController(clock=fixed_clock())
    play_moves(game, [0])
    snapshot = game.snapshot()

    snapshot.wins[Cell.X] = 99
    assert game.wins[Cell.X] == 0
    assert snapshot.history == game.history.boards
    assert snapshot.next_player == Cell.O


# ==================== SCRIPT RUNNER ====================

def run_all_tests():
    """Run all tests through pytest and report the result."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)

    exit_code = pytest.main([__file__, "-q"])

    if exit_code == 0:
        print("\nAll tests passed!\n")
    else:
        print("\nSome tests failed. Check the errors above.\n")
    return exit_code


if __name__ == "__main__":
    sys.exit(run_all_tests())
