"""
Game configuration for TicTacToe.
All the fixed rules and display strings in one place.
"""


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, stored row-major as 9 cells
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9

    # All winning lines as board indices, in the order they are checked
    WINNING_LINES = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    # ==================== PLAYER SETTINGS ====================
    # X always moves first (P1), O second (P2)
    PLAYER_TAGS = {
        "X": "P1",
        "O": "P2",
    }

    # Message added to the winner log for each recorded win
    WIN_MESSAGES = {
        "X": "P1 (X) Wins",
        "O": "P2 (O) Wins",
    }

    # ==================== DISPLAY STRINGS ====================
    STATUS_WINNER = "Player {mark} wins!"
    STATUS_TURN = "Player turn: {mark}"
    STATUS_DRAW = "It's a draw!"

    MOVE_START = "Go to Start"
    MOVE_CURRENT = "Current Move (#{move})"
    MOVE_OTHER = "Go to move #{move}"

    NO_WINNERS = "No winners yet"
