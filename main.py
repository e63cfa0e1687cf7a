"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.
Both talk to the same GameController:
- play a cell (0-8)
- jump to a move in the history

Run this script to play TicTacToe against a friend!
"""

from typing import Optional

from logic import Cell, GameConfig, GameController
from logic.game_state import format_board


HELP_TEXT = """Commands:
  0-8 / play N   play the next mark in cell N
  jump M         jump to move M (0 = start)
  moves          list the move history
  scores         show the score and winner log
  help           show this help
  quit / q       leave the game"""


class ConsoleGame:
    """
    Console front end for the game controller.

    Game flow:
    1. The board and status are printed
    2. A player types a cell number (or a history command)
    3. The controller applies it and the board is printed again
    4. Jumping back to move 0 from a won game records the win
    """

    def __init__(self, controller: Optional[GameController] = None):
        self.controller = controller or GameController()
        self.is_running = False

    def start(self):
        """Read commands until the player quits."""
        print("\n" + "="*60)
        print("   TicTacToe (2 players only)")
        print("="*60)
        print(HELP_TEXT)

        self.is_running = True
        self.show_board()

        while self.is_running:
            try:
                line = input("\n> ")
            except EOFError:
                break
            self.handle_command(line)

    def handle_command(self, line: str) -> bool:
        """
        Run one console command.

        Returns:
            False once the player asked to quit, True otherwise.
        """
        parts = line.strip().lower().split()
        if not parts:
            return True

        command, args = parts[0], parts[1:]

        if command in ("quit", "q", "exit"):
            print("Goodbye!")
            self.is_running = False
            return False

        if command.isdigit() and not args:
            self._play(command)
        elif command == "play" and len(args) == 1:
            self._play(args[0])
        elif command == "jump" and len(args) == 1:
            self._jump(args[0])
        elif command == "moves":
            self.show_moves()
        elif command == "scores":
            self.show_scores()
        elif command == "help":
            print(HELP_TEXT)
        else:
            print(f"Unknown command: {line.strip()!r} (type 'help')")

        return True

    def _play(self, arg: str):
        if not arg.isdigit():
            print(f"Not a cell number: {arg!r}")
            return
        if self.controller.play_at(int(arg)):
            self.show_board()

    def _jump(self, arg: str):
        if not arg.isdigit():
            print(f"Not a move number: {arg!r}")
            return
        try:
            event = self.controller.jump_to(int(arg))
        except ValueError as e:
            print(f"ERROR: {e}")
            return

        if event is not None:
            self.show_scores()
        self.show_board()

    def show_board(self):
        """Print the board and status line."""
        print()
        print(format_board(self.controller.board))
        line = self.controller.winning_line
        if line is not None:
            print(f"Winning line: {line[0]}-{line[1]}-{line[2]}")
        print(self.controller.status_text())

        open_cells = self.controller.validator.get_valid_moves(self.controller.board)
        if open_cells:
            print("Open cells: " + ", ".join(str(cell) for cell in open_cells))

    def show_moves(self):
        for move, label in enumerate(self.controller.move_descriptions()):
            print(f"  {move}. {label}")

    def show_scores(self):
        wins = self.controller.wins
        print(f"  {wins[Cell.X]} (P1) | (P2) {wins[Cell.O]}")

        log = self.controller.winner_log
        if not log:
            print(f"  {GameConfig.NO_WINNERS}")
        for entry in log:
            print(f"  {entry}")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Two-player TicTacToe with move history")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args()

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI()
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame()
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")


if __name__ == "__main__":
    main()
