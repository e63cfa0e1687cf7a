"""
TicTacToe UI
A graphical interface for two-player TicTacToe using Tkinter.

Shows:
- Player scores (P1 = X, P2 = O)
- Winner log, newest first
- The 3x3 board, with the winning line highlighted
- Game status and the move history (click a move to jump to it)
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic import Cell, GameConfig, GameController, GameSnapshot


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    Every click goes to the controller; the window is then redrawn
    from controller.snapshot().
    """

    def __init__(self, controller: Optional[GameController] = None):
        """Initialize the UI."""
        self.controller = controller or GameController()
        self.move_buttons = []

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Tic-Tac-Toe")
        self.root.configure(bg='#1a1a2e')
        self.root.minsize(760, 420)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('Score.TLabel', font=('Segoe UI', 20, 'bold'), foreground='white')
        style.configure('Log.TLabel', font=('Segoe UI', 10), foreground='#00ff88')

        # Heading
        header = ttk.Frame(main_frame)
        header.pack(fill=tk.X)
        ttk.Label(header, text="Tic-Tac-Toe", style='Title.TLabel').pack(side=tk.LEFT)
        ttk.Label(header, text="(2 players only)").pack(side=tk.LEFT, padx=8)

        # Player scores
        scores_frame = ttk.Frame(main_frame)
        scores_frame.pack(pady=10)
        self.x_score_label = ttk.Label(scores_frame, text="0 (P1)", style='Score.TLabel')
        self.x_score_label.pack(side=tk.LEFT)
        ttk.Label(scores_frame, text=" | ", style='Score.TLabel').pack(side=tk.LEFT)
        self.o_score_label = ttk.Label(scores_frame, text="(P2) 0", style='Score.TLabel')
        self.o_score_label.pack(side=tk.LEFT)

        body = ttk.Frame(main_frame)
        body.pack(fill=tk.BOTH, expand=True)

        # Left panel - winner log
        left_frame = ttk.Frame(body, width=200)
        left_frame.pack(side=tk.LEFT, fill=tk.Y, padx=(0, 10))
        left_frame.pack_propagate(False)
        ttk.Label(left_frame, text="Winners", style='Title.TLabel').pack(pady=(0, 5))
        self.winner_list = ttk.Frame(left_frame)
        self.winner_list.pack(fill=tk.BOTH, expand=True)

        # Center panel - status and board
        center_frame = ttk.Frame(body)
        center_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        self.status_label = ttk.Label(center_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.board_frame = ttk.Frame(center_frame)
        self.board_frame.pack(pady=10)

        size = GameConfig.BOARD_SIZE
        self.board_cells = []
        for row in range(size):
            for col in range(size):
                index = row * size + col
                cell = tk.Button(
                    self.board_frame,
                    text="",
                    font=('Segoe UI', 24, 'bold'),
                    width=3,
                    height=1,
                    bg='#16213e',
                    fg='white',
                    activebackground='#1f2b50',
                    relief='ridge',
                    borderwidth=2,
                    command=lambda i=index: self._on_cell_click(i)
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                self.board_cells.append(cell)

        # Right panel - move history
        right_frame = ttk.Frame(body, width=220)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)
        ttk.Label(right_frame, text="Moves", style='Title.TLabel').pack(pady=(0, 5))
        self.moves_frame = ttk.Frame(right_frame)
        self.moves_frame.pack(fill=tk.BOTH, expand=True)

        # Quit button
        tk.Button(
            main_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        if self.controller.play_at(index):
            self._refresh()

    def _on_move_click(self, move: int):
        self.controller.jump_to(move)
        self._refresh()

    def _refresh(self):
        """Redraw everything from the controller's current state."""
        snapshot = self.controller.snapshot()
        self._update_scores(snapshot)
        self._update_winner_list(snapshot)
        self._update_board_display(snapshot)
        self._update_move_list(snapshot)
        self.status_label.configure(text=snapshot.status)

    def _update_scores(self, snapshot: GameSnapshot):
        self.x_score_label.configure(text=f"{snapshot.wins[Cell.X]} ({Cell.X.tag})")
        self.o_score_label.configure(text=f"({Cell.O.tag}) {snapshot.wins[Cell.O]}")

    def _update_winner_list(self, snapshot: GameSnapshot):
        for child in self.winner_list.winfo_children():
            child.destroy()

        if not snapshot.winner_log:
            ttk.Label(self.winner_list, text=GameConfig.NO_WINNERS).pack(anchor=tk.W)
            return

        for entry in snapshot.winner_log:
            ttk.Label(self.winner_list, text=str(entry), style='Log.TLabel').pack(anchor=tk.W)

    def _update_board_display(self, snapshot: GameSnapshot):
        """Update the board grid display."""
        winning = set(snapshot.winning_line or ())

        for index, cell in enumerate(snapshot.board):
            button = self.board_cells[index]

            if index in winning:
                bg_color = '#065f46'  # Green for the winning line
            else:
                bg_color = '#16213e'

            if cell == Cell.X:
                fg_color = '#f87171'
            else:
                fg_color = '#10b981'

            button.configure(text=cell.symbol(), bg=bg_color, fg=fg_color)

    def _update_move_list(self, snapshot: GameSnapshot):
        """Rebuild the jump buttons for the move history."""
        for button in self.move_buttons:
            button.destroy()
        self.move_buttons = []

        for move, label in enumerate(snapshot.move_descriptions):
            is_current = move == snapshot.current_move
            button = tk.Button(
                self.moves_frame,
                text=f"{move + 1}. {label}",
                font=('Segoe UI', 10, 'bold' if is_current else 'normal'),
                anchor=tk.W,
                bg='#6366f1' if is_current else '#2d3748',
                fg='white',
                command=lambda m=move: self._on_move_click(m)
            )
            button.pack(fill=tk.X, pady=1)
            self.move_buttons.append(button)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
