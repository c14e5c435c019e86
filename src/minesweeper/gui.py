"""
Minesweeper window built on tkinter.

The window keeps its own grid of cell buttons indexed by (row, col) and
repaints all of them from Game.snapshot() after every click.
"""
import tkinter as tk
from typing import List, NamedTuple, Optional

from .cell import FLAGGED_CODE, HIDDEN_CODE, MINE_CODE
from .game import Game, GameState

CELL_BG = '#c0c0c0'

NUMBER_COLORS = {
    1: 'blue',
    2: 'green',
    3: 'red',
    4: 'darkblue',
    5: 'brown',
    6: 'cyan',
    7: 'black',
    8: 'gray',
}

FACES = {
    GameState.PLAYING: '🙂',
    GameState.WON: '😎',
    GameState.LOST: '😵',
}

STATUS_TEXT = {
    GameState.PLAYING: 'Playing...',
    GameState.WON: 'You Won!',
    GameState.LOST: 'Game Over!',
}


class CellAppearance(NamedTuple):
    text: str
    fg: str
    bg: str
    relief: str


def cell_appearance(code: int) -> CellAppearance:
    """Map a snapshot code to how its button should look."""
    if code == HIDDEN_CODE:
        return CellAppearance('', 'black', CELL_BG, 'raised')
    if code == FLAGGED_CODE:
        return CellAppearance('🚩', 'red', CELL_BG, 'raised')
    if code == MINE_CODE:
        return CellAppearance('💣', 'black', 'red', 'sunken')
    if code == 0:
        return CellAppearance('', 'black', CELL_BG, 'sunken')
    return CellAppearance(
        str(code), NUMBER_COLORS.get(code, 'black'), CELL_BG, 'sunken'
    )


class MinesweeperWindow:
    """Main window: mines counter, reset face, status text and cell grid."""

    def __init__(self, game: Game, root: Optional[tk.Tk] = None):
        self.game = game
        self.root = root or tk.Tk()
        self.root.title('Minesweeper')
        self.root.resizable(False, False)

        self.cell_buttons: List[List[tk.Button]] = []
        self._setup_gui()
        self._create_buttons()
        self._update_display()

    def _setup_gui(self):
        """Status bar on top, cell grid below."""
        main_frame = tk.Frame(self.root, bd=3, relief='raised')
        main_frame.pack(padx=5, pady=5)

        status_frame = tk.Frame(main_frame)
        status_frame.pack(fill=tk.X, pady=5)

        self.mines_label = tk.Label(status_frame, width=10, anchor='w')
        self.mines_label.pack(side=tk.LEFT, expand=True)

        self.reset_button = tk.Button(
            status_frame, width=3, command=self._on_reset_click
        )
        self.reset_button.pack(side=tk.LEFT)

        self.status_label = tk.Label(status_frame, width=10, anchor='e')
        self.status_label.pack(side=tk.LEFT, expand=True)

        self.game_frame = tk.Frame(main_frame, bd=2, relief='sunken')
        self.game_frame.pack()

    def _create_buttons(self):
        """Build one button per cell, wired to its own (row, col)."""
        for widget in self.game_frame.winfo_children():
            widget.destroy()

        self.cell_buttons = []
        for row in range(self.game.rows):
            button_row = []
            for col in range(self.game.cols):
                button = tk.Button(
                    self.game_frame, width=2, height=1, bd=1, bg=CELL_BG
                )
                button.grid(row=row, column=col, padx=0, pady=0)
                button.bind(
                    '<Button-1>',
                    lambda event, r=row, c=col: self._on_cell_click(r, c),
                )
                button.bind(
                    '<Button-2>',
                    lambda event, r=row, c=col: self._on_cell_middle_click(r, c),
                )
                button.bind(
                    '<Button-3>',
                    lambda event, r=row, c=col: self._on_cell_right_click(r, c),
                )
                button_row.append(button)
            self.cell_buttons.append(button_row)

    # ========================================================================
    # Event Handlers
    # ========================================================================

    def _on_cell_click(self, row: int, col: int):
        self._apply(self.game.reveal(row, col))
        return 'break'

    def _on_cell_middle_click(self, row: int, col: int):
        self._apply(self.game.chord(row, col))
        return 'break'

    def _on_cell_right_click(self, row: int, col: int):
        self._apply(self.game.toggle_flag(row, col))
        return 'break'

    def _on_reset_click(self):
        self.game.reset()
        self._update_display()

    def _apply(self, changed: bool):
        if changed or self.game.is_game_over:
            self._update_display()

    # ========================================================================
    # Drawing
    # ========================================================================

    def _update_display(self):
        """Repaint the status bar and every cell from engine state."""
        if self.game.is_lost:
            self.game.reveal_all_mines()

        state = self.game.state
        self.mines_label.config(text=f'Mines: {self.game.mines_remaining}')
        self.status_label.config(text=STATUS_TEXT[state])
        self.reset_button.config(text=FACES[state])

        obs = self.game.snapshot()
        for row, button_row in enumerate(self.cell_buttons):
            for col, button in enumerate(button_row):
                look = cell_appearance(int(obs[row, col]))
                button.config(
                    text=look.text,
                    fg=look.fg,
                    disabledforeground=look.fg,
                    bg=look.bg,
                    relief=look.relief,
                    state=self._button_state(look),
                )

    def _button_state(self, look: CellAppearance) -> str:
        """Revealed cells and every cell after game over stop taking clicks."""
        if self.game.is_game_over or look.relief == 'sunken':
            return tk.DISABLED
        return tk.NORMAL

    def run(self):
        """Start the tkinter main loop."""
        self.root.mainloop()
