"""
Terminal front end for Minesweeper.

Renders the board as text and plays through a simple command loop on
any pair of text streams.
"""
import sys
from typing import Optional, TextIO

from .cell import FLAGGED_CODE, HIDDEN_CODE, MINE_CODE
from .game import Game, GameState

HELP = """Commands:
  r ROW COL   reveal a cell
  f ROW COL   toggle a flag
  c ROW COL   chord around a revealed number
  n           new game
  h           show this help
  q           quit"""

STATUS_TEXT = {
    GameState.PLAYING: "Playing...",
    GameState.WON: "You Won!",
    GameState.LOST: "Game Over!",
}

ACTIONS = {"r": "reveal", "f": "toggle_flag", "c": "chord"}


def cell_symbol(code: int) -> str:
    """Single character used for a snapshot code."""
    if code == HIDDEN_CODE:
        return "."
    if code == FLAGGED_CODE:
        return "F"
    if code == MINE_CODE:
        return "*"
    if code == 0:
        return " "
    return str(code)


def render(game: Game) -> str:
    """Draw the status line and the board with row/column labels."""
    obs = game.snapshot()
    width = len(str(max(game.rows, game.cols) - 1))

    lines = [
        f"Mines: {game.mines_remaining}  {STATUS_TEXT[game.state]}",
        " " * (width + 1) + " ".join(
            str(col).rjust(width) for col in range(game.cols)
        ),
    ]
    for row in range(game.rows):
        cells = " ".join(
            cell_symbol(int(code)).rjust(width) for code in obs[row]
        )
        lines.append(f"{str(row).rjust(width)} {cells}")
    return "\n".join(lines)


class TextFrontend:
    """Command loop that drives a Game from a text stream."""

    def __init__(
        self,
        game: Game,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.game = game
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def redraw(self) -> None:
        if self.game.is_lost:
            self.game.reveal_all_mines()
        self._print(render(self.game))

    def handle(self, line: str) -> bool:
        """
        Apply one command line.

        Returns:
            False when the loop should stop, True otherwise.
        """
        parts = line.split()
        if not parts:
            return True
        command = parts[0].lower()

        if command == "q":
            return False
        if command == "h":
            self._print(HELP)
            return True
        if command == "n":
            self.game.reset()
            self.redraw()
            return True
        if command not in ACTIONS:
            self._print(f"Unknown command: {parts[0]} (h for help)")
            return True

        try:
            row, col = (int(value) for value in parts[1:])
        except ValueError:
            self._print(f"Usage: {command} ROW COL")
            return True

        if self.game.is_game_over:
            self._print("Game is over, press n for a new game.")
            return True
        if getattr(self.game, ACTIONS[command])(row, col):
            self.redraw()
        else:
            self._print("Nothing to do there.")
        return True

    def run(self) -> None:
        self.redraw()
        self._print(HELP)
        while True:
            self.stdout.write("> ")
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                break
            if not self.handle(line):
                break
