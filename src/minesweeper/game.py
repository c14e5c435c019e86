"""
Game engine for Minesweeper.

Implements deferred mine placement, flood-fill reveal, flagging and
win/lose detection on top of a Board. Front ends drive the engine through
reveal/toggle_flag/chord/reset and redraw from its accessors after every
call; the engine never pushes anything to them.
"""
import logging
import random
from enum import Enum, auto
from typing import Optional

import numpy as np

from .board import Board, BoardConfig
from .cell import Cell, CellState

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single Minesweeper game.

    The shape is fixed for the lifetime of the instance. Mines are not
    placed until the first reveal, so the first clicked cell and its
    neighbors are kept clear whenever the board has room for it.

    The constructor does not validate its arguments; build a BoardConfig
    first (or use from_config) when the values come from a user.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        mine_count: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Args:
            rows: Number of rows (> 0).
            cols: Number of columns (> 0).
            mine_count: Target mine count, 0 <= mine_count < rows * cols.
            rng: Random source used for mine placement. A fresh unseeded
                random.Random is created when omitted.
        """
        self._rows = rows
        self._cols = cols
        self._mine_count = mine_count
        self._rng = rng if rng is not None else random.Random()
        self._board = Board(rows, cols)
        self.reset()

    @classmethod
    def from_config(
        cls, config: BoardConfig, rng: Optional[random.Random] = None
    ) -> "Game":
        """Create a game from a validated configuration."""
        return cls(config.rows, config.cols, config.num_mines, rng=rng)

    def reset(self) -> None:
        """Start over on the same dimensions; mines wait for the next reveal."""
        self._board.clear()
        self._state = GameState.PLAYING
        self._mines_flagged = 0
        self._cells_revealed = 0
        self._mines_on_board = 0
        self._game_over = False
        self._first_click_done = False

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def _arm(self, safe_row: int, safe_col: int) -> None:
        """Entry of the PLAYING state: lay mines around the first reveal."""
        self._place_mines(safe_row, safe_col)
        self._board.compute_adjacency()
        self._first_click_done = True

    def _place_mines(self, safe_row: int, safe_col: int) -> None:
        """
        Place mines outside the safe zone around (safe_row, safe_col).

        If the safe zone leaves fewer candidates than mine_count, every
        candidate becomes a mine and the rest are dropped.
        """
        for cell in self._board:
            cell.is_mine = False

        safe_zone = {(safe_row, safe_col)}
        safe_zone.update(self._board.neighbors(safe_row, safe_col))
        candidates = [
            pos for pos in self._board.positions() if pos not in safe_zone
        ]
        self._rng.shuffle(candidates)

        to_place = min(self._mine_count, len(candidates))
        for pos in candidates[:to_place]:
            self._board[pos].is_mine = True
        self._mines_on_board = to_place

        if to_place < self._mine_count:
            logger.debug(
                "Only %d of %d mines fit outside the safe zone at (%d, %d)",
                to_place, self._mine_count, safe_row, safe_col,
            )
        else:
            logger.debug(
                "Placed %d mines, safe cell (%d, %d)",
                to_place, safe_row, safe_col,
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal the cell at (row, col).

        The first reveal after construction or reset places the mines.
        A blank cell cascades to its neighbors; a mine ends the game.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if any state changed, False for a no-op (game over, out
            of bounds, already revealed or flagged).
        """
        if not self._can_reveal(row, col):
            return False

        if not self._first_click_done:
            self._arm(row, col)

        cell = self._board[row, col]
        cell.reveal()
        self._cells_revealed += 1

        if cell.is_mine:
            self._finish(GameState.LOST)
            return True

        if cell.is_blank:
            self._cascade(row, col)

        self._check_win_condition()
        return True

    def _can_reveal(self, row: int, col: int) -> bool:
        if self._game_over:
            return False
        cell = self._board.get_cell(row, col)
        return cell is not None and cell.is_hidden

    def _cascade(self, row: int, col: int) -> None:
        """Reveal the blank region around (row, col) and its numbered rim."""
        pending = self._board.neighbors(row, col)
        while pending:
            next_row, next_col = pending.pop()
            neighbor = self._board[next_row, next_col]
            # Revealed and flagged cells refuse, which also stops revisits.
            if not neighbor.reveal():
                continue
            self._cells_revealed += 1
            if neighbor.is_blank:
                pending.extend(self._board.neighbors(next_row, next_col))

    def _check_win_condition(self) -> None:
        """Win once every non-mine cell is revealed."""
        if self._state != GameState.PLAYING:
            return
        safe_cells = self._rows * self._cols - self._mines_on_board
        if self._cells_revealed != safe_cells:
            return

        self._finish(GameState.WON)
        for cell in self._board:
            if cell.is_mine and not cell.is_revealed:
                cell.state = CellState.FLAGGED
        self._mines_flagged = self._mine_count

    def _finish(self, state: GameState) -> None:
        self._state = state
        self._game_over = True
        logger.debug(
            "Game %s after %d revealed cells",
            state.name.lower(), self._cells_revealed,
        )

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle the flag on a hidden cell.

        Flags are bookkeeping for the player only; they play no part in
        deciding a win.

        Returns:
            True if the flag was toggled, False otherwise.
        """
        if self._game_over:
            return False
        cell = self._board.get_cell(row, col)
        if cell is None or not cell.toggle_flag():
            return False
        self._mines_flagged += 1 if cell.is_flagged else -1
        return True

    def chord(self, row: int, col: int) -> bool:
        """
        Reveal every hidden neighbor of a satisfied numbered cell.

        A revealed cell is satisfied when the flags around it equal its
        count. Wrong flags can make this reveal a mine.

        Returns:
            True if any neighbor was revealed.
        """
        if self._game_over or not self._board.contains(row, col):
            return False
        cell = self._board[row, col]
        if not cell.is_revealed or cell.adjacent_mines <= 0:
            return False
        flags = self._board.count_adjacent(
            row, col, lambda other: other.is_flagged
        )
        if flags != cell.adjacent_mines:
            return False

        changed = False
        for next_row, next_col in self._board.neighbors(row, col):
            if self.reveal(next_row, next_col):
                changed = True
        return changed

    def reveal_all_mines(self) -> None:
        """
        Expose the board for the game-over display.

        Unflagged mines are revealed. Flags on cells that are not mines are
        removed but those cells stay hidden, leaving the view to mark the
        wrong guess.
        """
        for cell in self._board:
            if cell.is_mine and not cell.is_flagged:
                cell.reveal()
            elif not cell.is_mine and cell.is_flagged:
                cell.toggle_flag()
                self._mines_flagged -= 1

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        """The grid. Front ends read it; only the engine mutates it."""
        return self._board

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def mine_count(self) -> int:
        return self._mine_count

    @property
    def mines_flagged(self) -> int:
        return self._mines_flagged

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags; negative when the player over-flags."""
        return self._mine_count - self._mines_flagged

    @property
    def cells_revealed(self) -> int:
        return self._cells_revealed

    @property
    def first_click_done(self) -> bool:
        return self._first_click_done

    @property
    def is_game_over(self) -> bool:
        return self._game_over

    @property
    def is_playing(self) -> bool:
        return self._state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._state == GameState.LOST

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        return self._board.get_cell(row, col)

    def snapshot(self) -> np.ndarray:
        """Board state as an array of cell codes (see Board.to_array)."""
        return self._board.to_array()
