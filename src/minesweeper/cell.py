"""
Cell module for Minesweeper.

A cell holds its content (mine or neighbor count) and its visual state
(hidden, revealed or flagged). Cells do not know where they sit on the
board; position is implied by the grid index.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

# Sentinel stored in adjacent_mines for a cell that is itself a mine.
MINE = -1

# Snapshot codes shared by every front end.
HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single position in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Mine neighbors (0-8), or MINE for a mine cell.
        state: Current visual state. Holding one state rather than two
            booleans keeps a cell from being revealed and flagged at once.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell was hidden and is now revealed, False if it
            was already revealed or is flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Flip the flag on a hidden cell.

        Returns:
            True if the flag was toggled, False if the cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    @property
    def is_blank(self) -> bool:
        """True for a non-mine cell with no mine neighbors."""
        return not self.is_mine and self.adjacent_mines == 0

    def to_code(self) -> int:
        """
        Convert the cell to its snapshot code.

        Returns:
            HIDDEN_CODE (-1): hidden cell
            FLAGGED_CODE (-2): flagged cell
            0-8: revealed cell with adjacent mine count
            MINE_CODE (9): revealed mine
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_CODE
        if self.state == CellState.FLAGGED:
            return FLAGGED_CODE
        if self.is_mine:
            return MINE_CODE
        return self.adjacent_mines
