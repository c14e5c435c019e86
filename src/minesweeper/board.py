"""
Board module for Minesweeper.

Holds the validated board configuration and the grid container the
game engine works on.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, MINE


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Validated shape of a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Mines to place on the first reveal.
    """

    rows: int = 10
    cols: int = 10
    num_mines: int = 15

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols


# Preset difficulty levels
DEFAULT = BoardConfig(10, 10, 15)
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)


# ============================================================================
# Board Grid
# ============================================================================

Position = Tuple[int, int]


@dataclass
class Board:
    """
    Fixed-size rows x cols grid of cells.

    The board knows geometry (bounds, neighbors) but no game rules.
    """

    rows: int
    cols: int
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.clear()

    def clear(self) -> None:
        """Replace every cell with a default one."""
        self._grid = [
            [Cell() for _ in range(self.cols)]
            for _ in range(self.rows)
        ]

    # ========================================================================
    # Geometry
    # ========================================================================

    def contains(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get the up-to-8 in-bounds positions around a cell.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples, excluding the center.
        """
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.contains(new_row, new_col):
                    result.append((new_row, new_col))
        return result

    def positions(self) -> Iterator[Position]:
        """Iterate over every (row, col) in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    # ========================================================================
    # Cell Access
    # ========================================================================

    def __getitem__(self, position: Position) -> Cell:
        row, col = position
        return self._grid[row][col]

    def __iter__(self) -> Iterator[Cell]:
        for board_row in self._grid:
            yield from board_row

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if out of bounds."""
        if not self.contains(row, col):
            return None
        return self._grid[row][col]

    # ========================================================================
    # Mines
    # ========================================================================

    def count_mines(self) -> int:
        return sum(1 for cell in self if cell.is_mine)

    def count_adjacent(self, row: int, col: int, predicate) -> int:
        """Count neighbors of (row, col) whose cell satisfies predicate."""
        return sum(
            1 for pos in self.neighbors(row, col) if predicate(self[pos])
        )

    def compute_adjacency(self) -> None:
        """Store neighbor mine counts, or MINE for mine cells."""
        for row, col in self.positions():
            cell = self._grid[row][col]
            if cell.is_mine:
                cell.adjacent_mines = MINE
            else:
                cell.adjacent_mines = self.count_adjacent(
                    row, col, lambda other: other.is_mine
                )

    def to_array(self) -> np.ndarray:
        """
        Snapshot the board as a numpy array of cell codes.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self._grid[row][col].to_code()
        return obs
