"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, Game


def plant_mines(game: Game, *positions) -> None:
    """Arm a game with mines at fixed positions instead of random ones."""
    board = game.board
    game._first_click_done = True
    for cell in board:
        cell.is_mine = False
    for pos in positions:
        board[pos].is_mine = True
    game._mines_on_board = len(positions)
    board.compute_adjacency()


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for repeatable placement."""
    return random.Random(1234)


@pytest.fixture
def default_game(rng: random.Random) -> Game:
    """A 10x10 game with 15 mines."""
    return Game(10, 10, 15, rng=rng)


@pytest.fixture
def empty_game() -> Game:
    """A 5x5 game with no mines for cascade testing."""
    return Game(5, 5, 0)


@pytest.fixture
def corner_mine_game() -> Game:
    """
    A 4x4 game with a single mine planted at (0, 0).

        * 1 0 0
        1 1 0 0
        0 0 0 0
        0 0 0 0
    """
    game = Game(4, 4, 1)
    plant_mines(game, (0, 0))
    return game


@pytest.fixture
def plant():
    """Helper that lays out mines by hand on an unarmed game."""
    return plant_mines


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def small_board() -> Board:
    """A bare 3x4 grid."""
    return Board(3, 4)


@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
