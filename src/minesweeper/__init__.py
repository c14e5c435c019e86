"""
Minesweeper package.

Provides the game engine (board, cells, game state) and the terminal and
tkinter front ends that drive it.
"""
from .cell import Cell, CellState, MINE, HIDDEN_CODE, FLAGGED_CODE, MINE_CODE
from .board import (
    Board,
    BoardConfig,
    DEFAULT,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .game import Game, GameState

__all__ = [
    "Cell",
    "CellState",
    "MINE",
    "HIDDEN_CODE",
    "FLAGGED_CODE",
    "MINE_CODE",
    "Board",
    "BoardConfig",
    "DEFAULT",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "Game",
    "GameState",
]
