"""
Minesweeper game module.

Provides the board engine, grid generation, the console front end and a
Gymnasium environment.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, GameState, evaluate_game_state
from .generator import generate_grid, grid_from_mines
from .console import MoveParseError, parse_move, run_game
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "evaluate_game_state",
    "generate_grid",
    "grid_from_mines",
    "MoveParseError",
    "parse_move",
    "run_game",
    "MinesweeperEnv",
]
