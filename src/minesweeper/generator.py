"""
Grid generation for Minesweeper.

Places mines at random distinct positions and derives the adjacent mine
count of every safe cell.
"""
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell


Position = Tuple[int, int]
Grid = List[List[Cell]]

# Up, up-right, right, down-right, down, down-left, left, up-left.
NEIGHBOR_OFFSETS: Tuple[Position, ...] = (
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
)


# ============================================================================
# Neighbor Utilities
# ============================================================================

def is_valid_position(row: int, col: int, size: int) -> bool:
    """Check if position is within a square grid of the given size."""
    return 0 <= row < size and 0 <= col < size


def neighbor_positions(row: int, col: int, size: int) -> List[Position]:
    """
    Get the in-bounds 8-connected neighbors of a cell.

    Args:
        row: Row index of center cell.
        col: Column index of center cell.
        size: Side length of the grid.

    Returns:
        List of (row, col) tuples, in NEIGHBOR_OFFSETS order.
    """
    neighbors = []
    for delta_row, delta_col in NEIGHBOR_OFFSETS:
        new_row = row + delta_row
        new_col = col + delta_col
        if is_valid_position(new_row, new_col, size):
            neighbors.append((new_row, new_col))
    return neighbors


# ============================================================================
# Grid Construction
# ============================================================================

def validate_dimensions(size: int, num_mines: int) -> None:
    """Raise ValueError unless a size x size grid can hold num_mines."""
    if size < 1:
        raise ValueError("Board size must be positive")
    if num_mines < 0:
        raise ValueError("Number of mines cannot be negative")
    max_mines = size * size
    if num_mines > max_mines:
        raise ValueError(f"Too many mines (max {max_mines})")


def empty_grid(size: int) -> Grid:
    """Create a size x size grid of hidden, empty cells."""
    return [[Cell() for _ in range(size)] for _ in range(size)]


def choose_mine_positions(
    size: int, num_mines: int, rng: np.random.Generator
) -> List[Position]:
    """
    Pick num_mines distinct positions uniformly at random.

    Sampling without replacement keeps the cost bounded by the grid
    area, even for a board that is entirely mines.
    """
    flat = rng.choice(size * size, size=num_mines, replace=False)
    return [divmod(int(index), size) for index in flat]


def count_adjacent_mines(grid: Grid, row: int, col: int) -> int:
    """Count mines adjacent to a specific cell."""
    count = 0
    for neighbor_row, neighbor_col in neighbor_positions(row, col, len(grid)):
        if grid[neighbor_row][neighbor_col].is_mine:
            count += 1
    return count


def calculate_adjacent_mines(grid: Grid) -> None:
    """Fill in adjacent mine counts for all safe cells."""
    size = len(grid)
    for row in range(size):
        for col in range(size):
            if not grid[row][col].is_mine:
                grid[row][col].adjacent_mines = count_adjacent_mines(
                    grid, row, col
                )


def grid_from_mines(size: int, mines: Iterable[Position]) -> Grid:
    """
    Build a grid with mines at the given positions.

    Args:
        size: Side length of the grid.
        mines: (row, col) positions of the mines. Duplicates count once.

    Returns:
        Grid with mines placed and adjacent counts calculated.

    Raises:
        ValueError: If the size is invalid or a mine is out of bounds.
    """
    validate_dimensions(size, 0)
    grid = empty_grid(size)
    for row, col in mines:
        if not is_valid_position(row, col, size):
            raise ValueError(f"Mine position ({row}, {col}) is off the board")
        grid[row][col].is_mine = True
    calculate_adjacent_mines(grid)
    return grid


def generate_grid(
    size: int,
    num_mines: int,
    rng: Optional[np.random.Generator] = None,
) -> Grid:
    """
    Generate a grid with randomly placed mines.

    Args:
        size: Side length of the grid.
        num_mines: Number of mines, between 0 and size * size.
        rng: Random generator (default: a fresh unseeded one).

    Returns:
        Grid with mines placed and adjacent counts calculated.
    """
    validate_dimensions(size, num_mines)
    rng = rng if rng is not None else np.random.default_rng()
    return grid_from_mines(size, choose_mine_positions(size, num_mines, rng))
