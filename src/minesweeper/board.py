"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell revealing,
and game state evaluation.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .generator import (
    Grid,
    Position,
    generate_grid,
    grid_from_mines,
    is_valid_position,
    neighbor_positions,
    validate_dimensions,
)


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible outcomes of a move."""

    CONTINUE = auto()
    WIN = auto()
    LOST = auto()

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'Win'."""
        return self.name.capitalize()


@dataclass
class BoardConfig:
    """
    Configuration for a square Minesweeper board.

    Attributes:
        size: Number of rows and columns.
        num_mines: Total mines to place.
    """

    size: int = 8
    num_mines: int = 8

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        validate_dimensions(self.size, self.num_mines)

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


def evaluate_game_state(cell: Optional[Cell], hidden_cells: int) -> GameState:
    """
    Derive the game state after a move.

    Args:
        cell: The selected cell, or None if the move was off the board.
        hidden_cells: Number of safe cells still hidden.

    Returns:
        LOST if the cell is a mine, WIN if no safe cell is hidden,
        CONTINUE otherwise.
    """
    if cell is not None and cell.is_mine:
        return GameState.LOST
    if hidden_cells == 0:
        return GameState.WIN
    return GameState.CONTINUE


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and the count of hidden safe cells. Mines are
    placed when the board is created.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: Optional[np.random.Generator] = field(default=None, repr=False)
    _grid: Grid = field(default_factory=list, repr=False)
    _hidden_cells: int = 0

    def __post_init__(self) -> None:
        """Generate the grid after dataclass creation."""
        if not self._grid:
            self._grid = generate_grid(
                self.config.size, self.config.num_mines, self.rng
            )
        self._hidden_cells = self.config.safe_cells
        logger.debug(
            f"New {self.config.size}x{self.config.size} board "
            f"with {self.config.num_mines} mines"
        )

    @classmethod
    def new(
        cls, size: int, num_mines: int, seed: Optional[int] = None
    ) -> "Board":
        """Create a board with randomly placed mines."""
        return cls(BoardConfig(size, num_mines), np.random.default_rng(seed))

    @classmethod
    def from_mines(cls, size: int, mines: Iterable[Position]) -> "Board":
        """Create a board with mines at fixed positions."""
        grid = grid_from_mines(size, mines)
        num_mines = sum(cell.is_mine for row in grid for cell in row)
        return cls(BoardConfig(size, num_mines), _grid=grid)

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return is_valid_position(row, col, self.config.size)

    def get_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """Get valid neighboring cell positions."""
        return neighbor_positions(row, col, self.config.size)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def select(self, row: int, col: int) -> int:
        """
        Reveal a cell, cascading through empty cells.

        Off-board and already revealed positions are ignored. An empty
        cell pushes its neighbors onto the worklist; a numbered cell or
        mine only reveals itself.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Number of newly revealed cells.
        """
        revealed = 0
        stack = [(row, col)]
        while stack:
            cur_row, cur_col = stack.pop()
            if not self.is_valid_position(cur_row, cur_col):
                continue
            cell = self._grid[cur_row][cur_col]
            if not cell.reveal():
                continue

            revealed += 1
            if not cell.is_mine:
                self._hidden_cells -= 1

            if cell.is_empty:
                # Reversed so neighbors pop in NEIGHBOR_OFFSETS order
                for position in reversed(self.get_neighbors(cur_row, cur_col)):
                    if self._grid[position[0]][position[1]].is_hidden:
                        stack.append(position)

        if revealed > 1:
            logger.debug(f"Cascade from ({row}, {col}) revealed {revealed} cells")
        return revealed

    def play_one_round(self, row: int, col: int) -> GameState:
        """
        Play a move and report the resulting game state.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            State evaluated against the selected cell, even when it had
            already been revealed.
        """
        self.select(row, col)
        state = evaluate_game_state(self.get_cell(row, col), self._hidden_cells)
        if state is not GameState.CONTINUE:
            logger.debug(f"Move ({row}, {col}) ended the game: {state.label}")
        return state

    def reveal_all(self) -> None:
        """Reveal every cell for the final display."""
        for row in self._grid:
            for cell in row:
                cell.reveal()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def hidden_cells(self) -> int:
        """Number of safe cells not yet revealed."""
        return self._hidden_cells

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.size, self.config.size), dtype=np.int8)
        for row in range(self.config.size):
            for col in range(self.config.size):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions of hidden cells.
        """
        actions = []
        for row in range(self.config.size):
            for col in range(self.config.size):
                if self._grid[row][col].is_hidden:
                    actions.append((row, col))
        return actions

    def render(self) -> str:
        """
        Render the board as text.

        One line per row, each cell followed by a space.
        """
        return "".join(
            "".join(f"{cell.symbol} " for cell in row) + "\n"
            for row in self._grid
        )

    def __str__(self) -> str:
        return self.render()
