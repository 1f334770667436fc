"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their reveal state
and content (mine, adjacent mine count, or empty).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()


HIDDEN_GLYPH = "X"
MINE_GLYPH = "B"
BLANK_GLYPH = "_"


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    A cell is either a mine, a numbered cell (1-8 adjacent mines) or
    empty (no adjacent mines). Only empty cells trigger a cascade.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden or revealed).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was newly revealed, False if already revealed.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_empty(self) -> bool:
        """Check if cell has no mine and no adjacent mines."""
        return not self.is_mine and self.adjacent_mines == 0

    @property
    def symbol(self) -> str:
        """Character used for this cell in the text rendering."""
        if self.is_hidden:
            return HIDDEN_GLYPH
        if self.is_mine:
            return MINE_GLYPH
        if self.adjacent_mines == 0:
            return BLANK_GLYPH
        return str(self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to observation value for the environment.

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.is_mine:
            return 9
        return self.adjacent_mines
