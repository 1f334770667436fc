"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 8x8 board with 8 mines."""
    return Board.new(8, 8, seed=1234)


@pytest.fixture
def corner_mine_board() -> Board:
    """
    3x3 board with a single mine in the top-left corner.

        B 1 _
        1 1 _
        _ _ _
    """
    return Board.from_mines(3, [(0, 0)])


@pytest.fixture
def wall_board() -> Board:
    """
    5x5 board with a column of mines down the middle.

    Columns 1 and 3 are numbered, columns 0 and 4 are empty.
    """
    return Board.from_mines(5, [(row, 2) for row in range(5)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.new(5, 0)


# ============================================================================
# Cell Fixtures
# ============================================================================

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
    return BoardConfig(9, 10)
