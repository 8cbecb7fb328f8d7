"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src and the scripts at the root to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "src"))

from minefield import BoardConfig, BoardState, MineLayout


# ============================================================================
# Layout Fixtures
# ============================================================================

@pytest.fixture
def center_mine_layout() -> MineLayout:
    """Create a 3x3 layout with a single mine in the middle."""
    return MineLayout.from_grid([
        [False, False, False],
        [False, True, False],
        [False, False, False],
    ])


@pytest.fixture
def corner_layout() -> MineLayout:
    """
    Create a 4x5 layout with mines in two corners.

        * . . . .
        . . . . .
        . . . . .
        . . . . *
    """
    grid = [[False] * 5 for _ in range(4)]
    grid[0][0] = True
    grid[3][4] = True
    return MineLayout.from_grid(grid)


@pytest.fixture
def wall_layout() -> MineLayout:
    """
    Create a 5x5 layout with a wall of mines in column 2.

        . . * . .
        . . * . .
        . . * . .
        . . * . .
        . . * . .
    """
    return MineLayout.from_grid(
        [[col == 2 for col in range(5)] for _ in range(5)]
    )


@pytest.fixture
def empty_layout() -> MineLayout:
    """Create a 9x9 layout that will hold 10 mines once populated."""
    return MineLayout(9, 9, 10, seed=1234)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def center_mine_board(center_mine_layout: MineLayout) -> BoardState:
    """Board over the 3x3 single-mine layout."""
    return BoardState(center_mine_layout)


@pytest.fixture
def corner_board(corner_layout: MineLayout) -> BoardState:
    """Board over the two-corner layout."""
    return BoardState(corner_layout)


@pytest.fixture
def wall_board(wall_layout: MineLayout) -> BoardState:
    """Board over the mine-wall layout."""
    return BoardState(wall_layout)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def small_config() -> BoardConfig:
    """Create a small 4x4 configuration with 2 mines."""
    return BoardConfig(4, 4, 2)
