"""
Mine layout module.

Holds the ground-truth placement of mines for a game and answers
adjacency queries. The layout is mutable: it starts empty and is
populated on the player's first move so that move is always safe.
"""
import logging
import random
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import BoardConfig


logger = logging.getLogger(__name__)


# ============================================================================
# Mine Layout
# ============================================================================

class MineLayout:
    """
    Locations of the mines for one game.

    A layout built from dimensions starts with no mines; ``num_mines()``
    only matches the grid after ``populate`` has been called, and stops
    matching again after ``reset_empty``.

    Position-taking methods expect ``in_range(row, col)`` to hold.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        num_mines: int,
        seed: Optional[int] = None,
    ) -> None:
        """
        Create an empty layout that may later hold ``num_mines`` mines.

        Args:
            rows: Number of rows, must be positive.
            cols: Number of columns, must be positive.
            num_mines: Mines placed by ``populate``; must be non-negative
                and under a third of the cells.
            seed: Seed for the placement RNG.

        Raises:
            ValueError: If the dimensions or mine count are invalid.
        """
        BoardConfig(rows, cols, num_mines)
        self._rows = rows
        self._cols = cols
        self._num_mines = num_mines
        self._cells = np.zeros((rows, cols), dtype=bool)
        self._rng = random.Random(seed)

    @classmethod
    def from_config(
        cls, config: BoardConfig, seed: Optional[int] = None
    ) -> "MineLayout":
        """Create an empty layout from a board configuration."""
        return cls(config.rows, config.cols, config.num_mines, seed=seed)

    @classmethod
    def from_grid(
        cls, mine_data: Sequence[Sequence[bool]], seed: Optional[int] = None
    ) -> "MineLayout":
        """
        Create a layout holding exactly the mines in ``mine_data``.

        The data is copied, so later changes to ``mine_data`` do not
        affect the layout. ``num_mines()`` is the number of true entries.

        Args:
            mine_data: Rectangular grid where True marks a mine.
            seed: Seed for the placement RNG used by later ``populate`` calls.

        Raises:
            ValueError: If the grid is empty or its rows differ in length.
        """
        if len(mine_data) == 0 or len(mine_data[0]) == 0:
            raise ValueError("Mine data must have at least one row and column")
        cols = len(mine_data[0])
        if any(len(row) != cols for row in mine_data):
            raise ValueError("Mine data rows must all have the same length")

        layout = cls(len(mine_data), cols, 0, seed=seed)
        layout._cells = np.array(
            [[bool(value) for value in row] for row in mine_data], dtype=bool
        )
        layout._num_mines = int(layout._cells.sum())
        return layout

    # ========================================================================
    # Mutators
    # ========================================================================

    def populate(self, avoid_row: int, avoid_col: int) -> None:
        """
        Replace the current mines with ``num_mines()`` random ones.

        Every cell except (avoid_row, avoid_col) is equally likely to
        receive a mine, and no two mines share a cell.

        Args:
            avoid_row: Row of the cell that must stay mine-free.
            avoid_col: Column of the cell that must stay mine-free.
        """
        self.reset_empty()
        candidates = self._get_candidate_positions((avoid_row, avoid_col))
        for row, col in self._rng.sample(candidates, self._num_mines):
            self._cells[row, col] = True
        logger.debug(
            "Placed %d mines on %dx%d field avoiding (%d, %d)",
            self._num_mines, self._rows, self._cols, avoid_row, avoid_col,
        )

    def _get_candidate_positions(
        self, exclude: Tuple[int, int]
    ) -> List[Tuple[int, int]]:
        """Get every position except the excluded one."""
        return [
            (row, col)
            for row in range(self._rows)
            for col in range(self._cols)
            if (row, col) != exclude
        ]

    def reset_empty(self) -> None:
        """
        Remove every mine.

        ``num_mines()``, ``num_rows()`` and ``num_cols()`` are unchanged, so
        the mine count no longer matches the grid until the next populate.
        """
        self._cells[:, :] = False

    def seed(self, seed: Optional[int]) -> None:
        """Reseed the placement RNG."""
        self._rng.seed(seed)

    # ========================================================================
    # Queries
    # ========================================================================

    def num_adjacent_mines(self, row: int, col: int) -> int:
        """
        Count mines in the up to 8 cells around (row, col).

        A mine at (row, col) itself is not counted.
        """
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._cells[neighbor_row, neighbor_col]:
                count += 1
        return count

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get in-range neighbor positions, diagonals included.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples.
        """
        positions = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_range(new_row, new_col):
                    positions.append((new_row, new_col))
        return positions

    def in_range(self, row: int, col: int) -> bool:
        """Check if (row, col) is a location on the field."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def has_mine(self, row: int, col: int) -> bool:
        """Check if there is a mine at (row, col)."""
        return bool(self._cells[row, col])

    def num_rows(self) -> int:
        return self._rows

    def num_cols(self) -> int:
        return self._cols

    def num_mines(self) -> int:
        """
        Get the number of mines this layout is meant to hold.

        For layouts built from dimensions this is the populate target and
        may not match the grid; see ``count_placed_mines`` for the live count.
        """
        return self._num_mines

    def count_placed_mines(self) -> int:
        """Count the mines currently on the grid."""
        return int(self._cells.sum())

    def to_array(self) -> np.ndarray:
        """Get a copy of the mine grid as a boolean array."""
        return self._cells.copy()

    def __repr__(self) -> str:
        return (
            f"MineLayout(rows={self._rows}, cols={self._cols}, "
            f"num_mines={self._num_mines})"
        )
