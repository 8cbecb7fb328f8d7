"""
Board state module.

Tracks what the player can see of a mine layout, applies the player's
actions (uncover, cycle guess) and decides when the game is over.
"""
import logging
from enum import Enum, auto
from typing import List, Tuple, Union

import numpy as np

from .layout import MineLayout
from .status import CellStatus, MAX_ADJACENT, is_covered, is_opened


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


_GUESS_CYCLE = {
    CellStatus.COVERED: CellStatus.FLAGGED,
    CellStatus.FLAGGED: CellStatus.QUESTION,
    CellStatus.QUESTION: CellStatus.COVERED,
}


# ============================================================================
# Board State Class
# ============================================================================

class BoardState:
    """
    Visible state of a minefield.

    The board shares its ``MineLayout`` with the caller rather than
    copying it: populating the layout after the board is built is seen
    by the board. The board never changes the layout itself.

    Statuses are the ``CellStatus`` values plus plain ints 0-8 for
    revealed squares. Position-taking methods expect
    ``layout.in_range(row, col)`` to hold.
    """

    def __init__(self, layout: MineLayout) -> None:
        """
        Create a board with every square covered.

        Args:
            layout: The mine layout this board displays.
        """
        self._layout = layout
        self._grid = np.full(
            (layout.num_rows(), layout.num_cols()),
            CellStatus.COVERED,
            dtype=np.int8,
        )
        self._game_state = GameState.PLAYING

    @property
    def layout(self) -> MineLayout:
        """Get the layout this board covers."""
        return self._layout

    @property
    def game_state(self) -> GameState:
        """Get the state found by the most recent ``evaluate`` call."""
        return self._game_state

    def num_rows(self) -> int:
        return self._layout.num_rows()

    def num_cols(self) -> int:
        return self._layout.num_cols()

    def reset_game_display(self) -> None:
        """Cover every square again, keeping the same layout."""
        self._grid.fill(CellStatus.COVERED)
        self._game_state = GameState.PLAYING

    # ========================================================================
    # Square Queries
    # ========================================================================

    def get_status(self, row: int, col: int) -> Union[CellStatus, int]:
        """
        Get the display status of a square.

        Returns:
            A ``CellStatus`` member, or the adjacent mine count (0-8) for a
            revealed square.
        """
        value = int(self._grid[row, col])
        if 0 <= value <= MAX_ADJACENT:
            return value
        return CellStatus(value)

    def is_uncovered(self, row: int, col: int) -> bool:
        """Check if a square is in one of the opened states."""
        return bool(is_opened(self._grid[row, col]))

    def num_mines_left(self) -> int:
        """
        Get the number of mines left to guess.

        This is the layout's mine count minus the number of flags,
        whether or not the flags are correct, so it can go negative.
        """
        flags = int(np.count_nonzero(self._grid == CellStatus.FLAGGED))
        return self._layout.num_mines() - flags

    def covered_positions(self) -> List[Tuple[int, int]]:
        """Get every square still in the covered family."""
        rows, cols = np.nonzero(is_covered(self._grid))
        return [(int(row), int(col)) for row, col in zip(rows, cols)]

    def num_opened_safe(self) -> int:
        """
        Count squares revealed with an adjacent mine count.

        Mines and wrong flags shown at the end of a lost game are not
        counted.
        """
        revealed = (self._grid >= 0) & (self._grid <= MAX_ADJACENT)
        return int(np.count_nonzero(revealed))

    def get_observation(self) -> np.ndarray:
        """Get a copy of the display grid as an int8 array."""
        return self._grid.copy()

    # ========================================================================
    # Player Actions
    # ========================================================================

    def cycle_guess(self, row: int, col: int) -> None:
        """
        Advance a covered square through covered, flagged and question.

        Opened squares are left alone.
        """
        current = int(self._grid[row, col])
        if current in _GUESS_CYCLE:
            self._grid[row, col] = _GUESS_CYCLE[current]

    def uncover(self, row: int, col: int) -> bool:
        """
        Uncover a square.

        Uncovering a mine marks it as the exploded mine. Otherwise the
        square is opened, and if it has no adjacent mines the opening
        spreads to its neighbors until it reaches numbered squares or
        the edge of the field. Flagged squares are never opened by the
        spread. This may end the game; call ``is_game_over`` afterwards.

        Args:
            row: Row of the square.
            col: Column of the square.

        Returns:
            False iff there was a mine at (row, col).
        """
        if self._layout.has_mine(row, col):
            self._grid[row, col] = CellStatus.EXPLODED_MINE
            return False
        self._flood_open(row, col)
        return True

    def _flood_open(self, row: int, col: int) -> None:
        """Open the zero region around (row, col) and its numbered border."""
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            if not self._can_flood_into(current_row, current_col):
                continue
            count = self._layout.num_adjacent_mines(current_row, current_col)
            self._grid[current_row, current_col] = count
            if count == 0:
                stack.extend(self._layout.neighbors(current_row, current_col))

    def _can_flood_into(self, row: int, col: int) -> bool:
        """Check if the spread may open a square."""
        if not self._layout.in_range(row, col):
            return False
        status = self._grid[row, col]
        # Opened squares stop the spread, which keeps it from revisiting.
        return not is_opened(status) and status != CellStatus.FLAGGED

    # ========================================================================
    # Game Over
    # ========================================================================

    def evaluate(self) -> GameState:
        """
        Work out whether the game is won, lost or still in progress.

        This is not a pure query: when the game is over it also updates
        the display. On a win every mine is flagged. On a loss the
        unflagged mines are shown and wrong flags are marked as
        ``INCORRECT_FLAG``. Calling it again once the game is over
        changes nothing further.

        Returns:
            The current game state.
        """
        lost = bool(np.any(self._grid == CellStatus.EXPLODED_MINE))
        mines = self._layout.to_array()
        total_safe = self._grid.size - self._layout.num_mines()
        won = self.num_opened_safe() == total_safe

        if lost:
            self._finalize_loss(mines)
            state = GameState.LOST
        elif won:
            self._finalize_win(mines)
            state = GameState.WON
        else:
            state = GameState.PLAYING

        if state != self._game_state:
            logger.info("Game %s", state.name.lower())
        self._game_state = state
        return state

    def is_game_over(self) -> bool:
        """
        Check if the game has been won or lost.

        See ``evaluate``: the first call after the game ends updates the
        display, so call this after every uncover or guess.
        """
        return self.evaluate() != GameState.PLAYING

    def _finalize_win(self, mines: np.ndarray) -> None:
        """Flag every mine."""
        self._grid[mines] = CellStatus.FLAGGED

    def _finalize_loss(self, mines: np.ndarray) -> None:
        """Show unflagged mines and mark flags placed on safe squares."""
        flagged = self._grid == CellStatus.FLAGGED
        exploded = self._grid == CellStatus.EXPLODED_MINE
        self._grid[mines & ~flagged & ~exploded] = CellStatus.MINE
        self._grid[flagged & ~mines] = CellStatus.INCORRECT_FLAG

    def __repr__(self) -> str:
        return f"BoardState(layout={self._layout!r}, state={self._game_state.name})"
