"""
Random agent for Minesweeper.

Serves as a baseline by uncovering random covered cells, optionally
mixing in random guesses.
"""
from typing import Optional

import numpy as np

from minefield.status import CellStatus

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that acts on a covered cell chosen uniformly at random.

    Flagged cells are never uncovered. With probability ``guess_rate`` the
    agent cycles the guess on a covered cell instead of uncovering one;
    it also guesses when every covered cell is flagged, which moves a
    flag on to a question mark that can be uncovered.
    """

    def __init__(
        self,
        board_height: int = 9,
        board_width: int = 9,
        seed: Optional[int] = None,
        guess_rate: float = 0.0,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for reproducibility.
            guess_rate: Chance of a guess action instead of an uncover.
        """
        super().__init__(board_height, board_width)
        if not 0.0 <= guess_rate < 1.0:
            raise ValueError("Guess rate must be in [0, 1)")
        self.rng = np.random.default_rng(seed)
        self.guess_rate = guess_rate

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random uncover or guess action.

        Args:
            observation: 2D array of cell statuses.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index for a random candidate cell.
        """
        covered = self.covered_mask(observation)
        if valid_actions is not None:
            covered &= valid_actions[self.total_cells:]
        uncoverable = covered & (observation.flatten() != CellStatus.FLAGGED)
        if valid_actions is not None:
            uncoverable &= valid_actions[: self.total_cells]

        uncover_indices = np.where(uncoverable)[0]
        guess_indices = np.where(covered)[0]

        wants_guess = self.guess_rate > 0 and self.rng.random() < self.guess_rate
        if len(guess_indices) > 0 and (wants_guess or len(uncover_indices) == 0):
            cell = int(self.rng.choice(guess_indices))
            return self.total_cells + cell

        if len(uncover_indices) == 0:
            # No candidates, return any action (will be invalid)
            return 0

        return int(self.rng.choice(uncover_indices))
