"""
Base agent interface for Minesweeper players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    All agents must implement the select_action method to choose an
    environment action based on the current observation.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        """
        Initialize the agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
        """
        self.board_height = board_height
        self.board_width = board_width
        self.total_cells = board_height * board_width

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell statuses.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index. Indices below ``total_cells`` uncover, the rest
            cycle the guess on a cell.
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert an action index to the (row, col) it targets."""
        index = action % self.total_cells
        return index // self.board_width, index % self.board_width

    def uncover_action(self, row: int, col: int) -> int:
        """Get the action index that uncovers (row, col)."""
        return row * self.board_width + col

    def guess_action(self, row: int, col: int) -> int:
        """Get the action index that cycles the guess on (row, col)."""
        return self.total_cells + self.uncover_action(row, col)

    def covered_mask(self, observation: np.ndarray) -> np.ndarray:
        """
        Get the mask of covered cells from an observation.

        Args:
            observation: 2D array of cell statuses.

        Returns:
            Flat boolean mask where True = covered, flagged or question.
        """
        return observation.flatten() < 0

    def reset(self) -> None:
        """Reset agent state for new episode."""
