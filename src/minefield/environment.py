"""
Gymnasium environment wrapper for the minefield model.

Provides a standard RL interface over a MineLayout and the BoardState
that covers it.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardState, GameState
from .config import BoardConfig
from .layout import MineLayout
from .status import CellStatus, is_covered
from .text_view import render_board


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array of display statuses:
        - -1 covered, -2 flagged, -3 question
        - 0-8 revealed with adjacent mine count
        - 9 mine, 10 incorrect flag, 11 exploded mine (end of game)

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols uncovers cell (i // cols, i % cols).
        Action i >= rows * cols cycles the guess on cell i - rows * cols.

    Rewards:
        - +1 for uncovering a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for uncovering an opened or flagged cell
        - 0 for cycling a guess
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.layout = MineLayout.from_config(self.config)
        self.board = BoardState(self.layout)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=int(CellStatus.QUESTION),
            high=int(CellStatus.EXPLODED_MINE),
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self.config.total_cells)

        self._steps = 0
        self._first_uncover = True
        self._total_safe_cells = self.config.total_cells - self.config.num_mines

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Mines are placed on the first uncover of the episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.layout.seed(seed)
        self.layout.reset_empty()
        self.board.reset_game_display()
        self._steps = 0
        self._first_uncover = True

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Uncover or guess action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        uncover, row, col = self._decode_action(action)
        self._steps += 1

        if uncover:
            reward = self._uncover(row, col)
        else:
            self.board.cycle_guess(row, col)
            reward = 0.0

        terminated = self.board.is_game_over()
        if terminated and self.board.game_state == GameState.WON:
            reward = 10.0

        return (
            self.board.get_observation(),
            reward,
            terminated,
            False,
            self._get_info(),
        )

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert an action index to (is_uncover, row, col)."""
        action = int(action)
        cells = self.config.total_cells
        uncover = action < cells
        index = action if uncover else action - cells
        return uncover, index // self.config.cols, index % self.config.cols

    def _uncover(self, row: int, col: int) -> float:
        """Uncover a cell and get the reward for it."""
        # Flagged cells are treated like opened ones; unflag them first.
        if (
            self.board.is_uncovered(row, col)
            or self.board.get_status(row, col) == CellStatus.FLAGGED
        ):
            return -0.1

        if self._first_uncover:
            self._first_uncover = False
            self.layout.populate(row, col)

        if not self.board.uncover(row, col):
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.num_opened_safe(),
            "total_safe": self._total_safe_cells,
            "mines_left": self.board.num_mines_left(),
            "game_state": self.board.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action. Guess actions are
            valid on covered-family cells, uncover actions on those that
            are not flagged.
        """
        obs = self.board.get_observation().flatten()
        covered = is_covered(obs)
        return np.concatenate([covered & (obs != CellStatus.FLAGGED), covered])
