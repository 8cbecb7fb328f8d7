"""
Minefield model package.

Provides the mine layout, the visible board state derived from it,
and thin callers (text rendering, Gymnasium environment) built on them.
"""
from .status import CellStatus, is_opened, is_covered
from .config import BoardConfig
from .layout import MineLayout
from .board import BoardState, GameState
from .text_view import render_board
from .environment import MinesweeperEnv

__all__ = [
    "CellStatus",
    "is_opened",
    "is_covered",
    "BoardConfig",
    "MineLayout",
    "BoardState",
    "GameState",
    "render_board",
    "MinesweeperEnv",
]
