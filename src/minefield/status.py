"""
Display states for squares of the visible board.

Covered states are negative, opened states are non-negative. Values 0-8
mean the square was revealed and shows that many adjacent mines.
"""
from enum import IntEnum


# ============================================================================
# Constants
# ============================================================================

class CellStatus(IntEnum):
    """Named display states of a square."""

    # Covered family
    COVERED = -1
    FLAGGED = -2
    QUESTION = -3

    # Opened, only shown at the end of a game
    MINE = 9
    INCORRECT_FLAG = 10
    EXPLODED_MINE = 11


MAX_ADJACENT = 8


def is_opened(status: int) -> bool:
    """Check if a status is one of the opened (non-negative) states."""
    return status >= 0


def is_covered(status: int) -> bool:
    """Check if a status is in the covered family."""
    return status < 0
