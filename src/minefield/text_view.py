"""
Plain-text rendering of a board.
"""
from typing import Dict, List

from .board import BoardState
from .status import CellStatus


SYMBOLS: Dict[CellStatus, str] = {
    CellStatus.COVERED: ".",
    CellStatus.FLAGGED: "F",
    CellStatus.QUESTION: "?",
    CellStatus.MINE: "*",
    CellStatus.INCORRECT_FLAG: "X",
    CellStatus.EXPLODED_MINE: "#",
}


def status_symbol(status: int) -> str:
    """Get the one-character symbol for a display status."""
    if status == 0:
        return " "
    if 0 < status < CellStatus.MINE:
        return str(status)
    return SYMBOLS[CellStatus(status)]


def render_board(board: BoardState, show_coordinates: bool = False) -> str:
    """
    Render the board as text, one line per row.

    Args:
        board: Board to render.
        show_coordinates: Add row and column indices around the grid.

    Returns:
        The rendered board.
    """
    rows, cols = board.num_rows(), board.num_cols()
    width = len(str(max(rows, cols) - 1))
    lines: List[str] = []

    if show_coordinates:
        header = " ".join(str(col).rjust(width) for col in range(cols))
        lines.append(" " * (width + 1) + header)

    for row in range(rows):
        cells = " ".join(
            status_symbol(board.get_status(row, col)).rjust(width)
            for col in range(cols)
        )
        if show_coordinates:
            cells = f"{str(row).rjust(width)} {cells}"
        lines.append(cells)

    return "\n".join(lines)
