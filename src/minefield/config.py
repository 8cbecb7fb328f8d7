"""
Board configuration.

Holds the dimensions and target mine count used to build a layout.
"""
from dataclasses import dataclass


@dataclass
class BoardConfig:
    """
    Configuration for a minefield.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Mines to place once the layout is populated.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        # Keep the density under a third so random placement always has room.
        if 3 * self.num_mines >= self.rows * self.cols:
            raise ValueError(
                f"Too many mines (must be under a third of "
                f"{self.rows * self.cols} cells)"
            )

    @property
    def total_cells(self) -> int:
        """Number of squares on the board."""
        return self.rows * self.cols
