"""
Console controller for playing a game in a terminal.

Reads text commands, applies them to a board and prints the result.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .board import BoardState, GameState
from .config import BoardConfig
from .layout import MineLayout
from .text_view import render_board


HELP = (
    "Commands: u ROW COL (uncover), g ROW COL (cycle guess), "
    "n (new game), h (help), q (quit)"
)

_ACTIONS = {
    "u": "uncover",
    "uncover": "uncover",
    "g": "guess",
    "guess": "guess",
    "n": "new",
    "new": "new",
    "h": "help",
    "help": "help",
    "q": "quit",
    "quit": "quit",
}

_POSITIONAL = ("uncover", "guess")


@dataclass(frozen=True)
class Command:
    """A parsed console command."""

    action: str
    row: Optional[int] = None
    col: Optional[int] = None


def parse_command(line: str) -> Command:
    """
    Parse one line of console input.

    Raises:
        ValueError: If the command is unknown or has bad arguments.
    """
    words = line.split()
    if not words:
        raise ValueError("Empty command")

    action = _ACTIONS.get(words[0].lower())
    if action is None:
        raise ValueError(f"Unknown command: {words[0]}")

    if action not in _POSITIONAL:
        if len(words) != 1:
            raise ValueError(f"'{words[0]}' takes no arguments")
        return Command(action)

    if len(words) != 3:
        raise ValueError(f"'{words[0]}' needs a row and a column")
    try:
        row, col = int(words[1]), int(words[2])
    except ValueError:
        raise ValueError("Row and column must be integers") from None
    return Command(action, row, col)


class ConsoleGame:
    """
    Text-mode game controller.

    Mines are placed on the first uncover of each game, so the first
    square uncovered is never a mine.
    """

    def __init__(
        self,
        config: BoardConfig,
        seed: Optional[int] = None,
        write: Callable[[str], None] = print,
    ) -> None:
        self.layout = MineLayout.from_config(config, seed=seed)
        self.board = BoardState(self.layout)
        self._write = write
        self._first_uncover = True
        self._over = False

    def new_game(self) -> None:
        """Start over with an empty layout and a covered board."""
        self.layout.reset_empty()
        self.board.reset_game_display()
        self._first_uncover = True
        self._over = False

    @property
    def is_over(self) -> bool:
        return self._over

    def show(self) -> None:
        """Print the board and the mines-left counter."""
        self._write(render_board(self.board, show_coordinates=True))
        self._write(f"Mines left: {self.board.num_mines_left()}")

    def apply(self, command: Command) -> bool:
        """
        Apply a command to the game.

        Returns:
            False when the player asked to quit.
        """
        if command.action == "quit":
            return False
        if command.action == "help":
            self._write(HELP)
            return True
        if command.action == "new":
            self.new_game()
            self.show()
            return True

        if self._over:
            self._write("The game is over. Type 'n' for a new game.")
            return True
        if not self.layout.in_range(command.row, command.col):
            self._write(
                f"({command.row}, {command.col}) is off the board "
                f"({self.layout.num_rows()}x{self.layout.num_cols()})"
            )
            return True

        if command.action == "uncover":
            self._uncover(command.row, command.col)
        else:
            self.board.cycle_guess(command.row, command.col)

        self._over = self.board.is_game_over()
        self.show()
        if self.board.game_state == GameState.WON:
            self._write("You won!")
        elif self.board.game_state == GameState.LOST:
            self._write("Boom! You lost.")
        return True

    def _uncover(self, row: int, col: int) -> None:
        if self._first_uncover:
            self._first_uncover = False
            self.layout.populate(row, col)
        self.board.uncover(row, col)

    def run(self, lines: Iterable[str]) -> None:
        """
        Play until the input runs out or the player quits.

        Args:
            lines: Source of input lines, e.g. ``sys.stdin``.
        """
        self.show()
        self._write(HELP)
        for line in lines:
            if not line.strip():
                continue
            try:
                command = parse_command(line)
            except ValueError as error:
                self._write(f"Error: {error}")
                continue
            if not self.apply(command):
                break
