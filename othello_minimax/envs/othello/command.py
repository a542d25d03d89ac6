"""Othello moves and their text encoding ("d3", "exit")."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ...games.game_state import Move
from .utils import OTHELLO_SIZE

EXIT_TOKEN = "exit"


class InvalidCommandError(ValueError):
    """Text that is neither a board coordinate nor the exit keyword."""


class CommandKind(Enum):
    MOVE = "move"
    EXIT = "exit"


@dataclass(frozen=True)
class Command(Move):
    """
    A disc placement at ``cell`` = (column, row), or the exit action.

    Columns and rows are zero-based: "a1" is (0, 0), "h8" is (7, 7).
    """

    kind: CommandKind
    cell: Optional[Tuple[int, int]] = None

    @classmethod
    def at(cls, column: int, row: int) -> "Command":
        if not (0 <= column < OTHELLO_SIZE and 0 <= row < OTHELLO_SIZE):
            raise ValueError(f"Cell ({column}, {row}) is off the board")
        return cls(CommandKind.MOVE, (column, row))

    @classmethod
    def exit(cls) -> "Command":
        return cls(CommandKind.EXIT)

    @property
    def is_move(self) -> bool:
        return self.kind is CommandKind.MOVE

    @property
    def column(self) -> int:
        if self.cell is None:
            raise ValueError(f"Invalid accessor call: {self.kind.value} command has no column")
        return self.cell[0]

    @property
    def row(self) -> int:
        if self.cell is None:
            raise ValueError(f"Invalid accessor call: {self.kind.value} command has no row")
        return self.cell[1]

    def __str__(self) -> str:
        if self.cell is None:
            return EXIT_TOKEN
        column, row = self.cell
        return chr(ord("a") + column) + chr(ord("1") + row)


def parse_command(text: str) -> Command:
    """
    Parse user input into a ``Command``.

    Raises:
        InvalidCommandError: if ``text`` is not "a1".."h8" or the exit keyword.
    """
    token = text.strip().lower()
    if token == EXIT_TOKEN:
        return Command.exit()

    if len(token) != 2:
        raise InvalidCommandError(f"Expected a coordinate like 'd3' or '{EXIT_TOKEN}', got {text!r}")

    column = ord(token[0]) - ord("a")
    row = ord(token[1]) - ord("1")
    if not (0 <= column < OTHELLO_SIZE and 0 <= row < OTHELLO_SIZE):
        raise InvalidCommandError(f"Coordinate {text!r} is off the board")

    return Command(CommandKind.MOVE, (column, row))
