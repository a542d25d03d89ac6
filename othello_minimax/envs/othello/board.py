"""Othello position implementing the ``GameState`` contract."""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ...games.game_state import GameState, Player
from .command import Command
from .eval import positional_score
from .utils import (
    BLACK,
    EMPTY,
    OTHELLO_SIZE,
    WHITE,
    get_flips,
    initial_board,
    is_valid_move,
    opposite,
)

_SYMBOLS = {EMPTY: ".", BLACK: "*", WHITE: "O"}
_COLOR_NAMES = {BLACK: "BLACK", WHITE: "WHITE"}


class Board(GameState):
    """
    8x8 Othello board plus the color to move.

    Black is MAX and White is MIN; White moves first. Search code only uses
    ``result``/``children``, which never touch the parent board. ``move``
    and ``pass_turn`` mutate in place and exist for the driver that plays
    the real game.
    """

    def __init__(self) -> None:
        self._board = initial_board(OTHELLO_SIZE)
        self._turn = WHITE
        self._last_move: Optional[Command] = None
        self._actions: Optional[List[Command]] = None

    @classmethod
    def from_array(cls, cells: np.ndarray, turn: int) -> "Board":
        """Build a position from a ``[row, column]`` array of tokens."""
        cells = np.asarray(cells, dtype=np.int8)
        if cells.shape != (OTHELLO_SIZE, OTHELLO_SIZE):
            raise ValueError(f"Board must be {OTHELLO_SIZE}x{OTHELLO_SIZE}, got {cells.shape}")
        if not np.isin(cells, (EMPTY, BLACK, WHITE)).all():
            raise ValueError("Board cells must be EMPTY, BLACK or WHITE")
        if turn not in (BLACK, WHITE):
            raise ValueError(f"Turn must be BLACK or WHITE, got {turn}")

        board = cls()
        board._board = cells.copy()
        board._turn = turn
        return board

    def copy(self) -> "Board":
        board = Board.__new__(Board)
        board._board = self._board.copy()
        board._turn = self._turn
        board._last_move = self._last_move
        board._actions = None
        return board

    # GameState
    def is_terminal(self) -> bool:
        # Only the side to move is checked, the opponent may still have moves.
        return not self.actions()

    def children(self) -> List["Board"]:
        return [self.result(command) for command in self.actions()]

    @property
    def last_move(self) -> Optional[Command]:
        return self._last_move

    def heuristic(self) -> int:
        return positional_score(self._board)

    @property
    def player(self) -> Player:
        return Player.MAX if self._turn == BLACK else Player.MIN

    # Accessors
    @property
    def turn(self) -> int:
        return self._turn

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the ``[row, column]`` token array."""
        view = self._board.view()
        view.flags.writeable = False
        return view

    def get_value(self, column: int, row: int) -> int:
        return int(self._board[row, column])

    def count(self, color: int) -> int:
        return int(np.sum(self._board == color))

    # Rules
    def actions(self) -> List[Command]:
        """Legal moves for the side to move, scanned row by row from a1."""
        if self._actions is None:
            grid = self._board.tolist()
            self._actions = [
                Command.at(column, row)
                for row in range(OTHELLO_SIZE)
                for column in range(OTHELLO_SIZE)
                if is_valid_move(grid, row, column, self._turn)
            ]
        return self._actions

    def is_valid(self, command: Command) -> bool:
        if not command.is_move:
            return False
        return is_valid_move(self._board, command.row, command.column, self._turn)

    def move(self, command: Command) -> None:
        """
        Play ``command`` for the side to move, in place.

        Raises:
            ValueError: if ``command`` is not a legal move here.
        """
        if not command.is_move:
            raise ValueError(f"Cannot play {command} on the board")

        row, column = command.row, command.column
        flips = get_flips(self._board, row, column, self._turn)
        if not flips:
            raise ValueError(f"Illegal move {command} for {_COLOR_NAMES[self._turn]}")

        self._board[row, column] = self._turn
        for flip_row, flip_col in flips:
            self._board[flip_row, flip_col] = self._turn

        self._turn = opposite(self._turn)
        self._last_move = command
        self._actions = None

    def result(self, command: Command) -> "Board":
        """New board after ``command``; this board is left untouched."""
        board = self.copy()
        board.move(command)
        return board

    def pass_turn(self) -> None:
        """Hand the turn to the opponent when the side to move is stuck."""
        self._turn = opposite(self._turn)
        self._actions = None

    def render(self) -> str:
        symbol = _SYMBOLS[self._turn]
        lines = [f"Turn: {_COLOR_NAMES[self._turn]} ({symbol})"]
        lines.append("  " + " ".join(chr(ord("A") + c) for c in range(OTHELLO_SIZE)))
        for row in range(OTHELLO_SIZE - 1, -1, -1):
            cells = " ".join(_SYMBOLS[int(v)] for v in self._board[row])
            lines.append(f"{row + 1} {cells}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(turn={_COLOR_NAMES[self._turn]}, last_move={self._last_move})"
