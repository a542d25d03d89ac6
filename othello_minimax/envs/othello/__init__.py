"""Othello state model."""

from .board import Board
from .command import Command, CommandKind, InvalidCommandError, parse_command
from .eval import POSITION_WEIGHTS, positional_score
from .utils import BLACK, EMPTY, OTHELLO_SIZE, WHITE, count_pieces

__all__ = [
    "BLACK",
    "Board",
    "Command",
    "CommandKind",
    "EMPTY",
    "InvalidCommandError",
    "OTHELLO_SIZE",
    "POSITION_WEIGHTS",
    "WHITE",
    "count_pieces",
    "parse_command",
    "positional_score",
]
