from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Optional, Sequence


class Player(IntEnum):
    """The two sides of a zero-sum game. MAX maximizes the heuristic."""

    MIN = 0
    MAX = 1

    @property
    def opponent(self) -> "Player":
        return Player.MIN if self is Player.MAX else Player.MAX


class Move(ABC):
    """
    Action that turns a state into one of its children.

    Concrete moves are immutable and compare by value.
    """

    @abstractmethod
    def __str__(self) -> str:
        """Textual form of the move."""


class GameState(ABC):
    """
    One position of a deterministic two-player game with perfect information.

    The search engine only relies on these members, it knows nothing about
    the rules of the concrete game.
    """

    @abstractmethod
    def is_terminal(self) -> bool:
        """True when the game is over at this position."""

    @abstractmethod
    def children(self) -> Sequence["GameState"]:
        """
        All states reachable with one legal move of ``player``.

        Order is the move-generation order and decides ties in the search.
        """

    @property
    @abstractmethod
    def last_move(self) -> Optional[Move]:
        """Move that produced this state, ``None`` for a root position."""

    @abstractmethod
    def heuristic(self) -> int:
        """Static evaluation from MAX's point of view (positive favors MAX)."""

    @property
    @abstractmethod
    def player(self) -> Player:
        """Side to move."""
