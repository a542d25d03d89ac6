from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..games.game_state import GameState, Move


class ActionPolicy(ABC):
    """
    Abstract policy that picks a move for the side to move in ``state``.

    Knows only about the ``GameState`` contract, never about the rules of
    a concrete game.
    """

    @abstractmethod
    def select_move(self, state: GameState) -> Optional[Move]:
        """
        Choose a move for ``state``.

        Returns ``None`` when the side to move has no legal move.
        """
        raise NotImplementedError
