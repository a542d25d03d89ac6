from __future__ import annotations

from .game_state import GameState, Move, Player

__all__ = ["GameState", "Move", "Player"]
