"""Minimax search policy with optional alpha-beta pruning."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from ..games.game_state import GameState, Move
from ..registry import get_search
from .action_policy import ActionPolicy
from .minimax import SearchResult

logger = logging.getLogger(__name__)


@dataclass
class MinimaxConfig:
    algorithm: str = "alphabeta"
    depth: int = 8


class MinimaxPolicy(ActionPolicy):
    """Runs a registered root search to a fixed depth."""

    def __init__(self, config: Optional[MinimaxConfig] = None) -> None:
        self.config = config or MinimaxConfig()
        if self.config.depth <= 0:
            raise ValueError("Minimax depth must be >= 1")
        self._search = get_search(self.config.algorithm)
        self.last_result: Optional[SearchResult] = None

    def select_move(self, state: GameState) -> Optional[Move]:
        started = time.perf_counter()
        result: SearchResult = self._search(state, self.config.depth)
        elapsed = time.perf_counter() - started
        self.last_result = result

        if result.move is None:
            logger.info("%s: no legal move for %s", self.config.algorithm, state.player.name)
            return None

        logger.info(
            "%s depth=%d chose %s (value=%s) in %.3fs",
            self.config.algorithm,
            self.config.depth,
            result.move,
            result.value,
            elapsed,
        )
        logger.debug(
            "%s visited %d nodes, %d evaluations",
            self.config.algorithm,
            result.stats.nodes,
            result.stats.evaluations,
        )
        return result.move
