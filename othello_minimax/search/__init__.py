"""Adversarial search algorithms and search-backed policies."""

from ..registry import register_search
from .action_policy import ActionPolicy
from .minimax import (
    SearchResult,
    SearchStats,
    alphabeta,
    apply_alphabeta,
    apply_minimax,
    minimax,
    search_alphabeta,
    search_minimax,
)
from .minimax_policy import MinimaxConfig, MinimaxPolicy

register_search("minimax", search_minimax)
register_search("alphabeta", search_alphabeta)

__all__ = [
    "ActionPolicy",
    "MinimaxConfig",
    "MinimaxPolicy",
    "SearchResult",
    "SearchStats",
    "alphabeta",
    "apply_alphabeta",
    "apply_minimax",
    "minimax",
    "search_alphabeta",
    "search_minimax",
]
