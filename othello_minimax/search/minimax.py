"""Fixed-depth minimax and alpha-beta search over ``GameState``."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from ..games.game_state import GameState, Move, Player


@dataclass
class SearchStats:
    nodes: int = 0
    evaluations: int = 0


@dataclass
class SearchResult:
    """Outcome of a root search. ``move`` is ``None`` when the root has no children."""

    move: Optional[Move]
    value: Optional[float]
    stats: SearchStats = field(default_factory=SearchStats)


def _evaluate(state: GameState, stats: Optional[SearchStats]) -> int:
    if stats is not None:
        stats.evaluations += 1
    return state.heuristic()


def _check_depth(depth: int) -> None:
    if depth < 1:
        raise ValueError(f"Search depth must be >= 1, got {depth}")


def minimax(state: GameState, depth: int, stats: Optional[SearchStats] = None) -> float:
    """Exact minimax value of ``state`` searched ``depth`` plies deep."""
    if stats is not None:
        stats.nodes += 1

    if depth == 0 or state.is_terminal():
        return _evaluate(state, stats)

    children = state.children()
    # Leaf by the rules model even though not flagged terminal.
    if not children:
        return _evaluate(state, stats)

    if state.player == Player.MAX:
        value = -math.inf
        for child in children:
            value = max(value, minimax(child, depth - 1, stats))
    else:
        value = math.inf
        for child in children:
            value = min(value, minimax(child, depth - 1, stats))

    return value


def alphabeta(
    state: GameState,
    depth: int,
    alpha: float = -math.inf,
    beta: float = math.inf,
    stats: Optional[SearchStats] = None,
) -> float:
    """
    Minimax value of ``state`` with alpha-beta pruning.

    Interior nodes may return a bound instead of the exact value once a
    cutoff happens; the value at the root is exact.
    """
    if stats is not None:
        stats.nodes += 1

    if depth == 0 or state.is_terminal():
        return _evaluate(state, stats)

    children = state.children()
    if not children:
        return _evaluate(state, stats)

    if state.player == Player.MAX:
        value = -math.inf
        for child in children:
            value = max(value, alphabeta(child, depth - 1, alpha, beta, stats))
            alpha = max(alpha, value)
            if beta <= alpha:
                break
    else:
        value = math.inf
        for child in children:
            value = min(value, alphabeta(child, depth - 1, alpha, beta, stats))
            beta = min(beta, value)
            if beta <= alpha:
                break

    return value


def _improves(value: float, best: float, maximizing: bool) -> bool:
    return value > best if maximizing else value < best


def search_minimax(root: GameState, depth: int) -> SearchResult:
    """
    Pick the child of ``root`` with the best minimax value for ``root.player``.

    MAX takes the strictly greatest value, MIN the strictly least; the first
    child found wins ties.
    """
    _check_depth(depth)
    stats = SearchStats(nodes=1)

    maximizing = root.player == Player.MAX
    best_value = -math.inf if maximizing else math.inf
    best_move: Optional[Move] = None

    for child in root.children():
        value = minimax(child, depth - 1, stats)
        if _improves(value, best_value, maximizing):
            best_value = value
            best_move = child.last_move

    if best_move is None:
        return SearchResult(move=None, value=None, stats=stats)
    return SearchResult(move=best_move, value=best_value, stats=stats)


def search_alphabeta(root: GameState, depth: int) -> SearchResult:
    """
    Same selection as ``search_minimax``, with pruning below the root.

    Every root child is searched; the best value found so far is carried
    to later siblings as ``alpha`` (or ``beta`` for a MIN root).
    """
    _check_depth(depth)
    stats = SearchStats(nodes=1)

    maximizing = root.player == Player.MAX
    best_value = -math.inf if maximizing else math.inf
    best_move: Optional[Move] = None
    alpha = -math.inf
    beta = math.inf

    for child in root.children():
        value = alphabeta(child, depth - 1, alpha, beta, stats)
        if _improves(value, best_value, maximizing):
            best_value = value
            best_move = child.last_move
        if maximizing:
            alpha = max(alpha, best_value)
        else:
            beta = min(beta, best_value)

    if best_move is None:
        return SearchResult(move=None, value=None, stats=stats)
    return SearchResult(move=best_move, value=best_value, stats=stats)


def apply_minimax(root: GameState, depth: int) -> Optional[Move]:
    return search_minimax(root, depth).move


def apply_alphabeta(root: GameState, depth: int) -> Optional[Move]:
    return search_alphabeta(root, depth).move
