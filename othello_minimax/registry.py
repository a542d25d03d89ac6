"""Central registry of search algorithms."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable

SearchFn = Callable[..., Any]

_SEARCH_REGISTRY: Dict[str, SearchFn] = {}


def register_search(search_id: str, fn: SearchFn) -> None:
    """Register a root search ``fn(root, depth)`` returning a ``SearchResult``."""
    if search_id in _SEARCH_REGISTRY:
        raise ValueError(f"Search id '{search_id}' is already registered.")
    _SEARCH_REGISTRY[search_id] = fn


def get_search(search_id: str) -> SearchFn:
    """Retrieve a registered search function."""
    if search_id not in _SEARCH_REGISTRY:
        raise KeyError(f"Search id '{search_id}' is not registered.")
    return _SEARCH_REGISTRY[search_id]


def list_searches() -> Iterable[str]:
    """Return iterable of registered search identifiers."""
    return tuple(_SEARCH_REGISTRY.keys())
