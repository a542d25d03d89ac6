"""Config package exports."""

from .schema import PlayConfig, SearchConfig, load_config

__all__ = [
    "PlayConfig",
    "SearchConfig",
    "load_config",
]
