"""Configuration schema for playing sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

ALGORITHMS = ("minimax", "alphabeta")
COLORS = ("white", "black")


@dataclass
class SearchConfig:
    algorithm: str = "alphabeta"
    depth: int = 8

    def __post_init__(self) -> None:
        if self.algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown search algorithm '{self.algorithm}', expected one of {ALGORITHMS}")
        if self.depth < 1:
            raise ValueError(f"search.depth must be >= 1, got {self.depth}")


@dataclass
class PlayConfig:
    search: SearchConfig = field(default_factory=SearchConfig)
    human_color: str = "white"
    log_level: Optional[str] = None

    def __post_init__(self) -> None:
        if self.human_color not in COLORS:
            raise ValueError(f"human_color must be one of {COLORS}, got '{self.human_color}'")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayConfig":
        search_data = data.get("search", {})
        search = SearchConfig(
            algorithm=str(search_data.get("algorithm", "alphabeta")),
            depth=int(search_data.get("depth", 8)),
        )

        log_level = data.get("log_level")
        if log_level is not None:
            log_level = str(log_level).upper()

        return cls(
            search=search,
            human_color=str(data.get("human_color", "white")).lower(),
            log_level=log_level,
        )


def load_config(path: Union[str, Path]) -> PlayConfig:
    """Load PlayConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return PlayConfig.from_dict(data)
