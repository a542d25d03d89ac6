"""Utility modules."""

from .log_setup import setup_logging
from .match import GameRecord, play_game

__all__ = ["GameRecord", "play_game", "setup_logging"]
