"""Game implementations of the ``GameState`` contract."""

from .othello import Board

__all__ = ["Board"]
