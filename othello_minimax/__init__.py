"""Othello against the machine: adversarial search over a game-state contract."""

__version__ = "0.1.0"
