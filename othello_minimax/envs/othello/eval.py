"""Positional evaluation for Othello boards."""

from __future__ import annotations

import numpy as np

from .utils import BLACK, WHITE

# Corners and edges are worth the most, squares next to corners nothing.
POSITION_WEIGHTS = np.array([
    [8, 0, 5, 4, 4, 5, 0, 8],
    [0, 0, 0, 0, 0, 0, 0, 0],
    [5, 0, 1, 1, 1, 1, 0, 5],
    [4, 0, 1, 1, 1, 1, 0, 4],
    [4, 0, 1, 1, 1, 1, 0, 4],
    [5, 0, 1, 1, 1, 1, 0, 5],
    [0, 0, 0, 0, 0, 0, 0, 0],
    [8, 0, 5, 4, 4, 5, 0, 8],
], dtype=np.int32)
POSITION_WEIGHTS.flags.writeable = False


def positional_score(board: np.ndarray) -> int:
    """
    Weighted disc difference from Black's (MAX) point of view.

    Black discs add their cell weight, White discs subtract it.
    """
    black = int(POSITION_WEIGHTS[board == BLACK].sum())
    white = int(POSITION_WEIGHTS[board == WHITE].sum())
    return black - white
