"""Shared utilities for Othello game logic."""

from __future__ import annotations

from typing import List, Sequence, Tuple, Union

import numpy as np

OTHELLO_SIZE = 8

EMPTY = 0
BLACK = 1
WHITE = -1

# (d_col, d_row): N, NE, E, SE, S, SW, W, NW
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1),
)

BoardLike = Union[np.ndarray, Sequence[Sequence[int]]]


def opposite(color: int) -> int:
    return WHITE if color == BLACK else BLACK


def initial_board(size: int = OTHELLO_SIZE) -> np.ndarray:
    """
    Starting position: Black on d4 and e5, White on e4 and d5.

    Indexed ``[row, column]``, row 0 is the text row "1".
    """
    board = np.zeros((size, size), dtype=np.int8)

    mid = size // 2
    board[mid - 1, mid - 1] = BLACK
    board[mid - 1, mid] = WHITE
    board[mid, mid - 1] = WHITE
    board[mid, mid] = BLACK

    return board


def get_flips(
    board: BoardLike,
    row: int,
    col: int,
    player: int,
    size: int = OTHELLO_SIZE,
) -> List[Tuple[int, int]]:
    """
    Get all discs that would be flipped by placing ``player`` at (row, col).

    Args:
        board: Board indexed ``board[row][col]`` (numpy array or nested lists).
        row: Row position.
        col: Column position.
        player: Player token (``BLACK`` or ``WHITE``).
        size: Board size.

    Returns:
        List of (row, col) positions that would be flipped, empty when the
        move is not legal.
    """
    if board[row][col] != EMPTY:
        return []

    opponent = -player
    flips = []

    for dc, dr in DIRECTIONS:
        run = []
        r, c = row + dr, col + dc

        while 0 <= r < size and 0 <= c < size and board[r][c] == opponent:
            run.append((r, c))
            r += dr
            c += dc

        if run and 0 <= r < size and 0 <= c < size and board[r][c] == player:
            flips.extend(run)

    return flips


def is_valid_move(
    board: BoardLike,
    row: int,
    col: int,
    player: int,
    size: int = OTHELLO_SIZE,
) -> bool:
    """True if at least one direction sandwiches opponent discs."""
    if board[row][col] != EMPTY:
        return False

    opponent = -player
    for dc, dr in DIRECTIONS:
        r, c = row + dr, col + dc
        seen_opponent = False

        while 0 <= r < size and 0 <= c < size and board[r][c] == opponent:
            seen_opponent = True
            r += dr
            c += dc

        if seen_opponent and 0 <= r < size and 0 <= c < size and board[r][c] == player:
            return True

    return False


def count_pieces(board: np.ndarray) -> Tuple[int, int]:
    """
    Count discs for each color.

    Returns:
        Tuple of (black_count, white_count).
    """
    black_count = np.sum(board == BLACK)
    white_count = np.sum(board == WHITE)
    return int(black_count), int(white_count)
