"""Tests for playing games between policies."""

from __future__ import annotations

import numpy as np

from othello_minimax.envs.othello import BLACK, WHITE, Board
from othello_minimax.search import MinimaxConfig, MinimaxPolicy
from othello_minimax.utils import GameRecord, play_game


def _stuck_black_position() -> Board:
    cells = np.zeros((8, 8), dtype=np.int8)
    cells[0, 0] = WHITE
    cells[0, 1] = BLACK
    return Board.from_array(cells, BLACK)


def test_full_game_between_shallow_searches():
    black = MinimaxPolicy(MinimaxConfig(algorithm="alphabeta", depth=1))
    white = MinimaxPolicy(MinimaxConfig(algorithm="minimax", depth=1))

    record = play_game(black, white)

    assert record.finished
    assert record.moves[-2:] == ["pass", "pass"]
    placed = [m for m in record.moves if m != "pass"]
    assert record.black_count + record.white_count == 4 + len(placed)
    assert record.black_count + record.white_count <= 64


def test_pass_then_game_over():
    policy = MinimaxPolicy(MinimaxConfig(depth=2))
    board = _stuck_black_position()

    record = play_game(policy, policy, board=board)

    assert record.moves == ["pass", "c1", "pass", "pass"]
    assert record.finished
    assert (record.black_count, record.white_count) == (0, 3)
    assert record.winner == WHITE
    # starting board is copied
    assert board.count(BLACK) == 1


def test_max_plies_and_callback():
    policy = MinimaxPolicy(MinimaxConfig(depth=1))
    seen = []

    record = play_game(policy, policy, max_plies=3, on_move=lambda board, move: seen.append(move))

    assert len(record.moves) == 3
    assert seen == record.moves
    assert not record.finished


def test_winner():
    assert GameRecord(black_count=40, white_count=24).winner == BLACK
    assert GameRecord(black_count=20, white_count=44).winner == WHITE
    assert GameRecord(black_count=32, white_count=32).winner == 0
