"""Tests for the Othello state model."""

import numpy as np
import pytest

from othello_minimax.games import Player
from othello_minimax.envs.othello import (
    BLACK,
    EMPTY,
    WHITE,
    Board,
    Command,
    POSITION_WEIGHTS,
    count_pieces,
)
from othello_minimax.envs.othello.utils import get_flips, is_valid_move


def _empty_cells():
    return np.zeros((8, 8), dtype=np.int8)


def test_initial_position():
    board = Board()

    assert board.get_value(3, 3) == BLACK  # d4
    assert board.get_value(4, 3) == WHITE  # e4
    assert board.get_value(3, 4) == WHITE  # d5
    assert board.get_value(4, 4) == BLACK  # e5
    assert board.count(BLACK) == 2
    assert board.count(WHITE) == 2
    assert board.count(EMPTY) == 60
    assert board.turn == WHITE
    assert board.player == Player.MIN
    assert board.last_move is None


def test_initial_legal_moves_in_row_major_order():
    board = Board()

    assert [str(c) for c in board.actions()] == ["d3", "c4", "f5", "e6"]
    assert not board.is_terminal()


def test_each_opening_move_flips_one_disc():
    board = Board()

    for child in board.children():
        assert child.count(WHITE) == 4
        assert child.count(BLACK) == 1
        assert child.turn == BLACK
        assert child.player == Player.MAX


def test_children_carry_their_move():
    board = Board()

    assert [child.last_move for child in board.children()] == board.actions()


def test_initial_heuristic_is_zero():
    assert Board().heuristic() == 0


def test_heuristic_uses_weight_table():
    cells = _empty_cells()
    cells[0, 0] = BLACK  # a1, weight 8
    cells[2, 2] = BLACK  # c3, weight 1
    cells[7, 7] = WHITE  # h8, weight 8
    cells[0, 2] = WHITE  # c1, weight 5
    board = Board.from_array(cells, BLACK)

    assert board.heuristic() == 8 + 1 - 8 - 5


def test_weight_table_is_constant():
    assert POSITION_WEIGHTS.shape == (8, 8)
    assert (POSITION_WEIGHTS >= 0).all()
    assert np.array_equal(POSITION_WEIGHTS, POSITION_WEIGHTS.T)
    with pytest.raises(ValueError):
        POSITION_WEIGHTS[0, 0] = 100


def test_result_does_not_modify_parent():
    board = Board()
    before = board.cells.copy()

    child = board.result(Command.at(3, 2))  # d3

    assert np.array_equal(board.cells, before)
    assert board.turn == WHITE
    assert child.get_value(3, 2) == WHITE
    assert child.get_value(3, 3) == WHITE  # d4 flipped
    assert child.last_move == Command.at(3, 2)


def test_disc_count_grows_by_one_per_move():
    rng = np.random.default_rng(7)
    board = Board()

    for _ in range(30):
        actions = board.actions()
        if not actions:
            board.pass_turn()
            if not board.actions():
                break
            continue
        total = board.count(BLACK) + board.count(WHITE)
        board = board.result(actions[int(rng.integers(len(actions)))])
        assert board.count(BLACK) + board.count(WHITE) == total + 1


def test_get_flips_and_move():
    cells = _empty_cells()
    # White on a1, Black on b1, b2 and c2.
    cells[0, 0] = WHITE
    cells[0, 1] = BLACK
    cells[1, 1] = BLACK
    cells[1, 2] = BLACK
    board = Board.from_array(cells, WHITE)

    flips = get_flips(board.cells, 2, 2, WHITE)  # c3 closes b2 against a1
    assert flips == [(1, 1)]

    board.move(Command.at(2, 0))  # c1 closes b1 against a1
    assert board.get_value(1, 0) == WHITE
    assert board.get_value(2, 0) == WHITE
    assert board.turn == BLACK


def test_flips_every_sandwiching_direction():
    cells = _empty_cells()
    cells[3, 3] = BLACK
    cells[3, 5] = BLACK
    cells[4, 3] = BLACK
    cells[3, 2] = WHITE
    cells[3, 6] = WHITE
    cells[5, 2] = WHITE
    board = Board.from_array(cells, WHITE)

    board.move(Command.at(4, 3))  # e4: west, east and south-west runs

    assert board.count(BLACK) == 0
    assert board.count(WHITE) == 7
    assert board.get_value(3, 4) == WHITE


def test_move_rejects_illegal_and_occupied_cells():
    board = Board()

    with pytest.raises(ValueError):
        board.move(Command.at(0, 0))
    with pytest.raises(ValueError):
        board.move(Command.at(3, 3))
    with pytest.raises(ValueError):
        board.move(Command.exit())
    assert board.count(BLACK) + board.count(WHITE) == 4


def test_is_valid():
    board = Board()

    assert board.is_valid(Command.at(3, 2))
    assert not board.is_valid(Command.at(3, 3))
    assert not board.is_valid(Command.at(0, 0))
    assert not board.is_valid(Command.exit())


def test_run_without_own_disc_is_not_legal():
    cells = _empty_cells()
    cells[0, 1] = BLACK
    cells[0, 2] = BLACK

    assert not is_valid_move(cells, 0, 0, WHITE)
    assert get_flips(cells, 0, 0, WHITE) == []


def test_terminal_when_side_to_move_is_stuck():
    cells = _empty_cells()
    cells[0, 0] = WHITE
    cells[0, 1] = BLACK
    board = Board.from_array(cells, BLACK)

    assert board.is_terminal()
    assert board.children() == []

    board.pass_turn()
    assert board.turn == WHITE
    assert not board.is_terminal()
    assert [str(c) for c in board.actions()] == ["c1"]


def test_copy_is_independent():
    board = Board()
    clone = board.copy()
    clone.move(Command.at(3, 2))

    assert board.count(WHITE) == 2
    assert clone.count(WHITE) == 4


def test_cells_view_is_read_only():
    board = Board()

    with pytest.raises(ValueError):
        board.cells[0, 0] = BLACK


def test_from_array_validation():
    with pytest.raises(ValueError):
        Board.from_array(np.zeros((7, 8)), WHITE)
    with pytest.raises(ValueError):
        Board.from_array(np.full((8, 8), 3), WHITE)
    with pytest.raises(ValueError):
        Board.from_array(_empty_cells(), EMPTY)


def test_count_pieces():
    assert count_pieces(Board().cells) == (2, 2)


def test_render():
    lines = Board().render().splitlines()

    assert lines[0] == "Turn: WHITE (O)"
    assert lines[1] == "  A B C D E F G H"
    assert lines[2] == "8 . . . . . . . ."
    assert lines[6] == "4 . . . * O . . ."
    assert lines[7] == "3 . . . . . . . ."
    assert lines[5] == "5 . . . O * . . ."
