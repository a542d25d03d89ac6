"""Utilities for playing games between policies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..envs.othello import BLACK, WHITE, Board
from ..search.action_policy import ActionPolicy

logger = logging.getLogger(__name__)

PASS = "pass"


@dataclass
class GameRecord:
    """Moves played (``"pass"`` for a skipped turn) and the final disc counts."""

    moves: List[str] = field(default_factory=list)
    black_count: int = 0
    white_count: int = 0
    finished: bool = False

    @property
    def winner(self) -> int:
        """``BLACK``, ``WHITE`` or 0 for a draw."""
        if self.black_count > self.white_count:
            return BLACK
        if self.white_count > self.black_count:
            return WHITE
        return 0


def play_game(
    black: ActionPolicy,
    white: ActionPolicy,
    board: Optional[Board] = None,
    max_plies: Optional[int] = None,
    on_move: Optional[Callable[[Board, str], None]] = None,
) -> GameRecord:
    """
    Play one game between two policies.

    Args:
        black: Policy for Black (MAX).
        white: Policy for White (MIN), who moves first from the start position.
        board: Optional starting position; it is copied, not modified.
        max_plies: Stop after this many moves and passes.
        on_move: Called with the board and the move text after every ply.

    Returns:
        ``GameRecord``; ``finished`` is True when both sides had to pass in a row.
    """
    board = board.copy() if board is not None else Board()
    record = GameRecord()
    consecutive_passes = 0

    while consecutive_passes < 2:
        if max_plies is not None and len(record.moves) >= max_plies:
            break

        policy = black if board.turn == BLACK else white
        move = policy.select_move(board)

        if move is None:
            logger.info("%s cannot move, passing", "Black" if board.turn == BLACK else "White")
            board.pass_turn()
            consecutive_passes += 1
            text = PASS
        else:
            board.move(move)
            consecutive_passes = 0
            text = str(move)

        record.moves.append(text)
        if on_move is not None:
            on_move(board, text)

    record.finished = consecutive_passes >= 2
    record.black_count = board.count(BLACK)
    record.white_count = board.count(WHITE)
    return record
