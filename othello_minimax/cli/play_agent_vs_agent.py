"""CLI for watching two search agents play each other."""

from __future__ import annotations

from typing import Literal, Optional

import tyro

from othello_minimax.envs.othello import BLACK, Board
from othello_minimax.search import MinimaxConfig, MinimaxPolicy
from othello_minimax.utils import play_game, setup_logging


def play_agent_vs_agent(
    black_algorithm: Literal["minimax", "alphabeta"] = "alphabeta",
    black_depth: int = 4,
    white_algorithm: Literal["minimax", "alphabeta"] = "alphabeta",
    white_depth: int = 4,
    render: bool = True,
    log_level: Optional[str] = None,
):
    """
    Play agent vs agent.

    Args:
        black_algorithm: Search used by Black (MAX).
        black_depth: Search depth for Black.
        white_algorithm: Search used by White (MIN), who moves first.
        white_depth: Search depth for White.
        render: Whether to print the board after every ply.
        log_level: Logging level (DEBUG, INFO, WARNING, ...).
    """
    setup_logging(log_level)

    black = MinimaxPolicy(MinimaxConfig(algorithm=black_algorithm, depth=black_depth))
    white = MinimaxPolicy(MinimaxConfig(algorithm=white_algorithm, depth=white_depth))

    def show(board: Board, move: str) -> None:
        if render:
            mover = "White" if board.turn == BLACK else "Black"
            print(f"{mover}: {move}")
            print(board.render())
            print()

    record = play_game(black, white, on_move=show)

    print(f"Moves: {' '.join(record.moves)}")
    print(f"Black: {record.black_count}, White: {record.white_count}")
    if record.winner == BLACK:
        print("Black wins!")
    elif record.winner == 0:
        print("Draw!")
    else:
        print("White wins!")


def main() -> None:
    tyro.cli(play_agent_vs_agent)


if __name__ == "__main__":
    main()
