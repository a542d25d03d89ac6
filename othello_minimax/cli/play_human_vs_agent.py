"""CLI for playing Othello against the search engine."""

from __future__ import annotations

from typing import Callable, Literal, Optional

import tyro

from othello_minimax.config import PlayConfig, SearchConfig, load_config
from othello_minimax.envs.othello import BLACK, WHITE, Board, Command, InvalidCommandError, parse_command
from othello_minimax.envs.othello.command import EXIT_TOKEN
from othello_minimax.search import MinimaxConfig, MinimaxPolicy
from othello_minimax.utils import setup_logging

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

_NAMES = {WHITE: "White", BLACK: "Black"}


def _read_human_move(board: Board, input_fn: InputFn, output_fn: OutputFn) -> Optional[Command]:
    """Prompt until the human enters a legal move; ``None`` means quit."""
    while True:
        try:
            text = input_fn("Your move: ")
        except EOFError:
            return None

        try:
            command = parse_command(text)
        except InvalidCommandError as exc:
            output_fn(f"Invalid input: {exc}")
            continue

        if not command.is_move:
            return None
        if not board.is_valid(command):
            legal = ", ".join(str(c) for c in board.actions())
            output_fn(f"Illegal move {command}. Legal moves: {legal}")
            continue
        return command


def run_session(
    config: PlayConfig,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    board: Optional[Board] = None,
) -> Board:
    """
    Play one game on the console and return the final board.

    The game ends when both sides have to pass in a row or the human quits.
    """
    board = board if board is not None else Board()
    human = WHITE if config.human_color == "white" else BLACK
    policy = MinimaxPolicy(MinimaxConfig(algorithm=config.search.algorithm, depth=config.search.depth))

    output_fn("=" * 50)
    output_fn("Othello - Human vs Agent")
    output_fn("=" * 50)
    output_fn(f"Search: {config.search.algorithm}, depth {config.search.depth}")
    output_fn(f"You play {_NAMES[human]} ('{EXIT_TOKEN}' quits)")
    output_fn("")

    consecutive_passes = 0
    while consecutive_passes < 2:
        output_fn(board.render())

        if not board.actions():
            output_fn(f"{_NAMES[board.turn]} cannot move.")
            board.pass_turn()
            consecutive_passes += 1
            continue
        consecutive_passes = 0

        if board.turn == human:
            command = _read_human_move(board, input_fn, output_fn)
            if command is None:
                break
        else:
            output_fn("Agent's turn...")
            command = policy.select_move(board)
            output_fn(f"Agent plays {command}")

        board.move(command)
        output_fn("")

    output_fn(f"Result: white = {board.count(WHITE)}, black = {board.count(BLACK)}")
    return board


def play_human_vs_agent(
    config_path: Optional[str] = None,
    algorithm: Optional[Literal["minimax", "alphabeta"]] = None,
    depth: Optional[int] = None,
    human_color: Optional[Literal["white", "black"]] = None,
    log_level: Optional[str] = None,
):
    """
    Play a game of Othello against the agent.

    Args:
        config_path: Optional YAML config; command-line flags override it.
        algorithm: Search algorithm ('minimax' or 'alphabeta').
        depth: Search depth in plies.
        human_color: Color played by the human; White moves first.
        log_level: Logging level (DEBUG, INFO, WARNING, ...).
    """
    config = load_config(config_path) if config_path is not None else PlayConfig()

    search = config.search
    if algorithm is not None or depth is not None:
        search = SearchConfig(
            algorithm=algorithm or search.algorithm,
            depth=depth if depth is not None else search.depth,
        )
    config = PlayConfig(
        search=search,
        human_color=human_color or config.human_color,
        log_level=log_level or config.log_level,
    )

    setup_logging(config.log_level)
    run_session(config)


def main() -> None:
    tyro.cli(play_human_vs_agent)


if __name__ == "__main__":
    main()
