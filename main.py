#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--rows R] [--cols C] [--mines M] [--seed S]
    python main.py autoplay [--games N] [--guess-rate P] [--watch]
"""
import argparse
import logging
import sys
import time
from typing import Any, Dict

from minefield import BoardConfig, MinesweeperEnv, render_board
from minefield.console import ConsoleGame
from agents import RandomAgent
from evaluation import Evaluator


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Build the board configuration from command line options."""
    return BoardConfig(rows=args.rows, cols=args.cols, num_mines=args.mines)


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    game = ConsoleGame(build_config(args), seed=args.seed)
    game.run(sys.stdin)


def make_watcher(delay: float):
    """Build a step callback that prints the board after every action."""
    def watch(env: MinesweeperEnv, action: int, info: Dict[str, Any]) -> None:
        cells = env.config.total_cells
        kind = "uncover" if action < cells else "guess"
        row, col = divmod(action % cells, env.config.cols)
        print(f"\n{kind} ({row}, {col}) | mines left: {info['mines_left']}")
        print(render_board(env.board, show_coordinates=True))
        if info["game_state"] != "PLAYING":
            print(f"*** {info['game_state']} ***")
        time.sleep(delay)

    return watch


def autoplay(args: argparse.Namespace) -> None:
    """Play random games and report how they went."""
    config = build_config(args)
    agent = RandomAgent(
        config.rows, config.cols, seed=args.seed, guess_rate=args.guess_rate
    )
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)
    on_step = make_watcher(args.delay) if args.watch else None

    print(f"Playing {args.games} random games on "
          f"{config.rows}x{config.cols} with {config.num_mines} mines...")
    results = evaluator.evaluate(agent, on_step=on_step)

    print("Results for Random:")
    print(f"  Won / lost / capped: {results['win_rate']:.1%} / "
          f"{results['loss_rate']:.1%} / {results['capped_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg safe cells opened: {results['avg_revealed']:.1f} "
          f"({results['avg_cleared']:.1%} of the board)")


def add_board_options(parser: argparse.ArgumentParser) -> None:
    """Add the board size options shared by every command."""
    parser.add_argument("--rows", type=int, default=9, help="Number of rows")
    parser.add_argument("--cols", type=int, default=9, help="Number of columns")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Play Minesweeper in the terminal"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play an interactive game")
    add_board_options(play_parser)

    autoplay_parser = subparsers.add_parser(
        "autoplay", help="Play random games and report the win rate"
    )
    add_board_options(autoplay_parser)
    autoplay_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    autoplay_parser.add_argument(
        "--guess-rate", type=float, default=0.0,
        help="Chance of a random guess instead of an uncover",
    )
    autoplay_parser.add_argument(
        "--watch", action="store_true", help="Print the board after every move"
    )
    autoplay_parser.add_argument(
        "--delay", type=float, default=0.3, help="Seconds between watched moves"
    )

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level)

    try:
        if args.command == "play":
            play(args)
        elif args.command == "autoplay":
            autoplay(args)
        else:
            parser.print_help()
    except ValueError as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
