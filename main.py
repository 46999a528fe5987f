#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--size N] [--mines M] [--seed S]
    python main.py evaluate [--games N] [--size N] [--mines M]
"""
import argparse
import logging
import sys

from src.minesweeper.console import Console
from src.minesweeper.engine import GameConfig, GameEngine
from src.minesweeper.environment import MinesweeperEnv
from src.minesweeper.errors import MinesweeperError
from src.minesweeper.players import RandomPlayer
from src.minesweeper.terminal import TerminalView


def play(config: GameConfig, args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    view = TerminalView(config.size)
    engine = GameEngine.from_config(config, view, seed=args.seed)
    console = Console(engine, view)

    print(f"Board: {config.size}x{config.size} with {config.num_mines} mines")
    print("Type 'help' for commands, 'quit' to leave.\n")
    print(view.render())

    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            break
        if line.strip().lower() in ("quit", "exit"):
            break
        output = console.execute(line)
        if output:
            print(output)


def evaluate(config: GameConfig, args: argparse.Namespace) -> None:
    """Evaluate the random player and print results."""
    env = MinesweeperEnv(config=config)
    player = RandomPlayer(seed=args.seed)

    print(f"\nEvaluating Random over {args.games} games...")

    wins = 0
    total_steps = 0
    total_revealed = 0
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        obs, info = env.reset(seed=seed)
        done = False
        while not done:
            action = player.select_action(env.get_action_mask(), obs)
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
        if info["game_state"] == "WON":
            wins += 1
        total_steps += info["steps"]
        total_revealed += info["revealed"]

    print("Results for Random:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg steps: {total_steps / args.games:.1f}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} cells")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - Play or evaluate a baseline player"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Shared board options
    board_parser = argparse.ArgumentParser(add_help=False)
    board_parser.add_argument(
        "--size", type=int, default=8, help="Board size (NxN)"
    )
    board_parser.add_argument(
        "--mines", type=int, default=10, help="Number of mines"
    )
    board_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )

    # Play command
    subparsers.add_parser(
        "play", parents=[board_parser], help="Play in the terminal"
    )

    # Evaluate command
    eval_parser = subparsers.add_parser(
        "evaluate", parents=[board_parser], help="Evaluate the random player"
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return

    try:
        config = GameConfig(size=args.size, num_mines=args.mines)
    except MinesweeperError as exc:
        print(f"Invalid board: {exc}", file=sys.stderr)
        sys.exit(2)

    if args.command == "play":
        play(config, args)
    elif args.command == "evaluate":
        evaluate(config, args)


if __name__ == "__main__":
    main()
