#!/usr/bin/env python3
"""
Walk through one game on the engine directly.

A random player opens cells. Before every move the board is saved; when
the player steps on a mine the move is undone from the snapshot and the
mine is flagged instead, so the game always ends with a cleared board.
"""
import argparse
import os
import time

from src.minesweeper.engine import GameEngine
from src.minesweeper.players import RandomPlayer
from src.minesweeper.terminal import TerminalView


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def show(view: TerminalView, title: str, delay: float) -> None:
    clear_screen()
    print(f"=== {title} ===\n")
    print(view.render())
    time.sleep(delay)


def peek(engine: GameEngine, view: TerminalView, delay: float) -> None:
    """Flash the cheat view and hide it again."""
    engine.show_cheat(True)
    show(view, "Cheat view", delay * 3)
    engine.show_cheat(False)
    show(view, "Cheat view off", delay)


def demo(size: int = 8, mines: int = 10, seed=None, delay: float = 0.3):
    view = TerminalView(size)
    engine = GameEngine(size, mines, view, seed=seed)
    player = RandomPlayer(seed)

    show(view, f"New {size}x{size} board with {mines} mines", delay)
    peek(engine, view, delay)

    moves = rewinds = 0
    while True:
        mask = (engine.get_observation() == -1).ravel()
        if not mask.any():
            break
        row, col = divmod(player.select_action(mask), size)
        saved = engine.save_instance()
        engine.step(row, col)
        moves += 1

        if not view.mine_hit:
            show(view, f"Move {moves}: opened ({row}, {col})", delay)
            continue

        show(view, f"Move {moves}: BOOM at ({row}, {col})", delay * 2)
        view.clear()
        engine.restore_instance(saved)
        engine.flag(row, col)
        rewinds += 1
        show(view, f"Rewound and flagged ({row}, {col})", delay)

    won = engine.finish_game()
    show(view, "Final board", 0)
    print(f"\n{moves} moves, {rewinds} rewinds: {'WIN' if won else 'LOSS'}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--size", type=int, default=8, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between frames")
    args = parser.parse_args()

    demo(size=args.size, mines=args.mines, seed=args.seed, delay=args.delay)
