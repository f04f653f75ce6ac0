#!/usr/bin/env python3
"""
Tetris Engine - Console Play Script

Plays a game in the terminal. Commands are typed as lines on stdin; every
character of a line is one command.

Usage:
    python scripts/play.py
    python scripts/play.py --config config.yaml --seed 7

Commands:
    a / d : Move left / right
    w     : Rotate
    s     : Soft drop
    x     : Hard drop
    p     : Pause / resume
    n     : New game (not while paused)
    q     : Quit
"""
import sys
import argparse
import random
import threading
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rich.console import Console
from rich.live import Live

from tetris_engine.game import TetrisSession, ScoreStore, Command, NO_SCORE
from tetris_engine.runtime import GameDriver, TickTimer
from tetris_engine.utils.config_loader import load_config, configure_logging
from tetris_engine.visualization import TextRenderer


KEY_COMMANDS = {
    "a": Command.MOVE_LEFT,
    "d": Command.MOVE_RIGHT,
    "w": Command.ROTATE_RIGHT,
    "s": Command.SOFT_DROP,
    "x": Command.HARD_DROP,
    "p": Command.TOGGLE_PAUSE,
}


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Tetris Engine - play in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Path to config file (default: config.yaml)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for piece selection"
    )
    parser.add_argument(
        "--auto-restart",
        action="store_true",
        help="Start a new game immediately after game over"
    )

    return parser.parse_args()


def read_input(driver: GameDriver):
    """Post one command per typed character until EOF or 'q'."""
    for line in sys.stdin:
        for char in line.strip().lower():
            if char == "q":
                driver.post_quit()
                return
            if char == "n":
                driver.post_start()
            elif char in KEY_COMMANDS:
                driver.post_command(KEY_COMMANDS[char])
    driver.post_quit()


def main():
    """Main entry point for console play."""
    args = parse_args()
    config = load_config(args.config)
    configure_logging(config.logging)

    store = ScoreStore(config.score.path)
    timer = TickTimer(interval_ms=config.game.max_interval)
    session = TetrisSession(
        config=config.game,
        score_store=store,
        timer=timer,
        rng=random.Random(args.seed),
    )

    console = Console()
    renderer = TextRenderer(show_ghost=config.driver.show_ghost)

    best = store.load()
    print("\n" + "=" * 50)
    print("Tetris - Console Mode")
    print("=" * 50)
    print("Commands (type, then Enter):")
    for key, kind in KEY_COMMANDS.items():
        print(f"  {key}: {session.command_names[kind]}")
    print("  n: New game (not while paused)")
    print("  q: Quit")
    print(f"Best score: {best if best != NO_SCORE else 'none'}")
    print("=" * 50 + "\n")

    def on_game_over(result):
        if result.new_best:
            print(f"\nCongratulations! New best score: {result.score}")
        else:
            print(f"\nGame Over! Score: {result.score} | Best: {result.best_score}")
        if not config.driver.auto_restart and not args.auto_restart:
            print("Press n then Enter for a new game, q to quit")

    with Live(renderer.render(session), console=console, refresh_per_second=20) as live:
        driver = GameDriver(
            session,
            timer=timer,
            renderer=renderer,
            on_frame=live.update,
            on_game_over=on_game_over,
            auto_restart=config.driver.auto_restart or args.auto_restart,
        )

        input_thread = threading.Thread(target=read_input, args=(driver,), daemon=True)
        input_thread.start()

        driver.post_start()
        driver.run(poll_interval=config.driver.poll_interval)

    print(f"\nFinal score: {session.score}")


if __name__ == "__main__":
    main()
