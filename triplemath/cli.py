"""Terminal front end: register a player and play with typed commands."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable, TextIO

from .game import Game
from .scores import ScoreEntry, normalize_username

_LEFT = {"a", "left"}
_RIGHT = {"d", "right"}
_STEP = {"s", "step"}
_DROP = {"x", "drop"}
_QUIT = {"q", "quit"}


def run_session(game: Game, commands: Iterable[str], output: TextIO) -> int:
    """Apply commands to the game, writing the board after each; return the score."""
    output.write(game.render() + "\n")
    for raw in commands:
        command = raw.strip().lower()
        if not command:
            continue
        if command in _QUIT:
            break
        if command in _LEFT:
            game.move(-1)
        elif command in _RIGHT:
            game.move(1)
        elif command in _STEP:
            game.step()
        elif command in _DROP:
            game.hard_drop()
        else:
            output.write(f"Unknown command: {raw.strip()}\n")
            continue
        output.write(game.render() + "\n")
        if game.current is None:
            output.write("Game over\n")
            break
    return game.score


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="triplemath",
        description="Stack and merge numbered figures. Commands: a/d move, "
        "s step, x drop, q quit.",
    )
    parser.add_argument("--name", required=True, help="player name")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    try:
        name = normalize_username(args.name)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    game = Game(random.Random(args.seed))
    score = run_session(game, sys.stdin, sys.stdout)
    entry = ScoreEntry(name, score)
    print(f"{entry.name}: {entry.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())