"""Command-line entry point: play a headless game against the bot."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Sequence

from battleship.game.core.models import Coord, Difficulty, Rule
from battleship.game.core.rules import Game
from battleship.game.infra.config import GameSettings, load_default_env_files, load_settings
from battleship.game.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 400


def build_parser(settings: GameSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="battleship", description="Play a headless game of battleship.")
    parser.add_argument(
        "--rule",
        type=Rule.parse,
        default=settings.rule,
        help="Shots-per-turn rule: Default, Fury or Charge.",
    )
    parser.add_argument(
        "--difficulty",
        type=Difficulty.parse,
        default=settings.difficulty,
        help="Bot difficulty: Easy or Hard.",
    )
    parser.add_argument("--seed", type=int, default=settings.seed, help="Seed for a reproducible game.")
    parser.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS)
    return parser


def choose_user_volley(game: Game, rng: random.Random) -> set[Coord]:
    """Stand in for the human: add random untargeted cells while the rule allows."""
    board = game.player.opponent_board
    candidates = [position.coordinate for position in board.positions_flat() if not position.status.is_resolved]
    rng.shuffle(candidates)
    shots: set[Coord] = set()
    for coord in candidates:
        if not game.is_valid_rule(len(shots)):
            break
        shots.add(coord)
    return shots


def run_autoplay(game: Game, rng: random.Random, max_turns: int = DEFAULT_MAX_TURNS) -> list[str]:
    """Drive a game to completion, returning every turn message."""
    messages: list[str] = []
    for _ in range(max_turns):
        if game.is_won():
            break
        if game.is_user_turn():
            messages.append(game.fire(choose_user_volley(game, rng), bot=False))
        else:
            messages.append(game.bot_fire())
    return messages


def main(argv: Sequence[str] | None = None) -> int:
    """Run a headless game and print the outcome."""
    load_default_env_files()
    setup_logging()
    try:
        return _run(argv)
    finally:
        shutdown_logging()


def _run(argv: Sequence[str] | None) -> int:
    try:
        settings = load_settings()
    except ValueError as exc:
        logger.error("invalid_settings error=%s", exc)
        return 2

    args = build_parser(settings).parse_args(argv)
    rng = random.Random(args.seed)
    game = Game(
        args.rule,
        args.difficulty,
        rng,
        placement_attempts=settings.placement_attempts,
        targeting_attempts=settings.targeting_attempts,
    )
    for message in run_autoplay(game, rng, args.max_turns):
        print(message)

    print("\nYour fleet:")
    print(game.player.player_board)
    print("\nComputer fleet:")
    print(game.computer.player_board)
    logger.info("game_finished winner=%s", game.winner)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
