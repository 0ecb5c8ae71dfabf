"""Map difficulty levels onto targeting strategies."""

from __future__ import annotations

import random

from battleship.game.ai.hit_neighbor import HitNeighborTargeting
from battleship.game.ai.random_target import RandomTargeting
from battleship.game.ai.strategy import TargetingStrategy
from battleship.game.core.models import Difficulty


def build_targeting_strategy(difficulty: Difficulty, rng: random.Random) -> TargetingStrategy:
    """Construct the bot targeting strategy for a difficulty."""
    if difficulty is Difficulty.EASY:
        return RandomTargeting(rng)
    if difficulty is Difficulty.HARD:
        return HitNeighborTargeting(rng)
    raise ValueError(f"Unsupported difficulty: {difficulty!r}")
