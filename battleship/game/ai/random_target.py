"""Easy bot: uniform random targeting."""

from __future__ import annotations

from collections.abc import Sequence

from battleship.game.ai.strategy import TargetingStrategy
from battleship.game.core.fleet import random_coordinate
from battleship.game.core.models import Coord


class RandomTargeting(TargetingStrategy):
    """Pick every candidate uniformly over the whole grid."""

    def choose_candidate(self, previous_hits: Sequence[Coord]) -> Coord:
        return random_coordinate(self._rng)
