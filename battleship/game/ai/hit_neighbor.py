"""Hard bot: bias candidates toward cells near previous hits."""

from __future__ import annotations

import random
from collections.abc import Sequence

from battleship.game.ai.strategy import TargetingStrategy
from battleship.game.core.fleet import random_coordinate
from battleship.game.core.models import COLS, ROWS, Coord

POS_ADDITION: tuple[int, ...] = (-2, -1, 0, 1, 2)


class HitNeighborTargeting(TargetingStrategy):
    """Perturb a random previous hit by up to two cells on each axis.

    Falls back to uniform random targeting while there are no hits.
    """

    def choose_candidate(self, previous_hits: Sequence[Coord]) -> Coord:
        if not previous_hits:
            return random_coordinate(self._rng)
        origin = self._rng.choice(previous_hits)
        row = _perturb(origin.row, ROWS, self._rng)
        col = _perturb(origin.col, COLS, self._rng)
        return Coord(row, col)


def _perturb(value: int, limit: int, rng: random.Random) -> int:
    # Out-of-range offsets keep the original axis value instead of wrapping.
    shifted = value + rng.choice(POS_ADDITION)
    if shifted < 0 or shifted >= limit:
        return value
    return shifted
