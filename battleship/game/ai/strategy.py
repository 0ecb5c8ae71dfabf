"""Bot targeting strategy interface and coordinate-set sampling."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Sequence

from battleship.game.core.board import Board
from battleship.game.core.models import Coord, Status, all_coords

logger = logging.getLogger(__name__)

DEFAULT_TARGETING_ATTEMPTS = 10_000


class TargetingStrategy(ABC):
    """Produces candidate coordinates for the bot's next volley."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    @abstractmethod
    def choose_candidate(self, previous_hits: Sequence[Coord]) -> Coord:
        """Return one candidate coordinate; it may repeat or be already resolved."""

    def generate(
        self,
        tracking_board: Board,
        number_of_shots: int,
        max_attempts: int = DEFAULT_TARGETING_ATTEMPTS,
    ) -> set[Coord]:
        """Sample distinct coordinates not yet resolved on ``tracking_board``.

        Candidates that repeat or land on an already resolved cell are
        rejected. Once ``max_attempts`` candidates were drawn the set is
        topped up from the remaining untargeted cells; if fewer cells remain
        than requested, all of them are returned.
        """
        resolved = {
            position.coordinate for position in tracking_board.positions_flat() if position.status.is_resolved
        }
        previous_hits = [
            position.coordinate for position in tracking_board.positions_flat() if position.status is Status.HIT
        ]

        shots: set[Coord] = set()
        attempts = 0
        while len(shots) < number_of_shots and attempts < max_attempts:
            attempts += 1
            shot = self.choose_candidate(previous_hits)
            if shot not in resolved:
                shots.add(shot)

        if len(shots) < number_of_shots:
            remaining = [coord for coord in all_coords() if coord not in resolved and coord not in shots]
            needed = min(number_of_shots - len(shots), len(remaining))
            logger.warning(
                "targeting_attempts_exhausted attempts=%d sampled=%d topped_up=%d",
                attempts,
                len(shots),
                needed,
            )
            shots.update(self._rng.sample(remaining, needed))
        return shots
