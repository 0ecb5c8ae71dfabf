"""Player state: own fleet plus a view of the opponent."""

from __future__ import annotations

import random
from dataclasses import dataclass

from battleship.game.core.board import Board
from battleship.game.core.fleet import DEFAULT_PLACEMENT_ATTEMPTS, build_board


@dataclass(slots=True)
class Player:
    """Pairs an authoritative self-board with an opponent-tracking board."""

    player_board: Board
    opponent_board: Board
    is_bot: bool = False

    @classmethod
    def create(
        cls,
        rng: random.Random,
        *,
        is_bot: bool = False,
        placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
    ) -> Player:
        """Create a player with a randomly populated self-board."""
        return cls(
            player_board=build_board(True, rng, max_attempts=placement_attempts),
            opponent_board=build_board(False, rng),
            is_bot=is_bot,
        )
