"""Ship identity, orientation and board stamping."""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from battleship.game.core.models import Coord, Status
from battleship.game.core.shapes import ROTATIONS, ShipType

if TYPE_CHECKING:
    from battleship.game.core.board import Position


def new_ship_id(rng: random.Random) -> str:
    """Return a UUID4 string drawn from ``rng`` so seeded games are reproducible."""
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


@dataclass(slots=True)
class Ship:
    """A ship owned by a board; cells refer back to it by ``id``."""

    id: str
    ship_type: ShipType
    rotation: int = 90
    alive: bool = True

    @classmethod
    def create(cls, ship_type: ShipType, rng: random.Random) -> Ship:
        """Create a ship with a fresh id and a uniformly chosen rotation."""
        return cls(id=new_ship_id(rng), ship_type=ship_type, rotation=rng.choice(ROTATIONS))

    def shape(self) -> np.ndarray:
        """Return the occupancy pattern for the current rotation."""
        return self.ship_type.get_shape(self.rotation)

    def live_offsets(self) -> list[tuple[int, int]]:
        """Return ``(row, col)`` offsets of live cells within the footprint."""
        return [(int(row), int(col)) for row, col in np.argwhere(self.shape())]

    def is_overlapping(self, positions: list[list[Position]], top_left: Coord) -> bool:
        """Return whether any live cell would land on an already live board cell."""
        if not positions or not positions[0]:
            return False
        for d_row, d_col in self.live_offsets():
            if positions[top_left.row + d_row][top_left.col + d_col].status is Status.LIVE:
                return True
        return False

    def draw(self, positions: list[list[Position]], top_left: Coord) -> bool:
        """Stamp the ship onto the board and return whether any cell was drawn."""
        if not positions or not positions[0]:
            return False
        drawn = False
        for d_row, d_col in self.live_offsets():
            position = positions[top_left.row + d_row][top_left.col + d_col]
            position.status = Status.LIVE
            position.ship_id = self.id
            drawn = True
        return drawn
