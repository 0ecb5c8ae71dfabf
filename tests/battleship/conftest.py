from __future__ import annotations

import random

import pytest

from battleship.game.core.board import Board
from battleship.game.core.models import Coord
from battleship.game.core.shapes import ShipType
from battleship.game.core.ship import Ship


def place_ship(board: Board, ship_id: str, ship_type: ShipType, top_left: Coord, rotation: int = 90) -> Ship:
    ship = Ship(id=ship_id, ship_type=ship_type, rotation=rotation)
    assert ship.draw(board.positions, top_left)
    board.ships.append(ship)
    return ship


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def two_ship_board() -> Board:
    """I ship down column 1 from (0, 0) and H ship anchored at (5, 5)."""
    board = Board()
    place_ship(board, "ship-i", ShipType.I, Coord(0, 0))
    place_ship(board, "ship-h", ShipType.H, Coord(5, 5))
    return board
