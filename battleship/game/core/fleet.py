"""Random ship placement and board construction."""

from __future__ import annotations

import logging
import random

from battleship.game.core.board import Board
from battleship.game.core.models import COLS, ROWS, SHIP_SIZE, Coord
from battleship.game.core.shapes import ROTATIONS, ShipType
from battleship.game.core.ship import Ship

logger = logging.getLogger(__name__)

DEFAULT_PLACEMENT_ATTEMPTS = 10_000


def random_coordinate(rng: random.Random, threshold: int = 0) -> Coord:
    """Return a uniform coordinate in ``[0, ROWS - threshold) x [0, COLS - threshold)``."""
    return Coord(rng.randrange(ROWS - threshold), rng.randrange(COLS - threshold))


def build_board(
    is_self: bool,
    rng: random.Random,
    max_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
) -> Board:
    """Create a self-board with one ship of each type, or an empty tracking board."""
    board = Board()
    if is_self:
        place_initial_ships(board, rng, max_attempts=max_attempts)
    return board


def place_initial_ships(
    board: Board,
    rng: random.Random,
    max_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
) -> list[Ship]:
    """Place one ship per type without overlap and register them on the board."""
    for ship_type in ShipType.initial_ships():
        ship = _place_randomly(board, ship_type, rng, max_attempts)
        if ship is None:
            logger.warning("fleet_random_placement_exhausted ship_type=%s attempts=%d", ship_type, max_attempts)
            ship = _place_by_scan(board, ship_type, rng)
        board.ships.append(ship)
    return board.ships


def _place_randomly(board: Board, ship_type: ShipType, rng: random.Random, max_attempts: int) -> Ship | None:
    for _ in range(max_attempts):
        ship = Ship.create(ship_type, rng)
        top_left = random_coordinate(rng, SHIP_SIZE)
        if ship.is_overlapping(board.positions, top_left):
            continue
        if ship.draw(board.positions, top_left):
            return ship
    return None


def _place_by_scan(board: Board, ship_type: ShipType, rng: random.Random) -> Ship:
    """Last-resort placement trying every anchor and rotation in order."""
    ship = Ship.create(ship_type, rng)
    for rotation in ROTATIONS:
        ship.rotation = rotation
        for row in range(ROWS - SHIP_SIZE):
            for col in range(COLS - SHIP_SIZE):
                top_left = Coord(row, col)
                if not ship.is_overlapping(board.positions, top_left) and ship.draw(board.positions, top_left):
                    return ship
    raise RuntimeError(f"Failed to place ship {ship_type.value} on the board.")
