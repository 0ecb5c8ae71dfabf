import random
from collections import Counter

import pytest

from battleship.game.core.board import Board
from battleship.game.core.fleet import build_board, place_initial_ships, random_coordinate
from battleship.game.core.models import COLS, ROWS, SHIP_SIZE, Status
from battleship.game.core.shapes import ShipType


def _assert_fleet_without_overlap(board: Board) -> None:
    assert [ship.ship_type for ship in board.ships] == list(ShipType.initial_ships())
    for ship in board.ships:
        assert len(board.pos_by_ship(ship.id)) == ship.ship_type.size
    owners = Counter(position.ship_id for position in board.positions_flat() if position.ship_id)
    assert sum(owners.values()) == 5 + 5 + 7 + 3
    live = [position for position in board.positions_flat() if position.status is Status.LIVE]
    assert len(live) == 20


def test_random_coordinate_respects_threshold(seeded_rng) -> None:
    for _ in range(200):
        coord = random_coordinate(seeded_rng, SHIP_SIZE)
        assert 0 <= coord.row < ROWS - SHIP_SIZE
        assert 0 <= coord.col < COLS - SHIP_SIZE
        assert random_coordinate(seeded_rng).in_bounds()


def test_build_self_board_places_four_ships_without_overlap(seeded_rng) -> None:
    board = build_board(True, seeded_rng)
    assert len(board.ships) == 4
    assert len(board.positions) == ROWS
    _assert_fleet_without_overlap(board)


@pytest.mark.parametrize("seed", range(10))
def test_build_self_board_is_valid_for_many_seeds(seed: int) -> None:
    _assert_fleet_without_overlap(build_board(True, random.Random(seed)))


def test_build_tracking_board_has_no_ships(seeded_rng) -> None:
    board = build_board(False, seeded_rng)
    assert board.ships == []
    assert all(position.status is Status.SPACE for position in board.positions_flat())


def test_exhausted_random_placement_falls_back_to_scan(seeded_rng) -> None:
    board = Board()
    place_initial_ships(board, seeded_rng, max_attempts=0)
    _assert_fleet_without_overlap(board)


def test_placement_raises_when_board_is_full(seeded_rng) -> None:
    board = Board()
    for position in board.positions_flat():
        position.status = Status.LIVE
    with pytest.raises(RuntimeError):
        place_initial_ships(board, seeded_rng, max_attempts=5)
