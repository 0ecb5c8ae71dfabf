"""Board state representation and fire resolution."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from battleship.game.core.models import COLS, ROWS, Coord, FiringResponse, Status
from battleship.game.core.ship import Ship

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Position:
    """One grid cell."""

    coordinate: Coord
    status: Status = Status.SPACE
    ship_id: str | None = None

    def get_status(self, ship: Ship | None) -> Status:
        """Return the display status, showing every cell of a sunk ship as killed."""
        if ship is not None and not ship.alive:
            return Status.KILL
        return self.status

    def __str__(self) -> str:
        return self.status.glyph


def empty_positions() -> list[list[Position]]:
    """Create a grid of unrevealed empty cells."""
    return [[Position(Coord(row, col)) for col in range(COLS)] for row in range(ROWS)]


@dataclass(slots=True)
class Board:
    """A 10x10 grid plus the ships it owns.

    Self-boards hold their owner's ships. Opponent-tracking boards hold no
    ships and only mirror the responses of fire resolved elsewhere.
    """

    positions: list[list[Position]] = field(default_factory=empty_positions)
    ships: list[Ship] = field(default_factory=list)
    firing_status: dict[str, str] = field(default_factory=dict)

    def position(self, coord: Coord) -> Position:
        return self.positions[coord.row][coord.col]

    def positions_flat(self) -> list[Position]:
        """Return every cell in row-major order."""
        return [position for row in self.positions for position in row]

    def ships_alive(self) -> list[Ship]:
        return [ship for ship in self.ships if ship.alive]

    def find_ship(self, ship_id: str) -> Ship | None:
        """Find an owned ship by id."""
        for ship in self.ships:
            if ship.id == ship_id:
                return ship
        return None

    def pos_by_ship(self, ship_id: str) -> list[Position]:
        return [position for position in self.positions_flat() if position.ship_id == ship_id]

    def alive_pos_by_ship(self, ship_id: str) -> list[Position]:
        return [position for position in self.pos_by_ship(ship_id) if position.status is Status.LIVE]

    def take_fire(self, shots: Iterable[Coord]) -> tuple[FiringResponse, bool]:
        """Resolve incoming shots and return per-cell results plus whether the board is lost.

        Shots are resolved in coordinate order. Sinking a ship reports every
        cell it owns as ``KILL``. Cells already ``HIT`` or ``KILL`` keep their
        stored status and are reported as ``MISS``.
        """
        ordered = sorted(set(shots))
        response: FiringResponse = {}
        for shot in ordered:
            position = self.position(shot)
            current = position.status
            result = Status.MISS
            if current is Status.LIVE:
                result = Status.HIT
                if position.ship_id is not None and len(self.alive_pos_by_ship(position.ship_id)) <= 1:
                    ship = self.find_ship(position.ship_id)
                    if ship is not None:
                        result = Status.KILL
                        ship.alive = False
                        for owned in self.pos_by_ship(ship.id):
                            response[owned.coordinate] = Status.KILL
            if current not in (Status.HIT, Status.KILL):
                position.status = result
            response[shot] = result

        lost = not self.ships_alive()
        logger.debug("board_take_fire shots=%d responses=%d lost=%s", len(ordered), len(response), lost)
        return dict(sorted(response.items())), lost

    def update_status(self, response: FiringResponse, bot: bool) -> str:
        """Mirror a firing response onto this tracking board and summarize it."""
        kill_count = 0
        hit_count = 0
        miss_count = 0
        for coord, status in response.items():
            position = self.position(coord)
            if position.status in (Status.SPACE, Status.LIVE) or status is Status.KILL:
                position.status = status
            if status is Status.MISS:
                miss_count += 1
            elif status is Status.HIT:
                hit_count += 1
            elif status is Status.KILL:
                kill_count += 1

        subject = "Computer" if bot else "You"
        parts = [f"{subject} have "]
        if kill_count > 0:
            parts.append("sunk a ship.")
        else:
            parts.append(f"{hit_count} hit.")
        if miss_count > 0:
            parts.append(f" {subject} missed {miss_count}.")
        message = "".join(parts)

        self.firing_status.update(
            {
                "message": message,
                "hit": str(hit_count),
                "kill": str(kill_count),
                "miss": str(miss_count),
            }
        )
        return message

    def find_position_and_ship(self, coord: Coord) -> tuple[Position, Ship | None]:
        """Return a cell and the ship owning it, if any."""
        position = self.position(coord)
        if position.ship_id is None:
            return position, None
        return position, self.find_ship(position.ship_id)

    def as_grid(self) -> list[str]:
        return ["".join(str(position) for position in row) for row in self.positions]

    def __str__(self) -> str:
        return "\n".join(self.as_grid())
