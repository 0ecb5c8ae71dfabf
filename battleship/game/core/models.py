"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import TypeVar

ROWS = 10
COLS = 10
SHIP_SIZE = 3


class Status(Enum):
    """State of a single board cell."""

    LIVE = "LIVE"
    MISS = "MISS"
    HIT = "HIT"
    KILL = "KILL"
    SPACE = "SPACE"

    @property
    def glyph(self) -> str:
        return STATUS_GLYPHS[self]

    @property
    def is_resolved(self) -> bool:
        """Return whether a shot has already landed on a cell with this status."""
        return self in (Status.MISS, Status.HIT, Status.KILL)


STATUS_GLYPHS: dict[Status, str] = {
    Status.LIVE: "🚀",
    Status.MISS: "❌",
    Status.HIT: "💥",
    Status.KILL: "💀",
    Status.SPACE: " ",
}


class Rule(StrEnum):
    """Shots-per-turn policy."""

    DEFAULT = "Default"
    FURY = "Fury"
    CHARGE = "Charge"

    @classmethod
    def parse(cls, text: str) -> Rule:
        """Parse a rule name case-insensitively."""
        return _parse_choice(cls, text)


class Difficulty(StrEnum):
    """Bot targeting strategy."""

    EASY = "Easy"
    HARD = "Hard"

    @classmethod
    def parse(cls, text: str) -> Difficulty:
        """Parse a difficulty name case-insensitively."""
        return _parse_choice(cls, text)


@dataclass(frozen=True, slots=True, order=True)
class Coord:
    """Board coordinate, ordered row-major."""

    row: int
    col: int

    def in_bounds(self) -> bool:
        return 0 <= self.row < ROWS and 0 <= self.col < COLS


FiringResponse = dict[Coord, Status]


def all_coords() -> list[Coord]:
    """Return every board coordinate in row-major order."""
    return [Coord(row, col) for row in range(ROWS) for col in range(COLS)]


E = TypeVar("E", bound=StrEnum)


def _parse_choice(enum_type: type[E], text: str) -> E:
    normalized = text.strip().lower()
    for member in enum_type:
        if member.value.lower() == normalized:
            return member
    choices = ", ".join(member.value for member in enum_type)
    raise ValueError(f"Unknown {enum_type.__name__.lower()} '{text}'. Expected one of: {choices}.")
