"""Ship shape templates and rotation transforms.

Shapes are 3x3 numpy boolean matrices where ``True`` marks a live ship cell.
Rotations are expressed as compositions of three mirror operations; the four
supported rotation values map onto the four distinct orientations a square
matrix can reach by quarter turns.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

import numpy as np

ROTATIONS: tuple[int, ...] = (90, 180, 270, 360)


def parse_shape(rows: Sequence[str]) -> np.ndarray:
    """Build an occupancy matrix from text rows (``#`` live, ``.`` space)."""
    return np.array([[char == "#" for char in row] for row in rows], dtype=bool)


def transpose(shape: np.ndarray) -> np.ndarray:
    """Reflect a shape across its main diagonal."""
    if shape.size == 0:
        return shape
    return np.ascontiguousarray(shape.T)


def reverse_cols_of_rows(shape: np.ndarray) -> np.ndarray:
    """Mirror a shape left-right."""
    if shape.size == 0:
        return shape
    return np.ascontiguousarray(shape[:, ::-1])


def reverse_rows_of_cols(shape: np.ndarray) -> np.ndarray:
    """Mirror a shape top-bottom."""
    if shape.size == 0:
        return shape
    return np.ascontiguousarray(shape[::-1, :])


def rotate_shape(shape: np.ndarray, rotation: int) -> np.ndarray:
    """Return the orientation of ``shape`` for a rotation value.

    90 is the template as drawn. Unknown rotation values fall back to it.
    """
    if rotation == 180:
        return reverse_cols_of_rows(transpose(shape))
    if rotation == 270:
        return reverse_rows_of_cols(reverse_cols_of_rows(shape))
    if rotation == 360:
        return reverse_rows_of_cols(transpose(shape))
    return shape


class ShipType(StrEnum):
    """Fixed 3x3 ship silhouettes, named after the letter they resemble."""

    X = "X"
    V = "V"
    H = "H"
    I = "I"  # noqa: E741

    @property
    def template(self) -> np.ndarray:
        return SHIP_TEMPLATES[self]

    @property
    def size(self) -> int:
        """Number of live cells the ship occupies."""
        return int(np.count_nonzero(self.template))

    def get_shape(self, rotation: int) -> np.ndarray:
        return rotate_shape(self.template, rotation)

    @classmethod
    def initial_ships(cls) -> tuple[ShipType, ...]:
        return INITIAL_SHIPS


SHIP_TEMPLATES: dict[ShipType, np.ndarray] = {
    ShipType.X: parse_shape(("#.#", ".#.", "#.#")),
    ShipType.V: parse_shape(("#.#", "#.#", ".#.")),
    ShipType.H: parse_shape(("#.#", "###", "#.#")),
    ShipType.I: parse_shape((".#.", ".#.", ".#.")),
}

INITIAL_SHIPS: tuple[ShipType, ...] = (ShipType.X, ShipType.V, ShipType.H, ShipType.I)
