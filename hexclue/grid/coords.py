"""Axial hex coordinates with a derived third cube coordinate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.constants import Axis, Direction
from ..core.exceptions import InvalidCoordinatesError


@dataclass(frozen=True)
class Position:
    """A hex position stored as ``(x, y)``; ``z`` is always ``-x - y``."""

    x: int
    y: int

    @classmethod
    def zero(cls) -> Position:
        return cls(0, 0)

    @classmethod
    def from_coordinates(cls, coordinates: Tuple[int, int, int]) -> Position:
        x, y, z = coordinates
        if x + y + z != 0:
            raise InvalidCoordinatesError(f"Coordinates do not sum to zero: {coordinates}")
        return cls(x, y)

    @classmethod
    def unit(cls, direction: Direction) -> Position:
        dx, dy = direction.step
        return cls(dx, dy)

    @property
    def z(self) -> int:
        return -self.x - self.y

    def coordinates(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def axis(self, axis: Axis) -> int:
        if axis == Axis.X:
            return self.x
        if axis == Axis.Y:
            return self.y
        return self.z

    def distance(self) -> int:
        """Hex distance from the zero position."""

        return max(abs(self.x), abs(self.y), abs(self.z))

    def step(self, direction: Direction, distance: int = 1) -> Position:
        return self + Position.unit(direction) * distance

    def __add__(self, other: Position) -> Position:
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        return Position(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Position:
        return Position(-self.x, -self.y)

    def __mul__(self, factor: int) -> Position:
        return Position(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"Position{self.coordinates()}"
