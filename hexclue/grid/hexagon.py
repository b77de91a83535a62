"""Rings and filled hexagonal regions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from ..core.constants import Direction
from ..core.exceptions import InsufficientRadiusError
from .coords import Position
from .line import Line, Segment


@dataclass(frozen=True)
class Ring:
    """Positions at exactly ``radius`` steps from ``origin``."""

    origin: Position
    radius: int

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise InsufficientRadiusError(f"Ring radius must be positive: {self.radius}")

    @classmethod
    def zero(cls, radius: int) -> Ring:
        return cls(Position.zero(), radius)

    def corner(self, direction: Direction) -> Position:
        return self.origin.step(direction, self.radius)

    def segment(self, direction: Direction) -> Segment:
        """Side running from this direction's corner towards the next one.

        The next corner is not part of the side.
        """

        return Segment.from_origin(
            self.corner(direction), self.radius, direction.rotate().rotate()
        )

    def __iter__(self) -> Iterator[Position]:
        corner = Direction.XY
        for _ in range(6):
            yield from self.segment(corner)
            corner = corner.rotate()

    def __len__(self) -> int:
        return 6 * self.radius


@dataclass(frozen=True)
class Hexagon:
    """Every position within ``radius`` steps of ``origin``."""

    origin: Position
    radius: int

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise InsufficientRadiusError(f"Hexagon radius must be positive: {self.radius}")

    @classmethod
    def zero(cls, radius: int) -> Hexagon:
        return cls(Position.zero(), radius)

    def ring(self, radius: int) -> Optional[Ring]:
        if radius <= 0 or radius > self.radius:
            return None
        return Ring(self.origin, radius)

    def contains(self, position: Position) -> bool:
        return (position - self.origin).distance() <= self.radius

    __contains__ = contains

    def segment(self, distance: int, direction: Direction) -> Optional[Segment]:
        """Chord parallel to ``direction`` offset ``distance`` from the centre line."""

        if abs(distance) > self.radius:
            return None
        anchor = self.origin.step(direction.rotate(), distance)
        start = anchor
        for position in Line(anchor, direction).backward():
            if not self.contains(position):
                break
            start = position
        length = self.radius * 2 - abs(distance) + 1
        return Segment.from_origin(start, length, direction)

    def segments(self, direction: Direction) -> Iterator[Tuple[int, Segment]]:
        for distance in range(-self.radius, self.radius + 1):
            segment = self.segment(distance, direction)
            assert segment is not None
            yield distance, segment

    def __iter__(self) -> Iterator[Position]:
        yield self.origin
        for radius in range(1, self.radius + 1):
            yield from Ring(self.origin, radius)

    def __len__(self) -> int:
        return 1 + 3 * self.radius * (self.radius + 1)
