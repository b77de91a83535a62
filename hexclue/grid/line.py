"""Infinite lines and bounded segments of hex positions."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Iterator, Optional

from ..core.constants import Direction
from ..core.exceptions import InsufficientLengthError
from .coords import Position


@dataclass(frozen=True)
class Line:
    """All positions reachable from ``origin`` by stepping along ``direction``."""

    origin: Position
    direction: Direction

    @classmethod
    def normalized(cls, origin: Position, direction: Direction) -> Line:
        return cls(origin, direction).normalize()

    def position(self, distance: int) -> Position:
        return self.origin.step(self.direction, distance)

    def normalize(self) -> Line:
        """Canonical form of the line.

        The origin is shifted so that its coordinate on the canonical
        direction's positive axis is zero, so two lines covering the same
        positions compare equal regardless of how they were built.
        """

        direction = self.direction.normalize()
        deviation = self.origin.axis(direction.positive_axis)
        return Line(self.origin.step(direction, -deviation), direction)

    def is_equivalent(self, other: Line) -> bool:
        return self.normalize() == other.normalize()

    def __iter__(self) -> Iterator[Position]:
        return (self.position(distance) for distance in itertools.count())

    def backward(self) -> Iterator[Position]:
        """Positions before the origin, nearest first."""

        return (self.position(-distance) for distance in itertools.count(1))


@dataclass(frozen=True)
class Segment:
    """A run of ``length`` positions starting at the line's origin."""

    line: Line
    length: int

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise InsufficientLengthError(f"Segment length must be positive: {self.length}")

    @classmethod
    def from_origin(cls, origin: Position, length: int, direction: Direction) -> Segment:
        return cls(Line(origin, direction), length)

    @property
    def start(self) -> Position:
        return self.line.origin

    @property
    def end(self) -> Position:
        return self.line.position(self.length - 1)

    @property
    def direction(self) -> Direction:
        return self.line.direction

    def position(self, distance: int) -> Optional[Position]:
        if 0 <= distance < self.length:
            return self.line.position(distance)
        return None

    def __iter__(self) -> Iterator[Position]:
        return itertools.islice(iter(self.line), self.length)

    def __len__(self) -> int:
        return self.length

    def __contains__(self, position: object) -> bool:
        return any(candidate == position for candidate in self)
