"""Shared constants and enumerations for the hex clue puzzles."""

from __future__ import annotations

import random
from enum import Enum
from typing import Dict, Tuple


class Axis(str, Enum):
    """The three cube axes of a hexagonal grid."""

    X = "X"
    Y = "Y"
    Z = "Z"


class Direction(str, Enum):
    """The six directions of travel between neighbouring hexes.

    A direction is named after the axis it increases followed by the axis it
    decreases, so ``XY`` adds one to ``x`` and removes one from ``y``.
    """

    XY = "XY"
    XZ = "XZ"
    YX = "YX"
    YZ = "YZ"
    ZX = "ZX"
    ZY = "ZY"

    def axes(self) -> Tuple[Axis, Axis, Axis]:
        """Return the (positive, neutral, negative) axes."""

        return DIRECTION_AXES[self]

    @property
    def positive_axis(self) -> Axis:
        return DIRECTION_AXES[self][0]

    @property
    def neutral_axis(self) -> Axis:
        return DIRECTION_AXES[self][1]

    @property
    def negative_axis(self) -> Axis:
        return DIRECTION_AXES[self][2]

    @property
    def step(self) -> Tuple[int, int]:
        return DIRECTION_STEPS[self]

    def opposite(self) -> Direction:
        return OPPOSITE_DIRECTIONS[self]

    def normalize(self) -> Direction:
        """Map a direction onto the canonical member of its line orientation.

        In the cycle ``X -> Y -> Z -> X`` the canonical directions have their
        positive axis immediately before their negative axis.
        """

        if self in NORMALIZED_DIRECTIONS:
            return self
        return self.opposite()

    def is_normalized(self) -> bool:
        return self in NORMALIZED_DIRECTIONS

    def rotate(self) -> Direction:
        """Next direction clockwise."""

        return ROTATIONS[self]

    def rotate_back(self) -> Direction:
        return self.opposite().rotate().rotate()


class Cell(str, Enum):
    """Colors a board position can hold, in tie-breaking order."""

    RED = "RED"
    GREEN = "GREEN"
    BLUE = "BLUE"

    @classmethod
    def random(cls, rng: random.Random) -> Cell:
        return rng.choice(CELLS)

    @property
    def letter(self) -> str:
        return self.value[0]


DIRECTIONS: Tuple[Direction, ...] = (
    Direction.XY,
    Direction.XZ,
    Direction.YX,
    Direction.YZ,
    Direction.ZX,
    Direction.ZY,
)
NORMALIZED_DIRECTIONS: Tuple[Direction, ...] = (Direction.XY, Direction.YZ, Direction.ZX)
CELLS: Tuple[Cell, ...] = (Cell.RED, Cell.GREEN, Cell.BLUE)

DIRECTION_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.XY: (1, -1),
    Direction.XZ: (1, 0),
    Direction.YX: (-1, 1),
    Direction.YZ: (0, 1),
    Direction.ZX: (-1, 0),
    Direction.ZY: (0, -1),
}

DIRECTION_AXES: Dict[Direction, Tuple[Axis, Axis, Axis]] = {
    Direction.XY: (Axis.X, Axis.Z, Axis.Y),
    Direction.XZ: (Axis.X, Axis.Y, Axis.Z),
    Direction.YX: (Axis.Y, Axis.Z, Axis.X),
    Direction.YZ: (Axis.Y, Axis.X, Axis.Z),
    Direction.ZX: (Axis.Z, Axis.Y, Axis.X),
    Direction.ZY: (Axis.Z, Axis.X, Axis.Y),
}

OPPOSITE_DIRECTIONS: Dict[Direction, Direction] = {
    Direction.XY: Direction.YX,
    Direction.XZ: Direction.ZX,
    Direction.YX: Direction.XY,
    Direction.YZ: Direction.ZY,
    Direction.ZX: Direction.XZ,
    Direction.ZY: Direction.YZ,
}

# Clockwise cycle: XY -> XZ -> YZ -> YX -> ZX -> ZY -> XY
ROTATIONS: Dict[Direction, Direction] = {
    Direction.XY: Direction.XZ,
    Direction.XZ: Direction.YZ,
    Direction.YZ: Direction.YX,
    Direction.YX: Direction.ZX,
    Direction.ZX: Direction.ZY,
    Direction.ZY: Direction.XY,
}

SOLVE_HINTS_COST = 1
SOLVE_CLUES_COST = 3
