"""Value types describing clues and per-position hints."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .constants import CELLS, Cell


@dataclass(frozen=True)
class Clue:
    """Per-color counts along a segment.

    Counts may go negative while computing remaining clues by subtraction.
    """

    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def zero(cls) -> Clue:
        return cls(0, 0, 0)

    @classmethod
    def from_cells(cls, cells: Iterable[Cell]) -> Clue:
        red = green = blue = 0
        for cell in cells:
            if cell == Cell.RED:
                red += 1
            elif cell == Cell.GREEN:
                green += 1
            else:
                blue += 1
        return cls(red, green, blue)

    def __add__(self, other: Clue) -> Clue:
        return Clue(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Clue) -> Clue:
        return Clue(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def cell(self, cell: Cell) -> int:
        if cell == Cell.RED:
            return self.red
        if cell == Cell.GREEN:
            return self.green
        return self.blue

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def count(self) -> int:
        return self.red + self.green + self.blue

    def colors(self) -> int:
        """Number of colors with a non-zero count."""

        return sum(1 for value in self.as_tuple() if value > 0)

    def is_empty(self) -> bool:
        return self.red == 0 and self.green == 0 and self.blue == 0

    def is_solved(self) -> bool:
        return self.colors() == 1

    def min_cell(self) -> Optional[Cell]:
        """Color with the lowest non-zero count."""

        present = [cell for cell in CELLS if self.cell(cell) > 0]
        if not present:
            return None
        return min(present, key=self.cell)

    def max_cell(self) -> Optional[Cell]:
        """Color with the highest non-zero count."""

        present = [cell for cell in CELLS if self.cell(cell) > 0]
        if not present:
            return None
        return max(present, key=self.cell)

    def hint(self) -> Hint:
        return Hint(self.red > 0, self.green > 0, self.blue > 0)


@dataclass(frozen=True)
class Hint:
    """Which colors remain possible for a single position."""

    red: bool = True
    green: bool = True
    blue: bool = True

    @classmethod
    def any(cls) -> Hint:
        return cls(True, True, True)

    @classmethod
    def none(cls) -> Hint:
        return cls(False, False, False)

    @classmethod
    def only(cls, cell: Cell) -> Hint:
        return cls(cell == Cell.RED, cell == Cell.GREEN, cell == Cell.BLUE)

    def __and__(self, other: Hint) -> Hint:
        return Hint(
            self.red and other.red,
            self.green and other.green,
            self.blue and other.blue,
        )

    def cell(self, cell: Cell) -> bool:
        if cell == Cell.RED:
            return self.red
        if cell == Cell.GREEN:
            return self.green
        return self.blue

    def allowed(self) -> Tuple[Cell, ...]:
        return tuple(cell for cell in CELLS if self.cell(cell))

    def solution(self) -> Optional[Cell]:
        allowed = self.allowed()
        if len(allowed) == 1:
            return allowed[0]
        return None

    def clue(self) -> Clue:
        return Clue(int(self.red), int(self.green), int(self.blue))

    def random(self, rng: random.Random) -> Optional[Cell]:
        allowed = self.allowed()
        if not allowed:
            return None
        return rng.choice(allowed)
