"""Board representation and segment helpers."""

from __future__ import annotations

import random
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..core.constants import NORMALIZED_DIRECTIONS, Cell, Direction
from ..core.exceptions import OutOfBoundsError
from ..core.models import Clue, Hint
from ..grid.coords import Position
from ..grid.hexagon import Hexagon
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

ClueKey = Tuple[Direction, int]
SegmentCells = List[Tuple[Position, Optional[Cell]]]


class Board:
    """A hexagonal boundary with a sparse mapping of colored positions."""

    def __init__(self, radius: int) -> None:
        self.hexagon = Hexagon.zero(radius)
        self.cells: Dict[Position, Cell] = {}

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_cells(cls, radius: int, cells: Iterable[Tuple[Position, Cell]]) -> Board:
        board = cls(radius)
        for position, cell in cells:
            board.insert(position, cell)
        return board

    @classmethod
    def random(cls, rng: random.Random, radius: int) -> Board:
        """Fill every position with a uniformly chosen color."""

        board = cls(radius)
        for position in board.hexagon:
            board.insert(position, Cell.random(rng))
        LOGGER.debug("Filled %s positions with random colors", len(board))
        return board

    @classmethod
    def random_from_hints(
        cls,
        rng: random.Random,
        radius: int,
        hints: Iterable[Tuple[Position, Hint]],
    ) -> Board:
        """Fill each hinted position with one of the colors its hint allows."""

        board = cls(radius)
        for position, hint in hints:
            cell = hint.random(rng)
            if cell is None:
                raise ValueError(f"Hint for {position} allows no color")
            board.insert(position, cell)
        return board

    def copy(self) -> Board:
        clone = Board(self.hexagon.radius)
        clone.cells = dict(self.cells)
        return clone

    # ------------------------------------------------------------------
    # Cell manipulation
    # ------------------------------------------------------------------
    def insert(self, position: Position, cell: Cell) -> None:
        if not self.hexagon.contains(position):
            raise OutOfBoundsError(f"{position} lies outside a board of radius {self.radius}")
        self.cells[position] = cell

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def radius(self) -> int:
        return self.hexagon.radius

    def get(self, position: Position) -> Optional[Cell]:
        return self.cells.get(position)

    def __contains__(self, position: object) -> bool:
        return position in self.cells

    def __len__(self) -> int:
        return len(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.radius == other.radius and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board(radius={self.radius}, cells={len(self.cells)})"

    def is_solved(self) -> bool:
        return all(position in self.cells for position in self.hexagon)

    def unsolved(self) -> List[Position]:
        return [position for position in self.hexagon if position not in self.cells]

    def segment(self, distance: int, direction: Direction) -> Optional[SegmentCells]:
        segment = self.hexagon.segment(distance, direction)
        if segment is None:
            return None
        return [(position, self.cells.get(position)) for position in segment]

    def segments(self, direction: Direction) -> Iterator[Tuple[int, SegmentCells]]:
        for distance, segment in self.hexagon.segments(direction):
            yield distance, [(position, self.cells.get(position)) for position in segment]

    def normalized_segments(self) -> Iterator[Tuple[ClueKey, SegmentCells]]:
        for direction in NORMALIZED_DIRECTIONS:
            for distance, cells in self.segments(direction):
                yield (direction, distance), cells

    def clues(self) -> Dict[ClueKey, Clue]:
        """Clue of every canonical segment, counting assigned cells only."""

        return {
            key: Clue.from_cells(cell for _, cell in cells if cell is not None)
            for key, cells in self.normalized_segments()
        }
