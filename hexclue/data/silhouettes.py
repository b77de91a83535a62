"""Themed color silhouettes for hinted board generation."""

from __future__ import annotations

from typing import Dict, Iterable, Tuple

from ..core.constants import CELLS, Cell
from ..core.models import Hint
from ..engine.generator import HintedBoardGenerator
from ..grid.coords import Position
from ..grid.hexagon import Hexagon

HEART_RADIUS = 5

#        X X X X X X
#       X X X X X X X
#      X R R X X R R X
#     X R R R X R R R X
#    X X R R R R R R X X
#   X X X R R R R R X X X
#    X X X R R R R X X X
#     X X X R R R X X X
#      X X X R R X X X
#       X X X R X X X
#        X X X X X X
HEART_CELLS: Tuple[Tuple[int, int, int], ...] = (
    (1, -4, 3), (0, -3, 3), (-3, 0, 3), (-4, 1, 3),
    (2, -4, 2), (1, -3, 2), (0, -2, 2), (-2, 0, 2), (-3, 1, 2), (-4, 2, 2),
    (2, -3, 1), (1, -2, 1), (0, -1, 1), (-1, 0, 1), (-2, 1, 1), (-3, 2, 1),
    (2, -2, 0), (1, -1, 0), (0, 0, 0), (-1, 1, 0), (-2, 2, 0),
    (2, -1, -1), (1, 0, -1), (0, 1, -1), (-1, 2, -1),
    (2, 0, -2), (1, 1, -2), (0, 2, -2),
    (2, 1, -3), (1, 2, -3),
    (2, 2, -4),
)


def silhouette_hints(
    radius: int,
    shape: Iterable[Position],
    inside: Cell = Cell.RED,
) -> Dict[Position, Hint]:
    """Force ``inside`` on the shape and forbid it everywhere else."""

    hints = {position: Hint.only(inside) for position in shape}
    outside = Hint(*(cell != inside for cell in CELLS))
    for position in Hexagon.zero(radius):
        hints.setdefault(position, outside)
    return hints


def heart_hints() -> Dict[Position, Hint]:
    shape = [Position.from_coordinates(coordinates) for coordinates in HEART_CELLS]
    return silhouette_hints(HEART_RADIUS, shape)


def heart_generator() -> HintedBoardGenerator:
    return HintedBoardGenerator(HEART_RADIUS, heart_hints())
