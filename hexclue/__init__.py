"""Generator and solver for three-color hexagonal clue puzzles.

This package exposes the public API surface via:

- ``hexclue.engine.generator.PuzzleGenerator``: orchestrates puzzle generation.
- ``hexclue.engine.solver.Solver``: constraint propagation over segment clues.
- ``hexclue.engine.refiner.Refiner`` and ``hexclue.engine.validator.Validator``:
  rejection sampling against pluggable acceptance strategies.
"""

from .core.constants import Cell, Direction
from .engine.board import Board
from .engine.generator import GeneratorConfig, PuzzleGenerator, generate_good
from .engine.puzzle import Puzzle
from .engine.refiner import Refiner
from .engine.solver import Solver
from .engine.validator import Validator
from .grid.coords import Position

__all__ = [
    "Board",
    "Cell",
    "Direction",
    "GeneratorConfig",
    "Position",
    "Puzzle",
    "PuzzleGenerator",
    "Refiner",
    "Solver",
    "Validator",
    "generate_good",
]

__version__ = "0.1.0"
