"""Constraint-propagation solver for hex clue puzzles.

Two deduction rules are alternated until neither commits a cell:

- hint solving: intersect, per position, the colors still needed by every
  segment through it; a single surviving color is committed.
- clue solving: when the number of unsolved positions on a segment that could
  still hold a color equals the remaining count for that color, all of them
  hold it.

The solver never guesses or backtracks, so it can stall on puzzles that need
search. Stalling is reported through the return value, not an exception.
"""

from __future__ import annotations

from typing import Dict

from ..core.constants import CELLS, Cell
from ..core.models import Clue, Hint
from ..grid.coords import Position
from ..utils.logger import get_logger
from .board import Board, ClueKey
from .puzzle import Puzzle


LOGGER = get_logger(__name__)


class Solver:
    """Grows a solution board from a puzzle's clues and revealed cells."""

    def __init__(self, puzzle: Puzzle) -> None:
        self.puzzle = puzzle
        self.solution: Board = puzzle.board.copy()

    def reveal(self, position: Position, cell: Cell) -> None:
        """Add a given cell to both the puzzle and the working solution."""

        self.puzzle.reveal(position, cell)
        self.solution.insert(position, cell)

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    def computed_clues(self) -> Dict[ClueKey, Clue]:
        """Counts of each color still to be placed on every segment."""

        clues = self.puzzle.clues
        for key, solution_clue in self.solution.clues().items():
            assert key in clues, f"Puzzle has no clue for segment {key}"
            clues[key] = clues[key] - solution_clue
        return clues

    def computed_hints(self) -> Dict[Position, Hint]:
        hints: Dict[Position, Hint] = {}
        hexagon = self.puzzle.board.hexagon
        for (direction, distance), clue in self.computed_clues().items():
            segment = hexagon.segment(distance, direction)
            assert segment is not None, f"Clue {(direction, distance)} lies outside the board"
            clue_hint = clue.hint()
            for position in segment:
                hints[position] = hints.get(position, Hint.any()) & clue_hint
        return hints

    # ------------------------------------------------------------------
    # Deduction rules
    # ------------------------------------------------------------------
    def solve_hints(self) -> bool:
        solved = False
        for position, hint in self.computed_hints().items():
            cell = hint.solution()
            if cell is None or position in self.solution:
                continue
            self.solution.insert(position, cell)
            solved = True
            LOGGER.debug("Solved hint for %s to %s", position, cell.value)
        return solved

    def solve_clues(self) -> bool:
        hints = self.computed_hints()
        hexagon = self.puzzle.board.hexagon
        found: Dict[Position, Cell] = {}

        for (direction, distance), computed_clue in self.computed_clues().items():
            segment = hexagon.segment(distance, direction)
            assert segment is not None, f"Clue {(direction, distance)} lies outside the board"
            unsolved = [position for position in segment if position not in self.solution]

            hinted_clue = Clue.zero()
            for position in unsolved:
                hinted_clue = hinted_clue + hints[position].clue()

            for cell in CELLS:
                if hinted_clue.cell(cell) != computed_clue.cell(cell):
                    continue
                for position in unsolved:
                    if hints[position].cell(cell):
                        found[position] = cell
                        LOGGER.debug(
                            "Solved clue (%s, %s) for %s to %s",
                            direction.value,
                            distance,
                            position,
                            cell.value,
                        )

        for position, cell in found.items():
            self.solution.insert(position, cell)
        return bool(found)

    def solve(self) -> bool:
        """Run both rules to fixpoint and report whether the board is complete."""

        while self.solve_hints() or self.solve_clues():
            pass
        solved = self.solution.is_solved()
        LOGGER.debug("Solver %s", "finished" if solved else "stalled")
        return solved
