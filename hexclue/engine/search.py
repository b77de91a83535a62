"""Exhaustive completion search using OR-Tools CP-SAT.

The propagation solver in :mod:`hexclue.engine.solver` only applies local
deduction rules. This module answers the global questions it cannot: whether a
puzzle has any completion at all, and whether that completion is unique.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ortools.sat.python import cp_model

from ..core.constants import CELLS, Cell
from ..grid.coords import Position
from ..utils.logger import get_logger
from .board import Board
from .puzzle import Puzzle

LOGGER = get_logger(__name__)


@dataclass
class SearchConfig:
    """Limits for a completion search."""

    limit: int = 2
    timeout: float = 10.0
    num_workers: int = 1


class _SolutionCollector(cp_model.CpSolverSolutionCallback):
    """Collects boards until ``limit`` completions have been seen."""

    def __init__(
        self,
        radius: int,
        cell_vars: Dict[Tuple[Position, Cell], cp_model.IntVar],
        limit: int,
    ) -> None:
        super().__init__()
        self.radius = radius
        self.cell_vars = cell_vars
        self.limit = limit
        self.boards: List[Board] = []

    def on_solution_callback(self) -> None:
        board = Board(self.radius)
        for (position, cell), var in self.cell_vars.items():
            if self.value(var):
                board.insert(position, cell)
        self.boards.append(board)
        if len(self.boards) >= self.limit:
            self.stop_search()


def _build_model(puzzle: Puzzle) -> Tuple[cp_model.CpModel, Dict[Tuple[Position, Cell], cp_model.IntVar]]:
    model = cp_model.CpModel()
    hexagon = puzzle.board.hexagon

    # ------------------------------------------------------------------
    # Step 1: one Boolean per (position, color), exactly one per position
    # ------------------------------------------------------------------
    cell_vars: Dict[Tuple[Position, Cell], cp_model.IntVar] = {}
    for position in hexagon:
        x, y, z = position.coordinates()
        options = []
        for cell in CELLS:
            var = model.new_bool_var(f"C_{x}_{y}_{z}_{cell.letter}")
            cell_vars[(position, cell)] = var
            options.append(var)
        model.add_exactly_one(options)

        known = puzzle.board.get(position)
        if known is not None:
            model.add(cell_vars[(position, known)] == 1)

    # ------------------------------------------------------------------
    # Step 2: segment color sums must match the clue table
    # ------------------------------------------------------------------
    for (direction, distance), clue in puzzle.clues.items():
        segment = hexagon.segment(distance, direction)
        assert segment is not None, f"Clue {(direction, distance)} lies outside the board"
        positions = list(segment)
        for cell in CELLS:
            model.add(sum(cell_vars[(position, cell)] for position in positions) == clue.cell(cell))

    return model, cell_vars


@dataclass
class SearchResult:
    """Completions found by one search, plus how the search ended.

    ``complete`` means CP-SAT enumerated every completion (or proved there is
    none). Otherwise the search stopped early, either because ``limit``
    completions were collected or because it ran out of time.
    """

    boards: List[Board]
    status: int
    limit: int

    @property
    def complete(self) -> bool:
        return self.status in (cp_model.OPTIMAL, cp_model.INFEASIBLE)

    @property
    def limit_reached(self) -> bool:
        return len(self.boards) >= self.limit

    def is_unique(self) -> Optional[bool]:
        """True for a proven single completion, False for none or several, None if unknown."""

        if self.complete:
            return len(self.boards) == 1
        if self.limit_reached and self.limit >= 2:
            return False
        return None


def search(puzzle: Puzzle, config: SearchConfig | None = None) -> SearchResult:
    """Enumerate up to ``config.limit`` full boards consistent with ``puzzle``."""

    config = config or SearchConfig()
    model, cell_vars = _build_model(puzzle)

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = config.timeout
    solver.parameters.num_workers = config.num_workers
    solver.parameters.enumerate_all_solutions = True

    collector = _SolutionCollector(puzzle.radius, cell_vars, config.limit)
    status = solver.solve(model, collector)
    result = SearchResult(collector.boards, status, config.limit)
    if not result.complete and not result.limit_reached:
        LOGGER.warning(
            "CP-SAT stopped after %.2fs with %d completion(s) (status=%s)",
            solver.wall_time,
            len(result.boards),
            solver.status_name(status),
        )
    else:
        LOGGER.debug(
            "CP-SAT: %d completion(s) found (status=%s, %.2fs)",
            len(result.boards),
            solver.status_name(status),
            solver.wall_time,
        )
    return result


def find_solutions(puzzle: Puzzle, config: SearchConfig | None = None) -> List[Board]:
    return search(puzzle, config).boards


def count_solutions(puzzle: Puzzle, limit: int = 2, timeout: float = 10.0) -> int:
    """Number of completions, capped at ``limit``.

    A search that times out reports what it found so far, a lower bound.
    """

    return len(find_solutions(puzzle, SearchConfig(limit=limit, timeout=timeout)))


def has_unique_solution(puzzle: Puzzle, timeout: float = 10.0) -> bool:
    """True only when the search proved exactly one completion."""

    return search(puzzle, SearchConfig(limit=2, timeout=timeout)).is_unique() is True
