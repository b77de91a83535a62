"""Puzzle generation orchestration.

Generation works on a fully colored solution:
  1. Derive the clue of every segment, then hide every cell.
  2. Run the solver; while it stalls, reveal one solution cell chosen from the
     least resolved segment, within a reveal budget.
  3. Re-solve the finished puzzle from scratch to measure how much clue-level
     reasoning it needs, and accept or reject the candidate.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Protocol, Tuple

from ..core.constants import SOLVE_CLUES_COST, SOLVE_HINTS_COST, Cell
from ..core.exceptions import GenerationError
from ..core.models import Clue, Hint
from ..grid.coords import Position
from ..utils.logger import get_logger
from .board import Board, ClueKey
from .puzzle import Puzzle
from .solver import Solver


LOGGER = get_logger(__name__)


# ----------------------------------------------------------------------
# Solution sources
# ----------------------------------------------------------------------
class Generator(Protocol):
    def generate(self, rng: random.Random) -> Puzzle:
        """Return a solution puzzle: a full board plus its clue table."""


@dataclass
class FunctionGenerator:
    """Adapts a plain callable to the :class:`Generator` interface."""

    function: Callable[[random.Random], Puzzle]

    def generate(self, rng: random.Random) -> Puzzle:
        return self.function(rng)


@dataclass
class RandomBoardGenerator:
    """Uniformly random colors on every position."""

    radius: int

    def generate(self, rng: random.Random) -> Puzzle:
        return Puzzle.with_clues(Board.random(rng, self.radius))


@dataclass
class HintedBoardGenerator:
    """Random colors restricted per position, used for themed silhouettes."""

    radius: int
    hints: Mapping[Position, Hint] = field(default_factory=dict)

    def generate(self, rng: random.Random) -> Puzzle:
        board = Board.random_from_hints(rng, self.radius, self.hints.items())
        return Puzzle.with_clues(board)


# ----------------------------------------------------------------------
# Configuration and results
# ----------------------------------------------------------------------
def reveal_limit(radius: int) -> int:
    """Default number of cells a puzzle of ``radius`` may reveal."""

    return max(0, (radius - 1) * (radius - 2) // 2)


@dataclass
class GeneratorConfig:
    radius: int
    seed: Optional[int] = None
    max_attempts: Optional[int] = None
    max_reveals: Optional[int] = None

    def reveal_limit(self) -> int:
        if self.max_reveals is not None:
            return self.max_reveals
        return reveal_limit(self.radius)

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


@dataclass
class SolveReport:
    solved: bool
    complexity: int = 0
    hint_passes: int = 0
    clue_passes: int = 0

    @property
    def requires_clue_solving(self) -> bool:
        return self.clue_passes > 0


@dataclass
class RevealOutcome:
    revealed: int = 0
    reason: Optional[str] = None

    @property
    def solved(self) -> bool:
        return self.reason is None


@dataclass
class GenerationResult:
    accepted: bool
    puzzle: Puzzle
    solution: Puzzle
    complexity: int = 0
    requires_clue_solving: bool = False
    revealed: int = 0
    reason: Optional[str] = None


# ----------------------------------------------------------------------
# Shared steps
# ----------------------------------------------------------------------
def has_solved_clues(clues: Mapping[ClueKey, Clue]) -> bool:
    """True when some clue is already down to fewer than two colors."""

    return any(clue.colors() < 2 for clue in clues.values())


def reveal_next(solution: Puzzle, solver: Solver) -> Optional[Tuple[Position, Cell]]:
    """Pick the next cell to give away.

    Takes the non-empty remaining clue with the largest count and, on that
    segment, the first hidden solution cell of the clue's dominant color.
    """

    candidates = [(key, clue) for key, clue in solver.computed_clues().items() if not clue.is_empty()]
    if not candidates:
        return None
    (direction, distance), clue = max(candidates, key=lambda item: item[1].count())
    cell = clue.max_cell()
    if cell is None:
        return None

    segment = solution.board.segment(distance, direction)
    assert segment is not None, f"Solution has no segment {(direction, distance)}"
    for position, found in segment:
        if found == cell and position not in solver.solution:
            return position, cell
    return None


def reveal_until_solved(solution: Puzzle, solver: Solver, max_reveals: int) -> RevealOutcome:
    """Alternate solving and revealing until the solver completes the board.

    The outcome carries the number of reveals made and, when the loop gave
    up, why.
    """

    outcome = RevealOutcome()
    while not solver.solve():
        choice = reveal_next(solution, solver)
        if choice is None:
            LOGGER.debug("No cell left to reveal on a stalled puzzle")
            outcome.reason = "no cell left to reveal"
            return outcome
        position, cell = choice
        solver.reveal(position, cell)
        outcome.revealed += 1
        LOGGER.debug("Revealed %s at %s", cell.value, position)
        if outcome.revealed > max_reveals:
            LOGGER.debug("Reveal budget of %s exceeded", max_reveals)
            outcome.reason = "too many revealed cells"
            return outcome
    return outcome


def measure_complexity(puzzle: Puzzle) -> SolveReport:
    """Solve ``puzzle`` from scratch, preferring hint passes, and score it."""

    solver = Solver(puzzle.copy())
    report = SolveReport(solved=False)
    while not solver.solution.is_solved():
        if solver.solve_hints():
            report.hint_passes += 1
            report.complexity += SOLVE_HINTS_COST
            continue
        if solver.solve_clues():
            report.clue_passes += 1
            report.complexity += SOLVE_CLUES_COST
            continue
        return report
    report.solved = True
    return report


# ----------------------------------------------------------------------
# Orchestration
# ----------------------------------------------------------------------
class PuzzleGenerator:
    """Rejection-samples solution boards until one yields an acceptable puzzle."""

    def __init__(
        self,
        config: GeneratorConfig,
        source: Optional[Generator] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self.source = source or RandomBoardGenerator(config.radius)
        self.rng = rng or config.make_rng()

    def generate(self) -> GenerationResult:
        """Keep drawing candidates until one is accepted."""

        attempt = 0
        while self.config.max_attempts is None or attempt < self.config.max_attempts:
            attempt += 1
            result = self.generate_once()
            if result.accepted:
                LOGGER.info(
                    "Accepted puzzle on attempt %s (complexity %s, %s revealed)",
                    attempt,
                    result.complexity,
                    result.revealed,
                )
                return result
            LOGGER.debug("Attempt %s rejected: %s", attempt, result.reason)
        LOGGER.warning("No acceptable puzzle after %s attempts", attempt)
        raise GenerationError(f"Unable to generate puzzle after {attempt} attempts")

    def generate_once(self) -> GenerationResult:
        return self.generate_from_solution(self.source.generate(self.rng))

    def generate_from_solution(self, solution: Puzzle) -> GenerationResult:
        solver = Solver(solution.cleared())
        puzzle = solver.puzzle

        if has_solved_clues(solver.computed_clues()):
            return GenerationResult(False, puzzle, solution, reason="puzzle has solved clues")

        outcome = reveal_until_solved(solution, solver, self.config.reveal_limit())
        revealed = outcome.revealed
        if not outcome.solved:
            return GenerationResult(False, puzzle, solution, revealed=revealed, reason=outcome.reason)

        # Reveals shrink the remaining clues, which can leave a chord with one color.
        if has_solved_clues(Solver(puzzle.copy()).computed_clues()):
            return GenerationResult(
                False, puzzle, solution, revealed=revealed, reason="reveals left solved clues"
            )

        report = measure_complexity(puzzle)
        complexity = report.complexity - revealed
        if not report.solved:
            return GenerationResult(
                False, puzzle, solution, complexity, revealed=revealed, reason="re-solve stalled"
            )
        if not report.requires_clue_solving:
            return GenerationResult(
                False, puzzle, solution, complexity, revealed=revealed, reason="hint solving suffices"
            )
        return GenerationResult(True, puzzle, solution, complexity, True, revealed)


def generate(rng: random.Random, radius: int) -> GenerationResult:
    """Run a single generation attempt for a random board of ``radius``."""

    return PuzzleGenerator(GeneratorConfig(radius=radius), rng=rng).generate_once()


def generate_good(rng: random.Random, radius: int, max_attempts: Optional[int] = None) -> Puzzle:
    """Generate attempts until one is accepted and return its puzzle."""

    config = GeneratorConfig(radius=radius, max_attempts=max_attempts)
    return PuzzleGenerator(config, rng=rng).generate().puzzle
