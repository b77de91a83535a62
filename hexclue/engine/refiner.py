"""Refine solution boards into puzzles accepted by a validator."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from ..core.exceptions import GenerationError
from ..utils.logger import get_logger
from .generator import Generator, reveal_limit, reveal_until_solved
from .puzzle import Puzzle
from .solver import Solver
from .validator import Validator


LOGGER = get_logger(__name__)


@dataclass
class RefinerConfig:
    max_attempts: Optional[int] = None
    max_reveals: Optional[int] = None


class Refiner:
    """Rejection-samples candidates until ``validator`` accepts one."""

    def __init__(self, validator: Validator, config: Optional[RefinerConfig] = None) -> None:
        self.validator = validator
        self.config = config or RefinerConfig()

    def refined(self, rng: random.Random, generator: Generator) -> Puzzle:
        attempt = 0
        while self.config.max_attempts is None or attempt < self.config.max_attempts:
            attempt += 1
            puzzle = self.refine(generator.generate(rng))
            if puzzle is not None:
                LOGGER.info("Refined puzzle on attempt %s (%s revealed)", attempt, len(puzzle.board))
                return puzzle
        LOGGER.warning("No puzzle accepted after %s attempts", attempt)
        raise GenerationError(f"Unable to refine puzzle after {attempt} attempts")

    def refine(self, solution: Puzzle) -> Optional[Puzzle]:
        """Hide ``solution``, reveal cells until solvable, and validate the result."""

        solver = Solver(solution.cleared())
        puzzle = solver.puzzle

        if not self.validator.is_not_invalid(puzzle):
            return None

        max_reveals = self.config.max_reveals
        if max_reveals is None:
            max_reveals = reveal_limit(solution.radius)
        outcome = reveal_until_solved(solution, solver, max_reveals)
        if not outcome.solved:
            LOGGER.debug("Candidate dropped: %s", outcome.reason)
            return None

        if not self.validator.is_valid(puzzle):
            return None
        return puzzle
