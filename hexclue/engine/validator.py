"""Acceptance strategies for generated puzzles.

Each strategy looks at a candidate puzzle and answers ``True`` (accept),
``False`` (reject) or ``None`` (no opinion yet).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, Sequence

from ..utils.logger import get_logger
from .puzzle import Puzzle
from .search import SearchConfig, search
from .solver import Solver


LOGGER = get_logger(__name__)

Verdict = Optional[bool]


class ValidatorStrategy(Protocol):
    def evaluate(self, puzzle: Puzzle) -> Verdict:
        """Accept, reject, or abstain on ``puzzle``."""


@dataclass
class FunctionStrategy:
    """Adapts a plain callable to the :class:`ValidatorStrategy` interface."""

    function: Callable[[Puzzle], Verdict]

    def evaluate(self, puzzle: Puzzle) -> Verdict:
        return self.function(puzzle)


@dataclass
class RequireClueSolving:
    """Whether the puzzle needs (or must not need) clue-wide deduction.

    Hint passes are preferred; the first productive clue pass decides.
    """

    expect: bool = True

    def evaluate(self, puzzle: Puzzle) -> Verdict:
        solver = Solver(puzzle.copy())
        while not solver.solution.is_solved():
            if solver.solve_hints():
                continue
            if solver.solve_clues():
                return self.expect
            return None
        return not self.expect


@dataclass
class RequireHintSolving:
    """Whether the puzzle needs (or must not need) overlapping hints.

    Clue passes are preferred; the first productive hint pass decides.
    """

    expect: bool = True

    def evaluate(self, puzzle: Puzzle) -> Verdict:
        solver = Solver(puzzle.copy())
        while not solver.solution.is_solved():
            if solver.solve_clues():
                continue
            if solver.solve_hints():
                return self.expect
            return None
        return not self.expect


@dataclass
class MaximumSolvedClues:
    """At most ``limit`` remaining clues may be down to a single color."""

    limit: int

    def evaluate(self, puzzle: Puzzle) -> Verdict:
        solved = sum(1 for clue in Solver(puzzle.copy()).computed_clues().values() if clue.is_solved())
        return solved <= self.limit


@dataclass
class MaximumSolvedPositions:
    limit: int

    def evaluate(self, puzzle: Puzzle) -> Verdict:
        return len(puzzle.board) <= self.limit


@dataclass
class RequireUniqueSolution:
    """Accept only puzzles with exactly one completion.

    Several completions abstain rather than reject: revealing more cells can
    still make the puzzle unique. A proven absence of completions rejects.
    A search cut short by the timeout abstains.
    """

    timeout: float = 10.0

    def evaluate(self, puzzle: Puzzle) -> Verdict:
        result = search(puzzle, SearchConfig(limit=2, timeout=self.timeout))
        if not result.complete:
            return None
        if not result.boards:
            return False
        if len(result.boards) == 1:
            return True
        return None


@dataclass
class Validator:
    """Ordered collection of strategies with two aggregate checks."""

    strategies: List[ValidatorStrategy] = field(default_factory=list)

    def verdicts(self, puzzle: Puzzle) -> List[Verdict]:
        return [strategy.evaluate(puzzle) for strategy in self.strategies]

    def is_not_invalid(self, puzzle: Puzzle) -> bool:
        """True unless some strategy explicitly rejects."""

        for strategy in self.strategies:
            if strategy.evaluate(puzzle) is False:
                LOGGER.debug("%s rejected puzzle", type(strategy).__name__)
                return False
        return True

    def is_valid(self, puzzle: Puzzle) -> bool:
        """True only if every strategy explicitly accepts."""

        for strategy in self.strategies:
            if strategy.evaluate(puzzle) is not True:
                LOGGER.debug("%s did not accept puzzle", type(strategy).__name__)
                return False
        return True


def default_validator(strategies: Optional[Sequence[ValidatorStrategy]] = None) -> Validator:
    """The acceptance policy used by ``generate_good``: clue solving, no solved clues."""

    if strategies is None:
        strategies = [RequireClueSolving(True), MaximumSolvedClues(0)]
    return Validator(list(strategies))
