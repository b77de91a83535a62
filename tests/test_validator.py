import random
import unittest
from unittest.mock import MagicMock, patch

from ortools.sat.python import cp_model

from hexclue.core.constants import Cell
from hexclue.core.exceptions import GenerationError
from hexclue.engine.board import Board
from hexclue.engine.generator import FunctionGenerator
from hexclue.engine.puzzle import Puzzle
from hexclue.engine.refiner import Refiner, RefinerConfig
from hexclue.engine.search import SearchResult
from hexclue.engine.validator import (
    FunctionStrategy,
    MaximumSolvedClues,
    MaximumSolvedPositions,
    RequireClueSolving,
    RequireHintSolving,
    RequireUniqueSolution,
    Validator,
    default_validator,
)
from hexclue.grid.coords import Position
from hexclue.grid.hexagon import Ring


def ring_board() -> Board:
    board = Board(2)
    board.insert(Position.zero(), Cell.RED)
    for position in Ring.zero(1):
        board.insert(position, Cell.GREEN)
    for position in Ring.zero(2):
        board.insert(position, Cell.BLUE)
    return board


def alternating_board() -> Board:
    board = Board(1)
    board.insert(Position.zero(), Cell.BLUE)
    for index, position in enumerate(Ring.zero(1)):
        board.insert(position, Cell.RED if index % 2 == 0 else Cell.GREEN)
    return board


class StrategyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.ring = Puzzle.with_clues(ring_board()).cleared()
        self.alternating = Puzzle.with_clues(alternating_board()).cleared()

    def test_require_clue_solving(self) -> None:
        self.assertIs(RequireClueSolving(True).evaluate(self.ring), False)
        self.assertIs(RequireClueSolving(False).evaluate(self.ring), True)
        self.assertIs(RequireClueSolving(True).evaluate(self.alternating), True)
        self.assertIs(RequireClueSolving(False).evaluate(self.alternating), False)

    def test_require_hint_solving(self) -> None:
        self.assertIs(RequireHintSolving(True).evaluate(self.ring), False)
        self.assertIs(RequireHintSolving(False).evaluate(self.ring), True)
        self.assertIsNone(RequireHintSolving(True).evaluate(self.alternating))

    def test_strategies_do_not_mutate_puzzle(self) -> None:
        RequireClueSolving(True).evaluate(self.ring)
        RequireHintSolving(True).evaluate(self.ring)
        self.assertEqual(len(self.ring.board), 0)

    def test_maximum_solved_clues(self) -> None:
        self.assertIs(MaximumSolvedClues(5).evaluate(self.ring), False)
        self.assertIs(MaximumSolvedClues(6).evaluate(self.ring), True)
        self.assertIs(MaximumSolvedClues(0).evaluate(self.alternating), True)

    def test_maximum_solved_positions(self) -> None:
        self.assertIs(MaximumSolvedPositions(0).evaluate(self.alternating), True)
        self.alternating.reveal(Position.zero(), Cell.BLUE)
        self.assertIs(MaximumSolvedPositions(0).evaluate(self.alternating), False)
        self.assertIs(MaximumSolvedPositions(1).evaluate(self.alternating), True)

    def test_require_unique_solution(self) -> None:
        self.assertIs(RequireUniqueSolution().evaluate(self.ring), True)
        self.assertIsNone(RequireUniqueSolution().evaluate(self.alternating))

        unique = self.alternating.copy()
        unique.reveal(Position(-1, 0), Cell.RED)
        self.assertIs(RequireUniqueSolution().evaluate(unique), True)

        broken = self.alternating.copy()
        broken.reveal(Position.zero(), Cell.RED)
        self.assertIs(RequireUniqueSolution().evaluate(broken), False)

    def test_unique_solution_abstains_on_timeout(self) -> None:
        puzzle = Puzzle.with_clues(Board.random(random.Random(3), 6)).cleared()
        self.assertIsNone(RequireUniqueSolution(timeout=1e-6).evaluate(puzzle))

    def test_unproven_single_completion_abstains(self) -> None:
        stopped = SearchResult([alternating_board()], cp_model.FEASIBLE, 2)
        with patch("hexclue.engine.validator.search", return_value=stopped):
            self.assertIsNone(RequireUniqueSolution().evaluate(self.alternating))


class ValidatorTests(unittest.TestCase):
    def test_empty_validator_accepts(self) -> None:
        puzzle = Puzzle.with_clues(ring_board()).cleared()
        validator = Validator()
        self.assertTrue(validator.is_not_invalid(puzzle))
        self.assertTrue(validator.is_valid(puzzle))

    def test_abstaining_strategy(self) -> None:
        puzzle = Puzzle.with_clues(ring_board()).cleared()
        validator = Validator([FunctionStrategy(lambda _: None), FunctionStrategy(lambda _: True)])
        self.assertEqual(validator.verdicts(puzzle), [None, True])
        self.assertTrue(validator.is_not_invalid(puzzle))
        self.assertFalse(validator.is_valid(puzzle))

    def test_rejecting_strategy(self) -> None:
        puzzle = Puzzle.with_clues(ring_board()).cleared()
        validator = Validator([FunctionStrategy(lambda _: True), FunctionStrategy(lambda _: False)])
        self.assertFalse(validator.is_not_invalid(puzzle))
        self.assertFalse(validator.is_valid(puzzle))

    def test_default_validator(self) -> None:
        validator = default_validator()
        self.assertEqual(validator.strategies, [RequireClueSolving(True), MaximumSolvedClues(0)])
        self.assertFalse(validator.is_not_invalid(Puzzle.with_clues(ring_board()).cleared()))
        self.assertEqual(default_validator([]).strategies, [])


class RefinerTests(unittest.TestCase):
    def test_refine_rejects_solved_clues_early(self) -> None:
        refiner = Refiner(default_validator())
        self.assertIsNone(refiner.refine(Puzzle.with_clues(ring_board())))

    def test_refine_with_permissive_validator(self) -> None:
        solution = Puzzle.with_clues(ring_board())
        puzzle = Refiner(Validator()).refine(solution)
        self.assertIsNotNone(puzzle)
        self.assertEqual(len(puzzle.board), 0)
        self.assertEqual(puzzle.clues, solution.clues)
        self.assertEqual(len(solution.board), 19)

    def test_refine_reveals_within_budget(self) -> None:
        solution = Puzzle.with_clues(alternating_board())
        validator = Validator([RequireUniqueSolution()])

        self.assertIsNone(Refiner(validator).refine(solution))

        puzzle = Refiner(validator, RefinerConfig(max_reveals=3)).refine(solution)
        self.assertIsNotNone(puzzle)
        self.assertEqual(len(puzzle.board), 1)

    def test_refined_gives_up_after_max_attempts(self) -> None:
        source = FunctionGenerator(lambda rng: Puzzle.with_clues(ring_board()))
        refiner = Refiner(default_validator(), RefinerConfig(max_attempts=2))
        with self.assertRaises(GenerationError):
            refiner.refined(random.Random(1), source)

    def test_refined_returns_first_accepted(self) -> None:
        source = FunctionGenerator(lambda rng: Puzzle.with_clues(ring_board()))
        puzzle = Refiner(Validator(), RefinerConfig(max_attempts=1)).refined(random.Random(1), source)
        self.assertEqual(puzzle.radius, 2)

    def test_refined_draws_candidates_from_generator(self) -> None:
        rng = random.Random(1)
        source = MagicMock()
        source.generate.return_value = Puzzle.with_clues(ring_board())
        Refiner(Validator()).refined(rng, source)
        source.generate.assert_called_once_with(rng)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
