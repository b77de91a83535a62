"""CLI entrypoint for the hex clue puzzle generator."""

from __future__ import annotations

import argparse
import logging
import random

from hexclue.data.silhouettes import heart_generator
from hexclue.engine.generator import GeneratorConfig, PuzzleGenerator, RandomBoardGenerator
from hexclue.engine.puzzle import Puzzle
from hexclue.engine.refiner import Refiner, RefinerConfig
from hexclue.engine.search import has_unique_solution
from hexclue.engine.solver import Solver
from hexclue.engine.validator import RequireUniqueSolution, default_validator
from hexclue.utils.logger import configure_logging
from hexclue.utils.pretty import format_board, pretty_print_puzzle


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate three-color hexagonal clue puzzles",
    )
    parser.add_argument("--radius", type=int, default=2, help="Board radius in cells")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--heart",
        action="store_true",
        help="Use the radius-5 heart silhouette instead of a uniform random board",
    )
    parser.add_argument(
        "--refine",
        action="store_true",
        help="Generate through the refiner with the default validator strategies",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Give up after this many rejected candidates (default: unbounded)",
    )
    parser.add_argument(
        "--max-reveals",
        type=int,
        default=None,
        help="Override the number of cells a puzzle may reveal",
    )
    parser.add_argument(
        "--check-unique",
        action="store_true",
        help="Require (with --refine) or report a unique completion via CP-SAT",
    )
    parser.add_argument(
        "--show-solution",
        action="store_true",
        help="Also print the solved board",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.radius < 1:
        parser.error("--radius must be positive")
    radius = 5 if args.heart else args.radius
    rng = random.Random(args.seed)
    source = heart_generator() if args.heart else RandomBoardGenerator(radius)

    solution_board = None
    if args.refine:
        strategies = list(default_validator().strategies)
        if args.check_unique:
            strategies.append(RequireUniqueSolution())
        refiner = Refiner(
            default_validator(strategies),
            RefinerConfig(max_attempts=args.max_attempts, max_reveals=args.max_reveals),
        )
        puzzle: Puzzle = refiner.refined(rng, source)
    else:
        config = GeneratorConfig(
            radius=radius,
            seed=args.seed,
            max_attempts=args.max_attempts,
            max_reveals=args.max_reveals,
        )
        result = PuzzleGenerator(config, source=source, rng=rng).generate()
        puzzle = result.puzzle
        solution_board = result.solution.board
        print(f"complexity: {result.complexity}, revealed: {result.revealed}")

    pretty_print_puzzle(puzzle, label="puzzle:")
    if args.check_unique and not args.refine:
        print(f"unique solution: {has_unique_solution(puzzle)}")
    if args.show_solution:
        if solution_board is None:
            solver = Solver(puzzle.copy())
            solver.solve()
            solution_board = solver.solution
        print("solution:")
        print(format_board(solution_board), end="")


if __name__ == "__main__":  # pragma: no cover
    main()
