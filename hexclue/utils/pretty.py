"""Pretty-print helpers for hex clue puzzles."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional

from ..core.constants import NORMALIZED_DIRECTIONS, Cell
from ..core.models import Clue
from ..engine.puzzle import Puzzle

if TYPE_CHECKING:
    from ..engine.board import Board


UNKNOWN_SYMBOL = "?"


def cell_symbol(cell: Optional[Cell]) -> str:
    if cell is None:
        return UNKNOWN_SYMBOL
    return cell.letter


def format_clue(clue: Clue) -> str:
    return f"({clue.red} {clue.green} {clue.blue})"


def format_puzzle(puzzle: Puzzle) -> str:
    """Render every canonical direction's segments followed by their clues."""

    radius = puzzle.radius
    lines: List[str] = []
    for direction in NORMALIZED_DIRECTIONS:
        lines.append(" " * (radius * 3 + 1) + direction.value)
        lines.append(" " * (radius * 3) + "--->")
        for distance, cells in puzzle.board.segments(direction):
            row = "".join(f"{cell_symbol(cell)} " for _, cell in cells)
            clue = puzzle.clue((direction, distance)) or Clue.zero()
            lines.append(" " * abs(distance) + row + "- " + format_clue(clue))
        lines.append("")
    return "\n".join(lines) + "\n"


def format_board(board: Board) -> str:
    """Render a board against the clues of its own assigned cells."""

    return format_puzzle(Puzzle.with_clues(board))


def pretty_print_puzzle(puzzle: Puzzle, *, label: str | None = None, stream=None) -> None:
    """Print the puzzle in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_puzzle(puzzle), file=stream, end="")
