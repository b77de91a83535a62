"""Puzzles: known cells paired with a fixed clue table."""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from ..core.constants import Cell
from ..core.models import Clue
from ..grid.coords import Position
from .board import Board, ClueKey


class Puzzle:
    """A board of revealed cells together with the clue of every segment.

    The clue table is computed once, from a fully colored solution board, and
    is never recomputed from the puzzle's own (partial) board.
    """

    def __init__(
        self,
        board: Board,
        clues: Union[Mapping[ClueKey, Clue], Iterable[Tuple[ClueKey, Clue]]] = (),
    ) -> None:
        self.board = board
        self._clues: Dict[ClueKey, Clue] = dict(clues)

    @classmethod
    def with_clues(cls, board: Board) -> Puzzle:
        """Derive the clue table from ``board`` itself."""

        return cls(board, board.clues())

    @property
    def clues(self) -> Dict[ClueKey, Clue]:
        return dict(self._clues)

    @property
    def radius(self) -> int:
        return self.board.radius

    def clue(self, key: ClueKey) -> Optional[Clue]:
        return self._clues.get(key)

    def clear(self) -> None:
        """Forget every revealed cell while keeping the clue table."""

        self.board = Board(self.board.radius)

    def cleared(self) -> Puzzle:
        puzzle = self.copy()
        puzzle.clear()
        return puzzle

    def reveal(self, position: Position, cell: Cell) -> None:
        self.board.insert(position, cell)

    def copy(self) -> Puzzle:
        return Puzzle(self.board.copy(), self._clues)

    def __repr__(self) -> str:
        return f"Puzzle(radius={self.radius}, revealed={len(self.board)}, clues={len(self._clues)})"
