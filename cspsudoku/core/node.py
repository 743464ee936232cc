"""Search-tree node: a board together with the candidate values of every cell."""

from __future__ import annotations
from typing import Dict, Set, Tuple

from .board import SudokuBoard


class SudokuNode:
    """
    One point in the search tree.

    Holds a board and, for each cell, the set of values still considered
    possible. An assigned cell always has the singleton set of its value.
    Branches must work on a ``copy()`` so siblings never see each other's
    assignments or pruning.
    """

    def __init__(self, board: SudokuBoard, domains: Dict[Tuple[int, int], Set[int]]):
        self.board = board
        self.domains = domains

    @classmethod
    def from_board(cls, board: SudokuBoard) -> SudokuNode:
        """
        Seed a root node with unary-consistent candidates.

        Given cells get the singleton set of their value, empty cells get 1..n.
        The board is copied, the caller keeps ownership of its own.
        """
        domains = {}
        for r in range(board.size):
            for c in range(board.size):
                val = board.get(r, c)
                if val != 0:
                    domains[(r, c)] = {val}
                else:
                    domains[(r, c)] = set(range(1, board.size + 1))
        return cls(board.copy(), domains)

    @classmethod
    def from_string(cls, s: str) -> SudokuNode:
        return cls.from_board(SudokuBoard.from_string(s))

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def box_size(self) -> int:
        return self.board.box_size

    def copy(self) -> SudokuNode:
        """Create an independent deep copy of the board and every candidate set."""
        return SudokuNode(
            self.board.copy(),
            {pos: domain.copy() for pos, domain in self.domains.items()}
        )

    def assign(self, row: int, col: int, value: int) -> None:
        """Set a cell and collapse its candidates to ``{value}``. No other cell is touched."""
        self.board.set(row, col, value)
        self.domains[(row, col)] = {value}

    def get_good_values(self, row: int, col: int) -> Set[int]:
        """Return the live candidate set of a cell. Propagation shrinks it in place."""
        return self.domains[(row, col)]

    def __repr__(self) -> str:
        return f"SudokuNode(size={self.size}, filled={self.board.count_filled()})"
