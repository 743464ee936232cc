"""Sudoku board representation with support for variable sizes."""

from __future__ import annotations
import math
import numpy as np
from typing import List, Tuple, Optional


def box_size_for(size: int) -> int:
    """Return the box side for a board side, or raise if it is not a perfect square."""
    box_size = math.isqrt(size)
    if size < 1 or box_size * box_size != size:
        raise ValueError(f"Size must be a perfect square, got {size}")
    return box_size


class SudokuBoard:
    """
    Represents an n x n Sudoku board, n a perfect square.

    Cells hold 0 for unassigned or a value in 1..n.
    A 4x4 board has 2x2 boxes, a 9x9 board 3x3 boxes, a 16x16 board 4x4 boxes.
    """

    def __init__(self, size: int = 9, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            size: Board side n. Must be a perfect square.
            grid: Optional initial grid. If None, creates empty board.
        """
        self.size = size
        self.box_size = box_size_for(size)

        if grid is not None:
            if grid.shape != (size, size):
                raise ValueError(f"Grid shape must be ({size}, {size})")
            if grid.min() < 0 or grid.max() > size:
                raise ValueError(f"Grid values must be 0-{size}")
            self.grid = grid.copy().astype(np.int32)
        else:
            self.grid = np.zeros((size, size), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard(self.size)
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > self.size:
            raise ValueError(f"Value must be 0-{self.size}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        self.grid[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = (row // self.box_size) * self.box_size
        box_col = (col // self.box_size) * self.box_size
        return self.grid[box_row:box_row + self.box_size,
                        box_col:box_col + self.box_size].flatten()

    def get_box_origin(self, row: int, col: int) -> Tuple[int, int]:
        """Get the top-left cell of the box containing (row, col)."""
        return (row - row % self.box_size, col - col % self.box_size)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions in row-major order."""
        rows, cols = np.nonzero(self.grid == 0)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        return int(np.sum(self.grid != 0))

    def is_filled(self) -> bool:
        """Check if every cell holds a value in 1..n."""
        return self.count_empty() == 0

    def _groups(self):
        for i in range(self.size):
            yield self.get_row(i)
            yield self.get_col(i)
        for box_row in range(0, self.size, self.box_size):
            for box_col in range(0, self.size, self.box_size):
                yield self.get_box(box_row, box_col)

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        for group in self._groups():
            non_zero = group[group != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def is_solved(self) -> bool:
        """
        Check if the puzzle is completely and correctly solved.

        Every row, column and box must contain each value 1..n exactly once.
        """
        if not self.is_filled():
            return False
        expected = set(range(1, self.size + 1))
        for group in self._groups():
            if len(group) != self.size or set(group.tolist()) != expected:
                return False
        return True

    def to_string(self) -> str:
        """
        Convert board to a compact string representation.
        Uses 0 for empty cells, 1-9 for values up to 9, A-Z for 10 and up.
        """
        chars = []
        for val in self.grid.flatten().tolist():
            if val <= 9:
                chars.append(str(val))
            else:
                chars.append(chr(ord('A') + val - 10))
        return ''.join(chars)

    @classmethod
    def from_string(cls, s: str, size: Optional[int] = None) -> SudokuBoard:
        """
        Create a board from a single-line string representation.

        Args:
            s: Row-major string of length size*size.
               0 or . for empty, 1-9 for values, A-Z for 10 and up.
            size: Board size. Inferred as the square root of len(s) if omitted.
        """
        s = s.strip()
        if size is None:
            size = math.isqrt(len(s))
            if size * size != len(s):
                raise ValueError(f"String length must be a perfect square, got {len(s)}")
        if len(s) != size * size:
            raise ValueError(f"String length must be {size*size}, got {len(s)}")

        values = []
        for c in s:
            if c == '0' or c == '.':
                values.append(0)
            elif c.isdigit():
                values.append(int(c))
            elif c.isalpha():
                values.append(ord(c.upper()) - ord('A') + 10)
            else:
                raise ValueError(f"Unexpected character {c!r} in puzzle string")

        grid = np.array(values, dtype=np.int32).reshape(size, size)
        return cls(size, grid)

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        arr = np.array(data, dtype=np.int32)
        size = arr.shape[0]
        return cls(size, arr)

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.box_size * 2 + 1)) + '+') * self.box_size

        for i in range(self.size):
            if i % self.box_size == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(self.size):
                val = self.grid[i, j]
                if val == 0:
                    row_str += ' .'
                elif val <= 9:
                    row_str += f' {val}'
                else:
                    row_str += f' {chr(ord("A") + val - 10)}'

                if (j + 1) % self.box_size == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(size={self.size}, filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
