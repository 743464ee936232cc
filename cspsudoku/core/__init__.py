"""Core module for Sudoku board, search node and variable representation."""

from .board import SudokuBoard
from .node import SudokuNode
from .variables import SudokuVar, Arc

__all__ = ["SudokuBoard", "SudokuNode", "SudokuVar", "Arc"]
