"""Backtracking CSP solver for n x n Sudoku puzzles."""

from .core import SudokuBoard, SudokuNode, SudokuVar, Arc
from .solvers import CSPSolver, SolverConfig, SolverStats, solve_string

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "SudokuNode",
    "SudokuVar",
    "Arc",
    "CSPSolver",
    "SolverConfig",
    "SolverStats",
    "solve_string",
]
