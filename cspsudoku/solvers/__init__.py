"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .config import SolverConfig
from .csp_solver import CSPSolver, solve_string
from .ordering import UnsupportedOrderingError

__all__ = [
    "BaseSolver",
    "SolverStats",
    "SolverConfig",
    "CSPSolver",
    "solve_string",
    "UnsupportedOrderingError",
]
