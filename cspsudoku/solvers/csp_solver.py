"""Backtracking CSP solver with forward checking or maintained arc consistency."""

from __future__ import annotations
from typing import Optional

from .base_solver import BaseSolver
from .config import SolverConfig
from .ordering import get_unassigned_var, get_domain_values
from .propagation import inference, propagate_givens
from ..core.board import SudokuBoard
from ..core.node import SudokuNode
from ..logging_utils import get_logger

logger = get_logger(__name__)


class CSPSolver(BaseSolver):
    """
    Sudoku solver using depth-first backtracking over candidate domains.

    This solver uses:
    - Domain tracking: each cell keeps the set of values still possible.
    - Variable ordering: MRV or static row-major order.
    - Inference after every assignment: MAC or forward checking.
    - Copy-on-branch: every value tried gets its own copy of the node.

    The first solution found in depth-first order is returned.
    """

    name = "CSP Backtracking"

    def __init__(self, config: Optional[SolverConfig] = None, track_memory: bool = True):
        """
        Initialize the CSP solver.

        Args:
            config: Search configuration. Defaults to MAC + MRV.
            track_memory: Record peak memory with tracemalloc.
        """
        self.config = config or SolverConfig()
        self.name = f"{CSPSolver.name} ({self.config.label})"
        self.limit = self.config.depth_limit
        super().__init__(track_memory=track_memory)

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """Solve by seeding a root node and running the backtracking search."""
        if not board.is_valid():
            logger.debug("Given clues conflict, puzzle has no solution")
            return None

        root = SudokuNode.from_board(board)
        if not propagate_givens(root, self.config, self.stats):
            logger.debug("Propagating the given clues emptied a domain")
            return None

        self.limit = self.config.resolve_depth_limit(board.size)
        logger.debug(
            "Searching %dx%d board with %d empty cells (%s, depth limit %d)",
            board.size, board.size, board.count_empty(), self.config.label, self.limit
        )

        result = self.backtrack_search(root, 0)

        logger.debug(
            "Search finished: solved=%s iterations=%d backtracks=%d",
            result is not None, self.stats.iterations, self.stats.backtracks
        )
        if result is None:
            return None
        return result.board

    def backtrack_search(self, node: SudokuNode, depth: int) -> Optional[SudokuNode]:
        """
        Recursive backtracking search.

        Args:
            node: Node owned by this call. It is never mutated; each value
                  tried is assigned on a fresh copy.
            depth: Number of assignments made since the root.

        Returns:
            The first solved node found, or None if this subtree has none.
        """
        self.stats.iterations += 1
        self.stats.max_depth = max(self.stats.max_depth, depth)

        if depth > self.limit:
            return None

        if node.board.is_filled():
            if node.board.is_solved():
                return node
            return None

        var = get_unassigned_var(node, self.config)
        for value in get_domain_values(node, var, self.config):
            child = node.copy()
            self.stats.nodes_explored += 1
            child.assign(var.row, var.col, value)

            if inference(child, var, self.config, self.stats):
                result = self.backtrack_search(child, depth + 1)
                if result is not None:
                    return result

            self.stats.backtracks += 1

        return None


def solve_string(puzzle: str, config: Optional[SolverConfig] = None) -> Optional[str]:
    """
    Solve a single-line puzzle string.

    Returns:
        The solved board as a string, or None if there is no solution.
    """
    board = SudokuBoard.from_string(puzzle)
    solution, _ = CSPSolver(config, track_memory=False).solve(board)
    if solution is None:
        return None
    return solution.to_string()
