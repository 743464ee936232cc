"""Variable and value ordering heuristics for the backtracking search."""

from __future__ import annotations
from typing import List, Optional

from ..core.node import SudokuNode
from ..core.variables import SudokuVar
from .config import SolverConfig


class UnsupportedOrderingError(NotImplementedError):
    """Raised when an ordering strategy without an implementation is selected."""


def select_mrv_var(node: SudokuNode) -> Optional[SudokuVar]:
    """
    Minimum Remaining Values: the unassigned cell with the fewest candidates.

    Ties go to the first such cell in row-major order.
    """
    best = None
    min_size = node.size + 1
    for row, col in node.board.get_empty_cells():
        size = len(node.get_good_values(row, col))
        if size < min_size:
            min_size = size
            best = SudokuVar(row, col)
    return best


def select_first_var(node: SudokuNode) -> Optional[SudokuVar]:
    """First unassigned cell in row-major order."""
    empty_cells = node.board.get_empty_cells()
    if not empty_cells:
        return None
    return SudokuVar(*empty_cells[0])


def get_unassigned_var(node: SudokuNode, config: SolverConfig) -> Optional[SudokuVar]:
    """Select the next cell to branch on, or None if every cell is assigned."""
    if config.use_mrv:
        return select_mrv_var(node)
    return select_first_var(node)


def get_domain_values(node: SudokuNode, var: SudokuVar, config: SolverConfig) -> List[int]:
    """
    Values to try for ``var``, in order.

    Raises:
        UnsupportedOrderingError: If least-constraining-value ordering is selected.
    """
    if config.use_lcv:
        raise UnsupportedOrderingError("LCV ordering has not been implemented.")
    # Sorted for deterministic behavior
    return sorted(node.get_good_values(var.row, var.col))
