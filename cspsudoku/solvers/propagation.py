"""
Arc-consistency propagation over a search node.

All routines mutate the candidate sets of the node they are given and
report whether the node may still be solvable.
"""

from __future__ import annotations
import collections
from typing import List, Optional

from ..core.node import SudokuNode
from ..core.variables import Arc, SudokuVar
from .base_solver import SolverStats
from .config import SolverConfig


def enforce_ac(
    node: SudokuNode,
    head: SudokuVar,
    tail: SudokuVar,
    stats: Optional[SolverStats] = None
) -> bool:
    """
    Enforce the arc head -> tail.

    Only a singleton head prunes: if head's candidates are exactly {v} and v
    is a candidate of tail, v is removed from tail.

    Returns:
        True if tail's candidate set was modified.
    """
    if stats is not None:
        stats.arcs_processed += 1

    head_values = node.get_good_values(head.row, head.col)
    if len(head_values) != 1:
        return False

    tail_values = node.get_good_values(tail.row, tail.col)
    value = next(iter(head_values))
    if value not in tail_values:
        return False

    tail_values.discard(value)
    if stats is not None:
        stats.values_pruned += 1
    return True


def get_connected_open_variables(node: SudokuNode, var: SudokuVar) -> List[SudokuVar]:
    """
    Unassigned cells sharing a row, column or box with ``var``.

    ``var`` itself and assigned cells are excluded. Each cell appears once,
    in row, column, box discovery order.
    """
    board = node.board
    n = board.size
    m = board.box_size
    found = {}

    for i in range(n):
        if board.is_empty(var.row, i):
            found.setdefault((var.row, i), None)
    for i in range(n):
        if board.is_empty(i, var.col):
            found.setdefault((i, var.col), None)

    box_row, box_col = board.get_box_origin(var.row, var.col)
    for i in range(m):
        for j in range(m):
            if board.is_empty(box_row + i, box_col + j):
                found.setdefault((box_row + i, box_col + j), None)

    found.pop((var.row, var.col), None)
    return [SudokuVar(r, c) for r, c in found]


def forward_check(
    node: SudokuNode,
    var: SudokuVar,
    stats: Optional[SolverStats] = None
) -> bool:
    """
    Prune the direct neighbours of a just-assigned cell.

    Every connected open cell is checked even after a wipe-out is found.
    Neighbours that collapse to a single value are not propagated further.

    Returns:
        False if some neighbour was left without candidates.
    """
    solvable = True
    for tail in get_connected_open_variables(node, var):
        if enforce_ac(node, var, tail, stats):
            if not node.get_good_values(tail.row, tail.col):
                solvable = False
    return solvable


def mac(
    node: SudokuNode,
    var: SudokuVar,
    stats: Optional[SolverStats] = None
) -> bool:
    """
    Maintain arc consistency from ``var`` with a FIFO worklist of arcs.

    Whenever an arc shrinks its tail, arcs from that tail to each of its own
    connected open cells are queued, so pruning cascades outward. Arcs are
    not de-duplicated.

    Returns:
        False as soon as a candidate set becomes empty, True once the queue
        drains.
    """
    queue = collections.deque(
        Arc(var, tail) for tail in get_connected_open_variables(node, var)
    )

    while queue:
        arc = queue.popleft()
        if enforce_ac(node, arc.head, arc.tail, stats):
            if not node.get_good_values(arc.tail.row, arc.tail.col):
                return False
            for neighbor in get_connected_open_variables(node, arc.tail):
                queue.append(Arc(arc.tail, neighbor))
    return True


def inference(
    node: SudokuNode,
    var: SudokuVar,
    config: SolverConfig,
    stats: Optional[SolverStats] = None
) -> bool:
    """Run the propagation selected by ``config`` after assigning ``var``."""
    if not config.inference:
        return True
    if config.use_mac:
        return mac(node, var, stats)
    return forward_check(node, var, stats)


def propagate_givens(
    node: SudokuNode,
    config: SolverConfig,
    stats: Optional[SolverStats] = None
) -> bool:
    """
    Let every given clue of a root node prune its neighbours.

    Runs ``inference`` once from each assigned cell, in row-major order.

    Returns:
        False if the clues leave some open cell without candidates.
    """
    if not config.inference or not config.propagate_givens:
        return True

    board = node.board
    for r in range(board.size):
        for c in range(board.size):
            if not board.is_empty(r, c):
                if not inference(node, SudokuVar(r, c), config, stats):
                    return False
    return True
