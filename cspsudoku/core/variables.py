"""Search variables and arcs between them."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class SudokuVar:
    """A cell coordinate used as a search decision point and as an arc endpoint."""
    row: int
    col: int


@dataclass(frozen=True)
class Arc:
    """Directed arc: propagate head's constraint onto tail's domain."""
    head: SudokuVar
    tail: SudokuVar
