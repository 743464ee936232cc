"""Search configuration for the CSP solver."""

from __future__ import annotations
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SolverConfig:
    """
    Switches selecting how the backtracking search propagates and orders.

    Attributes:
        use_mac: Maintain arc consistency after each assignment. If False,
            only forward checking is done.
        use_mrv: Pick the unassigned cell with the fewest candidates. If
            False, pick the first unassigned cell in row-major order.
        inference: Run propagation at all. If False, ``use_mac`` is ignored.
        use_lcv: Least-constraining-value ordering. Not implemented; the
            search raises ``UnsupportedOrderingError`` when it is selected.
        depth_limit: Maximum recursion depth. None means n*n + 1.
        propagate_givens: Prune the neighbours of the given clues before
            the search starts.
    """
    use_mac: bool = True
    use_mrv: bool = True
    inference: bool = True
    use_lcv: bool = False
    depth_limit: Optional[int] = None
    propagate_givens: bool = True

    def __post_init__(self):
        if self.depth_limit is not None and self.depth_limit < 0:
            raise ValueError(f"depth_limit must be non-negative, got {self.depth_limit}")

    def resolve_depth_limit(self, size: int) -> int:
        """Depth limit to use for a board of side ``size``."""
        if self.depth_limit is None:
            return size * size + 1
        return self.depth_limit

    @property
    def label(self) -> str:
        """Short human-readable name, e.g. ``MAC+MRV`` or ``FC``."""
        if not self.inference:
            parts = ["NoInference"]
        else:
            parts = ["MAC" if self.use_mac else "FC"]
        if self.use_mrv:
            parts.append("MRV")
        if self.use_lcv:
            parts.append("LCV")
        return "+".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SolverConfig:
        """Build a config from a dict, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)
