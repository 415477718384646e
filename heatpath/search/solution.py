"""
Solution Module - Result of a path search.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .direction import Direction, Position
from .grid import HeatGrid


@dataclass
class SearchMetrics:
    """
    Performance metrics for a search.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        nodes_expanded: Nodes popped and expanded (the visited set size)
        nodes_pushed: Frontier pushes, including the initial node
        stale_skipped: Popped entries dropped because already visited
        policy_name: Name of the policy that constrained the search
    """
    computation_time_ms: float = 0.0
    nodes_expanded: int = 0
    nodes_pushed: int = 0
    stale_skipped: int = 0
    policy_name: str = ""


@dataclass
class SearchResult:
    """
    Outcome of a path search.

    Unreachable is a normal outcome: cost and path are both empty.

    Attributes:
        cost: Minimum total cost, or None if no legal path exists
        path: Cells visited from start to target (inclusive)
        metrics: Performance statistics
    """
    cost: Optional[int] = None
    path: List[Position] = field(default_factory=list)
    metrics: SearchMetrics = field(default_factory=SearchMetrics)

    @property
    def is_reachable(self) -> bool:
        return self.cost is not None

    @property
    def step_count(self) -> int:
        """Number of moves in the path."""
        return max(0, len(self.path) - 1)

    def render(self, grid: HeatGrid) -> str:
        """
        Draw the grid with the path marked by direction arrows.

        Cells on the path (except the start) show the arrow of the move
        that entered them; other cells show their digit.
        """
        rows = [[str(v) for v in row] for row in grid.to_rows()]
        for (r0, c0), (r1, c1) in zip(self.path, self.path[1:]):
            rows[r1][c1] = Direction((r1 - r0, c1 - c0)).arrow
        return "\n".join("".join(row) for row in rows)
