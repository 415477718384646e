"""
Cost-to-target table for the A* heuristic.

Runs Dijkstra backwards from the target over the 4-connected grid,
ignoring every run-length rule. Dropping constraints can only make paths
cheaper, so each value is an admissible lower bound for any movement
policy.

Entering a cell costs that cell's digit. Relaxing backwards from `pos` to
a neighbour therefore adds cost_at(pos): the forward move neighbour -> pos
enters pos.
"""

import heapq
from typing import List, Optional, Tuple

import numpy as np

from .direction import ALL_DIRECTIONS, Position
from .grid import HeatGrid


def compute_cost_to_target(grid: HeatGrid, target: Optional[Position] = None) -> np.ndarray:
    """
    Exact unconstrained cost from every cell to target.

    Args:
        grid: Heat grid
        target: Destination cell (bottom-right by default)

    Returns:
        float64 array of grid.shape; np.inf where target is unreachable.
        The array is read-only.
    """
    if target is None:
        target = grid.target
    if not grid.in_bounds(target):
        raise IndexError(f"Target {target} outside {grid.height}x{grid.width} grid")

    H, W = grid.shape
    costs = grid.costs
    dist = np.full((H, W), np.inf, dtype=np.float64)
    finalized = np.zeros((H, W), dtype=bool)

    dist[target] = 0.0
    pq: List[Tuple[int, int, int]] = [(0, target[0], target[1])]

    while pq:
        d, r, c = heapq.heappop(pq)
        if finalized[r, c]:
            continue
        finalized[r, c] = True

        step = int(costs[r, c])
        for direction in ALL_DIRECTIONS:
            nr, nc = r + direction.d_row, c + direction.d_col
            if nr < 0 or nr >= H or nc < 0 or nc >= W:
                continue
            if finalized[nr, nc]:
                continue
            nd = d + step
            if nd < dist[nr, nc]:
                dist[nr, nc] = nd
                heapq.heappush(pq, (nd, nr, nc))

    dist.setflags(write=False)
    return dist
