"""
A* path search engine, parameterised by a movement policy.

The policy supplies the start node, the legal successors of a node and
the stop condition; the engine supplies everything else. Node identity
includes the policy's run state, so the visited set never merges two
states that differ only in how far the mover has gone straight.

Frontier entries are (f, g, seq, node): lower f first, then lower g,
then seq. seq increases for FIFO tie-breaking and decreases for LIFO;
either order yields the same minimum cost.
"""

import heapq
import logging
import time
from typing import Dict, List, Optional, Set, Tuple

from .base import MovementPolicy, SearchNode
from .context import SearchContext
from .direction import Position
from .solution import SearchMetrics, SearchResult

logger = logging.getLogger(__name__)

TIE_BREAKS = ("fifo", "lifo")


def find_cheapest_path(context: SearchContext, policy: MovementPolicy,
                       tie_break: str = "fifo") -> SearchResult:
    """
    Find the minimum total cost from context.start to context.target.

    Args:
        context: Grid, heuristic table and endpoints
        policy: Movement policy constraining legal moves
        tie_break: "fifo" or "lifo" ordering among equal (f, g) entries

    Returns:
        SearchResult; cost is None when the target is unreachable

    Raises:
        ValueError: If tie_break is not recognised
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"Unknown tie_break: {tie_break}. Available: {', '.join(TIE_BREAKS)}")
    seq_step = 1 if tie_break == "fifo" else -1

    start_time = time.perf_counter()
    grid = context.grid
    target = context.target
    metrics = SearchMetrics(policy_name=policy.name)

    visited: Set[SearchNode] = set()
    best_cost: Dict[SearchNode, int] = {}
    parent: Dict[SearchNode, SearchNode] = {}
    frontier: List[Tuple[float, int, int, SearchNode]] = []
    seq = 0

    start_node = policy.initial_node(context.start)
    best_cost[start_node] = 0
    heapq.heappush(frontier, (policy.heuristic(start_node, context.cost_to_target), 0, seq, start_node))
    metrics.nodes_pushed += 1

    while frontier:
        _, cost, _, node = heapq.heappop(frontier)

        if node.position == target and policy.can_stop(node):
            metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
            logger.debug(
                f"{policy.name}: cost {cost} on {grid.height}x{grid.width} grid, "
                f"{metrics.nodes_expanded} nodes expanded"
            )
            return SearchResult(
                cost=cost,
                path=_reconstruct_path(parent, node),
                metrics=metrics,
            )

        # Ignore stale pops
        if node in visited:
            metrics.stale_skipped += 1
            continue

        for neighbor in policy.expand(node, grid):
            if neighbor is None:
                continue

            neighbor_cost = cost + grid.cost_at(neighbor.position)
            known = best_cost.get(neighbor)
            if known is not None and known <= neighbor_cost:
                continue  # already on the frontier with an equal or better path

            best_cost[neighbor] = neighbor_cost
            parent[neighbor] = node
            seq += seq_step
            priority = neighbor_cost + policy.heuristic(neighbor, context.cost_to_target)
            heapq.heappush(frontier, (priority, neighbor_cost, seq, neighbor))
            metrics.nodes_pushed += 1

        visited.add(node)
        metrics.nodes_expanded += 1

    metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
    logger.debug(
        f"{policy.name}: target {target} unreachable on {grid.height}x{grid.width} grid, "
        f"{metrics.nodes_expanded} nodes expanded"
    )
    return SearchResult(cost=None, path=[], metrics=metrics)


def _reconstruct_path(parent: Dict[SearchNode, SearchNode], end: SearchNode) -> List[Position]:
    path: List[Position] = []
    cur: Optional[SearchNode] = end
    while cur is not None:
        path.append(cur.position)
        cur = parent.get(cur)
    path.reverse()
    return path
