"""
Search Package - Constrained cheapest-path search over heat grids.

This package provides an A* engine with a pluggable movement policy
framework. Policies decide which moves are legal and when the mover may
stop; the engine is shared.

Public API:
    - HeatGrid: Immutable grid of cell costs
    - FormatError: Raised for malformed grid text
    - Direction: Compass direction with deltas and opposite
    - compute_cost_to_target(): Admissible heuristic table
    - SearchContext: Grid, heuristic table and endpoints
    - SearchNode: Base search state
    - MovementPolicy: Abstract base for policies
    - SearchResult / SearchMetrics: Search outcome and statistics
    - find_cheapest_path(): A* engine
    - create_policy(): Factory function
    - select_policies(): Resolve a name or "all" to policy instances
    - get_policy_names(): List available policies in registration order
    - get_policy_info(): Get policy metadata

Usage:
    from heatpath.search import HeatGrid, SearchContext, create_policy, find_cheapest_path

    grid = HeatGrid.from_text(text)
    context = SearchContext.create(grid)

    result = find_cheapest_path(context, create_policy("minimum_run"))
    if result.is_reachable:
        print(f"Cost {result.cost} over {result.step_count} moves")
"""

# Core data structures
from .direction import Direction, Position
from .grid import HeatGrid, FormatError
from .heuristic import compute_cost_to_target
from .context import SearchContext
from .solution import SearchResult, SearchMetrics

# Policy framework
from .base import MovementPolicy, SearchNode
from .factory import (
    create_policy,
    get_policy_names,
    get_policy_info,
    register_policy,
    select_policies,
    ALL_POLICIES,
)
from .engine import find_cheapest_path

# Import policies to register them
from . import policies

__all__ = [
    # Data structures
    "Direction",
    "Position",
    "HeatGrid",
    "FormatError",
    "compute_cost_to_target",
    "SearchContext",
    "SearchResult",
    "SearchMetrics",
    # Policy framework
    "MovementPolicy",
    "SearchNode",
    "create_policy",
    "get_policy_names",
    "get_policy_info",
    "register_policy",
    "select_policies",
    "ALL_POLICIES",
    "find_cheapest_path",
]
