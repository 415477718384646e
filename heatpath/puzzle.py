"""
Puzzle Module - Entry operations from raw grid text to answers.
"""

import logging
from typing import Optional, Tuple

from .search import SearchContext, SearchResult, create_policy, find_cheapest_path

logger = logging.getLogger(__name__)


def cheapest_path(text: str, policy_name: str) -> SearchResult:
    """
    Solve one grid under a named policy.

    Args:
        text: Grid text
        policy_name: Registered policy name

    Returns:
        Full SearchResult including path and metrics

    Raises:
        FormatError: If text is not a valid grid
        ValueError: If policy_name is not registered
    """
    policy = create_policy(policy_name)
    context = SearchContext.from_text(text)
    return find_cheapest_path(context, policy)


def solve_bounded_run(text: str) -> Optional[int]:
    """Minimum heat loss with at most 3 cells in a straight line."""
    return cheapest_path(text, "bounded_run").cost


def solve_minimum_run(text: str) -> Optional[int]:
    """Minimum heat loss with straight runs of 4 to 10 cells."""
    return cheapest_path(text, "minimum_run").cost


def solve(text: str) -> Tuple[Optional[int], Optional[int]]:
    """
    Solve both policies, parsing and precomputing the heuristic once.

    Returns:
        (bounded_run cost, minimum_run cost)
    """
    context = SearchContext.from_text(text)
    bounded = find_cheapest_path(context, create_policy("bounded_run"))
    minimum = find_cheapest_path(context, create_policy("minimum_run"))
    logger.info(
        f"Solved {context.grid.height}x{context.grid.width} grid: "
        f"bounded_run={bounded.cost}, minimum_run={minimum.cost}"
    )
    return bounded.cost, minimum.cost
