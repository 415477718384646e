"""
heatpath - Cheapest path through a heat-loss grid under run-length rules.

Usage:
    from heatpath import solve_bounded_run, solve_minimum_run

    text = Path("input.txt").read_text()
    print(solve_bounded_run(text), solve_minimum_run(text))
"""

from .puzzle import cheapest_path, solve, solve_bounded_run, solve_minimum_run
from .search import FormatError

__all__ = [
    "cheapest_path",
    "solve",
    "solve_bounded_run",
    "solve_minimum_run",
    "FormatError",
]
