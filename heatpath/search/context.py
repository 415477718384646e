"""
Search Context Module - Read-only inputs shared by searches over one grid.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .direction import Position
from .grid import HeatGrid
from .heuristic import compute_cost_to_target


@dataclass(frozen=True, eq=False)
class SearchContext:
    """
    Inputs for a path search: the grid, its heuristic table and endpoints.

    Both the grid and the table are read-only, so one context can be
    searched with several policies.

    Attributes:
        grid: Heat grid to search
        cost_to_target: Heuristic table for target
        start: Start cell
        target: Destination cell
    """
    grid: HeatGrid
    cost_to_target: np.ndarray
    start: Position
    target: Position

    @classmethod
    def create(cls, grid: HeatGrid, start: Optional[Position] = None,
               target: Optional[Position] = None) -> 'SearchContext':
        """
        Build a context, computing the heuristic table once.

        Args:
            grid: Heat grid
            start: Start cell (top-left by default)
            target: Destination cell (bottom-right by default)

        Returns:
            SearchContext instance
        """
        start = grid.start if start is None else start
        target = grid.target if target is None else target
        if not grid.in_bounds(start):
            raise IndexError(f"Start {start} outside {grid.height}x{grid.width} grid")
        return cls(
            grid=grid,
            cost_to_target=compute_cost_to_target(grid, target),
            start=start,
            target=target,
        )

    @classmethod
    def from_text(cls, text: str) -> 'SearchContext':
        """Parse grid text and build a top-left to bottom-right context."""
        return cls.create(HeatGrid.from_text(text))
