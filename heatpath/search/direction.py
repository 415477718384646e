"""
Direction Module - Compass directions and grid positions.
"""

from enum import Enum
from typing import Tuple

# (row, col), origin at the top-left cell
Position = Tuple[int, int]


class Direction(Enum):
    """
    Direction of travel on the grid.

    Each member's value is its unit (d_row, d_col) delta.
    """
    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> 'Direction':
        """Direction after a 180 degree reversal."""
        return _OPPOSITES[self]

    @property
    def arrow(self) -> str:
        """Single-character glyph used when rendering paths."""
        return _ARROWS[self]

    def step(self, position: Position) -> Position:
        """
        Move one cell from position in this direction (no bounds check).

        Args:
            position: (row, col) to move from

        Returns:
            Adjacent (row, col)
        """
        return (position[0] + self.d_row, position[1] + self.d_col)


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

_ARROWS = {
    Direction.NORTH: "^",
    Direction.EAST: ">",
    Direction.SOUTH: "v",
    Direction.WEST: "<",
}

# Expansion order used by every movement policy
ALL_DIRECTIONS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)
