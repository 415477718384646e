"""
Grid Module - Immutable heat-loss grid parsed from puzzle text.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .direction import Direction, Position

DIGITS = frozenset("0123456789")


class FormatError(ValueError):
    """Raised when grid text is empty, ragged or contains a non-digit."""


def _is_digit_cost(value) -> bool:
    # bool is an int subclass but never a valid cost
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return False
    return 0 <= value <= 9


@dataclass(frozen=True, eq=False)
class HeatGrid:
    """
    Immutable rectangular grid of per-cell entry costs.

    Backed by a read-only uint8 array so the grid can be shared between
    searches without copying.

    Attributes:
        costs: 2-D array of costs 0-9, indexed [row, col]
    """
    costs: np.ndarray

    def __post_init__(self):
        if self.costs.ndim != 2 or self.costs.size == 0:
            raise FormatError("Grid must be a non-empty 2-D array")
        self.costs.setflags(write=False)

    @classmethod
    def from_text(cls, text: str) -> 'HeatGrid':
        """
        Parse a block of digit lines.

        A trailing newline is optional; CRLF line endings are accepted.

        Args:
            text: One line per grid row, one digit per cell

        Returns:
            HeatGrid instance

        Raises:
            FormatError: If input is empty, ragged or has a non-digit
        """
        # Only "\n" separates rows; any other control character must fail the digit check
        lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
        while lines and not lines[-1]:
            lines.pop()
        if not lines or not lines[0]:
            raise FormatError("Grid input is empty")

        width = len(lines[0])
        for row, line in enumerate(lines):
            if len(line) != width:
                raise FormatError(
                    f"Line {row + 1} has length {len(line)}, expected {width}"
                )
            for col, char in enumerate(line):
                if char not in DIGITS:
                    raise FormatError(
                        f"Invalid character {char!r} at line {row + 1}, column {col + 1}"
                    )

        costs = np.array([[ord(c) - ord("0") for c in line] for line in lines],
                         dtype=np.uint8)
        return cls(costs=costs)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'HeatGrid':
        """
        Create a grid from nested integer lists.

        Args:
            rows: 2-D list of costs 0-9

        Returns:
            HeatGrid instance

        Raises:
            FormatError: If rows are empty, ragged or out of range
        """
        if not rows or not rows[0]:
            raise FormatError("Grid input is empty")
        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise FormatError(f"Row {r} has length {len(row)}, expected {width}")
            for c, value in enumerate(row):
                if not _is_digit_cost(value):
                    raise FormatError(f"Cost {value!r} at ({r}, {c}) is not a digit")
        return cls(costs=np.array(rows, dtype=np.uint8))

    @property
    def height(self) -> int:
        """Number of rows."""
        return int(self.costs.shape[0])

    @property
    def width(self) -> int:
        """Number of columns."""
        return int(self.costs.shape[1])

    @property
    def shape(self):
        return (self.height, self.width)

    @property
    def start(self) -> Position:
        """Top-left cell, where every search begins."""
        return (0, 0)

    @property
    def target(self) -> Position:
        """Bottom-right cell."""
        return (self.height - 1, self.width - 1)

    def in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.height and 0 <= col < self.width

    def cost_at(self, position: Position) -> int:
        """
        Cost of entering the cell at position.

        Raises:
            IndexError: If position is outside the grid
        """
        if not self.in_bounds(position):
            raise IndexError(f"Position {position} outside {self.height}x{self.width} grid")
        return int(self.costs[position])

    def neighbor(self, position: Position, direction: Direction) -> Optional[Position]:
        """
        Get the adjacent cell in a direction.

        Returns:
            Neighbouring (row, col), or None if it falls off the grid
        """
        candidate = direction.step(position)
        if self.in_bounds(candidate):
            return candidate
        return None

    def with_cost(self, position: Position, cost: int) -> 'HeatGrid':
        """
        Create a copy of the grid with one cell changed.

        Original grid is unchanged.

        Raises:
            IndexError: If position is outside the grid
            FormatError: If cost is not an integer 0-9
        """
        if not self.in_bounds(position):
            raise IndexError(f"Position {position} outside {self.height}x{self.width} grid")
        if not _is_digit_cost(cost):
            raise FormatError(f"Cost {cost!r} is not a digit")
        new_costs = self.costs.copy()
        new_costs[position] = cost
        return HeatGrid(costs=new_costs)

    def to_rows(self) -> List[List[int]]:
        return self.costs.tolist()

    def to_text(self) -> str:
        """Render back to the puzzle text format (no trailing newline)."""
        return "\n".join("".join(str(v) for v in row) for row in self.to_rows())

    def __eq__(self, other):
        if not isinstance(other, HeatGrid):
            return False
        return np.array_equal(self.costs, other.costs)

    def __hash__(self):
        return hash((self.costs.shape, self.costs.tobytes()))
