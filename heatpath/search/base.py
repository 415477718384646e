"""
Base Policy Module - Abstract base class for movement policies.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Union

import numpy as np

from .direction import ALL_DIRECTIONS, Direction, Position
from .grid import HeatGrid


@dataclass(frozen=True)
class SearchNode:
    """
    One state of the constrained search.

    Policies subclass this to add their run-length bookkeeping. Equality
    and hashing cover every field, so two nodes only collide when position,
    direction and run state all match.

    Attributes:
        position: (row, col) of the mover
        direction: Direction of travel used to reach position
    """
    position: Position
    direction: Direction


class MovementPolicy(ABC):
    """
    Abstract base class for movement policies.

    A policy decides which moves are legal from a node and whether the
    mover may stop on the target. Subclasses implement initial_node(),
    can_stop() and _step(), and define name and description class
    attributes.

    Attributes:
        name: Short identifier used by the registry and CLI
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base policy"

    # The start is the top-left corner, so facing SOUTH only forbids a first
    # move NORTH, which would leave the grid anyway. Not valid for other starts.
    START_DIRECTION: Direction = Direction.SOUTH

    @abstractmethod
    def initial_node(self, start: Position) -> SearchNode:
        """
        Create the node the search starts from.

        Args:
            start: Start cell

        Returns:
            Node facing START_DIRECTION with the policy's initial run state
        """
        pass

    @abstractmethod
    def can_stop(self, node: SearchNode) -> bool:
        """
        Check whether the mover may finish at this node.

        Only consulted when node.position is the target.
        """
        pass

    @abstractmethod
    def _step(self, node: SearchNode, direction: Direction,
              position: Position) -> Optional[SearchNode]:
        """
        Apply the run-length rule for one move.

        Bounds and reversal are already checked by expand().

        Args:
            node: Current node
            direction: Direction of the move
            position: In-bounds cell the move lands on

        Returns:
            Successor node, or None if the run rule forbids the move
        """
        pass

    def expand(self, node: SearchNode, grid: HeatGrid) -> List[Optional[SearchNode]]:
        """
        Enumerate candidate successors, one slot per compass direction.

        Args:
            node: Node to expand
            grid: Grid being searched

        Returns:
            Four entries ordered N, E, S, W; None where the move is illegal
        """
        successors: List[Optional[SearchNode]] = []
        for direction in ALL_DIRECTIONS:
            position = grid.neighbor(node.position, direction)
            if position is None or direction == node.direction.opposite:
                successors.append(None)
                continue
            successors.append(self._step(node, direction, position))
        return successors

    def heuristic(self, node: SearchNode, cost_to_target: np.ndarray) -> Union[int, float]:
        """
        Admissible estimate of the remaining cost from node.

        Args:
            node: Node to estimate
            cost_to_target: Table from compute_cost_to_target()

        Returns:
            Integer lower bound, or math.inf if the target is unreachable
        """
        estimate = cost_to_target[node.position]
        if np.isinf(estimate):
            return math.inf
        return int(estimate)
