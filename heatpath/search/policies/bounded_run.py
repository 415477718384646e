"""
Bounded Run Policy - Short straight runs, free turns, stop anywhere.
"""

from dataclasses import dataclass
from typing import Optional

from ..base import MovementPolicy, SearchNode
from ..direction import Direction, Position
from ..factory import register_policy


@dataclass(frozen=True)
class BoundedRunNode(SearchNode):
    """
    Attributes:
        remaining_steps: Further moves still allowed in the current direction
    """
    remaining_steps: int


@register_policy
class BoundedRunPolicy(MovementPolicy):
    """
    Policy for a mover that can only go a few cells in a straight line.

    Going straight spends one of the remaining steps; turning left or right
    is always allowed and refills the counter. There is no minimum run, so
    the mover may stop on the target at any time.
    """
    name = "bounded_run"
    description = "Bounded run - at most 3 cells straight, may turn or stop anytime"

    MAX_STRAIGHT = 3
    TURN_REFILL = MAX_STRAIGHT - 1

    def initial_node(self, start: Position) -> BoundedRunNode:
        return BoundedRunNode(
            position=start,
            direction=self.START_DIRECTION,
            remaining_steps=self.MAX_STRAIGHT,
        )

    def can_stop(self, node: SearchNode) -> bool:
        return True

    def _step(self, node: BoundedRunNode, direction: Direction,
              position: Position) -> Optional[BoundedRunNode]:
        if direction == node.direction:
            if node.remaining_steps == 0:
                return None
            remaining = node.remaining_steps - 1
        else:
            remaining = self.TURN_REFILL

        return BoundedRunNode(
            position=position,
            direction=direction,
            remaining_steps=remaining,
        )
