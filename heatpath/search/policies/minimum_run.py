"""
Minimum Run Policy - Long straight runs with a lower and an upper bound.
"""

from dataclasses import dataclass
from typing import Optional

from ..base import MovementPolicy, SearchNode
from ..direction import Direction, Position
from ..factory import register_policy


@dataclass(frozen=True)
class MinimumRunNode(SearchNode):
    """
    Attributes:
        consecutive_steps: Moves already made in the current direction
                           (0 only for the initial node)
    """
    consecutive_steps: int


@register_policy
class MinimumRunPolicy(MovementPolicy):
    """
    Policy for a heavy mover that needs a run-up before it can turn.

    The mover must travel MIN_STRAIGHT cells in a direction before it may
    turn or stop, and must turn after MAX_STRAIGHT cells. The initial node
    has made no moves yet and may leave in any direction.
    """
    name = "minimum_run"
    description = "Minimum run with cap - 4 to 10 cells straight before turning or stopping"

    MIN_STRAIGHT = 4
    MAX_STRAIGHT = 10

    def initial_node(self, start: Position) -> MinimumRunNode:
        return MinimumRunNode(
            position=start,
            direction=self.START_DIRECTION,
            consecutive_steps=0,
        )

    def can_stop(self, node: MinimumRunNode) -> bool:
        return node.consecutive_steps >= self.MIN_STRAIGHT

    def _step(self, node: MinimumRunNode, direction: Direction,
              position: Position) -> Optional[MinimumRunNode]:
        is_initial = node.consecutive_steps == 0

        if direction == node.direction:
            if node.consecutive_steps >= self.MAX_STRAIGHT and not is_initial:
                return None
            consecutive = node.consecutive_steps + 1
        else:
            if node.consecutive_steps < self.MIN_STRAIGHT and not is_initial:
                return None
            consecutive = 1

        return MinimumRunNode(
            position=position,
            direction=direction,
            consecutive_steps=consecutive,
        )
