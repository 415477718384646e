"""
Policies Package - Concrete movement policy implementations.

Import this module to register all built-in policies.
"""

from .bounded_run import BoundedRunNode, BoundedRunPolicy
from .minimum_run import MinimumRunNode, MinimumRunPolicy

__all__ = [
    "BoundedRunNode",
    "BoundedRunPolicy",
    "MinimumRunNode",
    "MinimumRunPolicy",
]
