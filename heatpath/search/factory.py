"""
Policy registry - maps CLI/config names to movement policy classes.

Policies register themselves at import time (see policies/__init__.py), so
registration order is import order. That order is the order in which
"all" runs and reports the policies.
"""

from typing import Dict, List, Type

from .base import MovementPolicy

# Selection keyword meaning every registered policy; never a policy name
ALL_POLICIES = "all"

_POLICIES: Dict[str, Type[MovementPolicy]] = {}


def register_policy(cls: Type[MovementPolicy]) -> Type[MovementPolicy]:
    """
    Class decorator adding a policy to the registry under cls.name.

    Raises:
        ValueError: If the name is reserved or already taken by another class
    """
    name = cls.name
    if name == ALL_POLICIES or name == MovementPolicy.name:
        raise ValueError(f"Policy name {name!r} is reserved")
    existing = _POLICIES.get(name)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Policy name {name!r} already registered by {existing.__qualname__}"
        )
    _POLICIES[name] = cls
    return cls


def create_policy(name: str) -> MovementPolicy:
    """
    Instantiate a registered policy.

    Raises:
        ValueError: If name is not registered (message lists what is)
    """
    try:
        return _POLICIES[name]()
    except KeyError:
        available = ", ".join(_POLICIES)
        raise ValueError(f"Unknown policy: {name}. Available: {available}") from None


def select_policies(selection: str) -> List[MovementPolicy]:
    """
    Resolve a CLI/config selection to policy instances.

    Args:
        selection: A policy name, or "all" for every policy in registration order

    Raises:
        ValueError: If selection names no registered policy
    """
    if selection == ALL_POLICIES:
        return [cls() for cls in _POLICIES.values()]
    return [create_policy(selection)]


def get_policy_names() -> List[str]:
    """Registered names, in registration order."""
    return list(_POLICIES)


def get_policy_info() -> List[Dict[str, str]]:
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _POLICIES.values()
    ]
