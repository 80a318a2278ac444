"""
In-memory strategies for every :class:`SearchOperator`.

Usage::

    from search_specifications.operators_memory import build_default_registry

    registry = build_default_registry()
    registry.evaluate(SearchOperator.LIKE, "Le Petit Prince", "petit")  # True
"""

from __future__ import annotations

from ..evaluator import MemoryOperatorRegistry
from .set import InOperator, NotInOperator
from .standard import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NotEqualOperator,
)
from .string import LikeOperator

BUILTIN_OPERATORS = (
    EqualOperator,
    NotEqualOperator,
    GreaterThanOperator,
    GreaterEqualOperator,
    LessThanOperator,
    LessEqualOperator,
    InOperator,
    NotInOperator,
    LikeOperator,
)


def build_default_registry() -> MemoryOperatorRegistry:
    """
    A new registry holding one instance of every built-in strategy.

    Each call returns an independent registry, so unregistering an
    operator does not leak into ``DEFAULT_MEMORY_REGISTRY``.
    """
    registry = MemoryOperatorRegistry()
    registry.register_all(*(strategy() for strategy in BUILTIN_OPERATORS))
    return registry


DEFAULT_MEMORY_REGISTRY: MemoryOperatorRegistry = build_default_registry()

__all__ = [
    "BUILTIN_OPERATORS",
    "DEFAULT_MEMORY_REGISTRY",
    "build_default_registry",
]
