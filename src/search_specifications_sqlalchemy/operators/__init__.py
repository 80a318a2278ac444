"""
SQLAlchemy strategies for every :class:`SearchOperator`.

Usage::

    from search_specifications_sqlalchemy.operators import DEFAULT_SQLA_REGISTRY

    clause = DEFAULT_SQLA_REGISTRY.apply(SearchOperator.LIKE, Book.title, "petit")
"""

from __future__ import annotations

from ..strategy import SQLAlchemyOperatorRegistry
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

BUILTIN_SQLA_OPERATORS = (
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


def build_default_sqla_registry() -> SQLAlchemyOperatorRegistry:
    """A new, independent registry with every built-in SQL strategy."""
    registry = SQLAlchemyOperatorRegistry()
    registry.register_all(*(strategy() for strategy in BUILTIN_SQLA_OPERATORS))
    return registry


DEFAULT_SQLA_REGISTRY: SQLAlchemyOperatorRegistry = build_default_sqla_registry()

__all__ = [
    "BUILTIN_SQLA_OPERATORS",
    "DEFAULT_SQLA_REGISTRY",
    "build_default_sqla_registry",
]
