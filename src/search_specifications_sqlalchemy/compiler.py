"""
Compile a :class:`SearchSpecification` into a SQLAlchemy ``Select``.

``build_search_statement`` creates a :class:`SQLAlchemyQueryContext`, lets
the specification resolve its paths (adding JOINs to the statement) and
applies the resulting predicate as the WHERE clause.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import func, select

from .context import SQLAlchemyQueryContext

if TYPE_CHECKING:
    from sqlalchemy import Select

    from search_specifications.specification import SearchSpecification

    from .strategy import SQLAlchemyOperatorRegistry


def build_search_statement(
    model: type[Any],
    spec: SearchSpecification[Any],
    *,
    stmt: Select[Any] | None = None,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> Select[Any]:
    """
    Build a filtered ``Select`` for *model*.

    Args:
        model: The root SQLAlchemy mapped class.
        spec: The search specification.
        stmt: Optional base statement.  Defaults to ``select(model)``.
        registry: Optional custom operator registry.  Falls back to
            ``DEFAULT_SQLA_REGISTRY``.

    Returns:
        The statement with the required JOINs and WHERE clause.  When
        joins were added it is made ``DISTINCT`` so that to-many
        relationships do not repeat root rows.
    """
    context = SQLAlchemyQueryContext(model, stmt, registry=registry)
    predicate = spec.to_predicate(context)
    result = context.stmt.where(predicate)
    if context.joins:
        result = result.distinct()
    return result


def build_count_statement(
    model: type[Any],
    spec: SearchSpecification[Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> Select[Any]:
    """``SELECT count(*)`` over the rows matched by *spec*."""
    inner = build_search_statement(model, spec, registry=registry)
    return select(func.count()).select_from(inner.subquery())
