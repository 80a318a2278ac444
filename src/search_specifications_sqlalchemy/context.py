"""
SQLAlchemy query context.

Resolves field paths against mapped classes and accumulates the JOINs
they require on a ``Select`` statement.  Every ``join`` call adds a new
``aliased()`` entity, so two criteria on ``author.name`` produce two
independent joins to the author table.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, inspect, select, true
from sqlalchemy.orm import aliased

from search_specifications.context import QueryContext
from search_specifications.exceptions import (
    FieldNotFoundError,
    RelationshipTraversalError,
)

from .operators import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy import ColumnElement, Select
    from sqlalchemy.orm import Mapper

    from search_specifications.operators import SearchOperator

    from .strategy import SQLAlchemyOperatorRegistry

logger = logging.getLogger(__name__)


def _public_keys(keys: Any) -> list[str]:
    return [key for key in keys if not key.startswith("_")]


class SQLAlchemyQueryContext(QueryContext["ColumnElement[bool]"]):
    """
    :class:`QueryContext` over a SQLAlchemy mapped class.

    Attributes:
        model: Root mapped class.
        stmt: Statement the joins are appended to.  Defaults to
            ``select(model)``.
        registry: Operator strategies.  Defaults to ``DEFAULT_SQLA_REGISTRY``.
        joins: Aliased entities joined so far, in creation order.
    """

    def __init__(
        self,
        model: type[Any],
        stmt: Select[Any] | None = None,
        *,
        registry: SQLAlchemyOperatorRegistry | None = None,
    ) -> None:
        self.model = model
        self.stmt: Select[Any] = stmt if stmt is not None else select(model)
        self.registry = registry or DEFAULT_SQLA_REGISTRY
        self.joins: list[Any] = []

    @property
    def root(self) -> type[Any]:
        return self.model

    @staticmethod
    def _mapper(source: Any) -> Mapper[Any]:
        return inspect(source).mapper  # type: ignore[no-any-return]

    def join(self, source: Any, name: str, *, path: str | None = None) -> Any:
        mapper = self._mapper(source)
        model_name = mapper.class_.__name__

        if name not in mapper.relationships:
            if name in mapper.all_orm_descriptors:
                raise RelationshipTraversalError(name, model_name, full_path=path)
            raise FieldNotFoundError(
                name,
                model_name,
                _public_keys(mapper.relationships.keys()),
                full_path=path,
            )

        target = aliased(mapper.relationships[name].mapper.class_)
        self.stmt = self.stmt.join(getattr(source, name).of_type(target))
        self.joins.append(target)
        logger.debug("Joined %s.%s for '%s'", model_name, name, path or name)
        return target

    def attribute(self, source: Any, name: str, *, path: str | None = None) -> Any:
        mapper = self._mapper(source)
        if name not in mapper.all_orm_descriptors:
            raise FieldNotFoundError(
                name,
                mapper.class_.__name__,
                _public_keys(mapper.all_orm_descriptors.keys()),
                full_path=path,
            )
        return getattr(source, name)

    def fragment(
        self, operator: SearchOperator, attribute: Any, value: Any
    ) -> ColumnElement[bool]:
        return self.registry.apply(operator, attribute, value)

    def conjunction(self, fragments: Sequence[ColumnElement[bool]]) -> ColumnElement[bool]:
        return and_(true(), *fragments)
