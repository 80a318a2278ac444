"""Membership operators.

An empty operand renders SQLAlchemy's empty-set expression: ``IN`` then
matches no row and ``NOT IN`` matches every non-NULL row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from search_specifications.operators import SearchOperator

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class InOperator(SQLAlchemyOperator):
    operator = SearchOperator.IN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return column.in_(list(value))  # type: ignore[no-any-return]


class NotInOperator(SQLAlchemyOperator):
    operator = SearchOperator.NOT_IN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return column.not_in(list(value))  # type: ignore[no-any-return]
