"""Comparison operators rendered as SQL binary expressions."""

from __future__ import annotations

from operator import eq, ge, gt, le, lt, ne
from typing import TYPE_CHECKING, Any, ClassVar, cast

from search_specifications.operators import SearchOperator

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class _BinaryComparison(SQLAlchemyOperator):
    compare: ClassVar[Any]

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", type(self).compare(column, value))


class EqualOperator(_BinaryComparison):
    operator = SearchOperator.EQUALS
    compare = eq


class NotEqualOperator(_BinaryComparison):
    operator = SearchOperator.NOT_EQUAL
    compare = ne


class GreaterThanOperator(_BinaryComparison):
    operator = SearchOperator.GREATER_THAN
    compare = gt


class GreaterEqualOperator(_BinaryComparison):
    operator = SearchOperator.GREATER_THAN_EQUAL
    compare = ge


class LessThanOperator(_BinaryComparison):
    operator = SearchOperator.LESS_THAN
    compare = lt


class LessEqualOperator(_BinaryComparison):
    operator = SearchOperator.LESS_THAN_EQUAL
    compare = le
