"""Comparison operators: =, !=, >, >=, <, <=.

A ``None`` field value never satisfies a comparison, as in SQL.
"""

from __future__ import annotations

from operator import eq, ge, gt, le, lt, ne
from typing import Any, ClassVar

from ..evaluator import MemoryOperator
from ..operators import SearchOperator


class _Comparison(MemoryOperator):
    compare: ClassVar[Any]

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(type(self).compare(field_value, condition_value))


class EqualOperator(_Comparison):
    operator = SearchOperator.EQUALS
    compare = eq


class NotEqualOperator(_Comparison):
    operator = SearchOperator.NOT_EQUAL
    compare = ne


class GreaterThanOperator(_Comparison):
    operator = SearchOperator.GREATER_THAN
    compare = gt


class GreaterEqualOperator(_Comparison):
    operator = SearchOperator.GREATER_THAN_EQUAL
    compare = ge


class LessThanOperator(_Comparison):
    operator = SearchOperator.LESS_THAN
    compare = lt


class LessEqualOperator(_Comparison):
    operator = SearchOperator.LESS_THAN_EQUAL
    compare = le
