"""Membership operators: in, not_in."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import SearchOperator


class InOperator(MemoryOperator):
    operator = SearchOperator.IN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return field_value is not None and field_value in condition_value


class NotInOperator(MemoryOperator):
    """Negated membership; a ``None`` field is unknown, so it never matches."""

    operator = SearchOperator.NOT_IN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return field_value is not None and field_value not in condition_value
