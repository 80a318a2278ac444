"""
In-memory operator strategies.

:class:`MemoryQueryContext` looks a :class:`MemoryOperator` up in a
:class:`MemoryOperatorRegistry` for every fragment it compiles, then
calls it once per value reachable from the candidate.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .registry import OperatorRegistry, OperatorStrategy

if TYPE_CHECKING:
    from .operators import SearchOperator


class MemoryOperator(OperatorStrategy, ABC):
    """Decides whether one Python value satisfies one operator."""

    @abstractmethod
    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        """
        Args:
            field_value: Value read from the candidate, possibly ``None``.
            condition_value: Operand stored on the criterion.
        """


class MemoryOperatorRegistry(OperatorRegistry[MemoryOperator]):
    """
    Usage::

        registry = MemoryOperatorRegistry()
        registry.register(EqualOperator())
        registry.evaluate(SearchOperator.EQUALS, "Matilda", "Matilda")  # True
    """

    def evaluate(
        self, operator: SearchOperator, field_value: Any, condition_value: Any
    ) -> bool:
        return self.require(operator).evaluate(field_value, condition_value)
