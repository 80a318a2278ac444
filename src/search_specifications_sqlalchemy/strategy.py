"""
SQL operator strategies.

A :class:`SQLAlchemyOperator` turns a mapped attribute and a criterion
operand into a boolean SQL expression.  :class:`SQLAlchemyQueryContext`
finds them through a :class:`SQLAlchemyOperatorRegistry`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from search_specifications.registry import OperatorRegistry, OperatorStrategy

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from search_specifications.operators import SearchOperator


class SQLAlchemyOperator(OperatorStrategy, ABC):
    """Builds the WHERE fragment for one operator."""

    @abstractmethod
    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        """
        Args:
            column: Instrumented attribute, usually on an ``aliased()``
                entity created for a join.
            value: Operand stored on the criterion.
        """


class SQLAlchemyOperatorRegistry(OperatorRegistry[SQLAlchemyOperator]):
    def apply(
        self, operator: SearchOperator, column: Any, value: Any
    ) -> ColumnElement[bool]:
        """
        Raises:
            OperatorNotSupportedError: If *operator* has no strategy.
        """
        return self.require(operator).apply(column, value)
