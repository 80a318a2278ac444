"""
Query context: the capability interface a search specification compiles against.

A backend implements :class:`QueryContext` to expose its entity graph
(``root`` / ``join`` / ``attribute``) and its predicate-building API
(``fragment`` / ``conjunction``).  :class:`SearchSpecification` depends on
nothing else, so any store able to satisfy these five operations can
evaluate it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .operators import SearchOperator

P = TypeVar("P")


class QueryContext(ABC, Generic[P]):
    """
    Backend-specific entity resolution and predicate construction.

    ``P`` is the predicate type produced by the backend (a SQLAlchemy
    ``ColumnElement[bool]``, a Python callable, ...).
    """

    @property
    @abstractmethod
    def root(self) -> Any:
        """Reference to the entity being searched."""
        ...

    @abstractmethod
    def join(self, source: Any, name: str, *, path: str | None = None) -> Any:
        """
        Traverse the relationship *name* from *source*.

        Args:
            source: ``root`` or a reference previously returned by ``join``.
            name: Relationship name on *source*.
            path: Full dotted field path, for error reporting.

        Returns:
            A reference to the joined entity.
        """
        ...

    @abstractmethod
    def attribute(self, source: Any, name: str, *, path: str | None = None) -> Any:
        """Read the attribute *name* off *source*."""
        ...

    @abstractmethod
    def fragment(self, operator: SearchOperator, attribute: Any, value: Any) -> P:
        """
        Build one predicate fragment.

        Raises:
            OperatorNotSupportedError: If the backend cannot translate
                *operator*.
        """
        ...

    @abstractmethod
    def conjunction(self, fragments: Sequence[P]) -> P:
        """AND the fragments together.  No fragments means always true."""
        ...
