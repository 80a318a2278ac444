"""
A single search criterion: one field path bound to one operator and value.

Criteria are created by :meth:`SearchSpecification.add` and configured by
exactly one operator call, which hands control back to the owning
specification::

    spec = (
        SearchSpecification[Book]()
        .add("title").like(title_filter)
        .add("author", "name").only_if(with_author).eq(author_name)
    )
"""

from __future__ import annotations

from collections.abc import Collection
from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .exceptions import ValidationError
from .operators import COLLECTION_OPERATORS, ORDERING_OPERATORS, SearchOperator

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .specification import SearchSpecification

T = TypeVar("T")


@dataclass(frozen=True)
class CriterionClause:
    """Operator and operand of a configured criterion."""

    operator: SearchOperator
    value: Any


def is_collection(value: Any) -> bool:
    """True for sized containers other than ``str`` / ``bytes``."""
    return isinstance(value, Collection) and not isinstance(value, str | bytes)


def _is_orderable(value: Any) -> bool:
    # Sets define "<" as a subset test, which is not an ordering.
    if isinstance(value, AbstractSet):
        return False
    try:
        value < value  # noqa: B015
    except TypeError:
        return False
    return True


def _check_operand(operator: SearchOperator, value: Any, path: str) -> None:
    if operator is SearchOperator.LIKE and not isinstance(value, str):
        raise ValidationError(
            f"'{operator.value}' expects a string value, "
            f"got {type(value).__name__}",
            path=path,
        )
    if operator in COLLECTION_OPERATORS and not is_collection(value):
        raise ValidationError(
            f"'{operator.value}' expects a collection value, "
            f"got {type(value).__name__}",
            path=path,
        )
    if operator in ORDERING_OPERATORS and not _is_orderable(value):
        raise ValidationError(
            f"'{operator.value}' expects an orderable value, "
            f"got {type(value).__name__}",
            path=path,
        )


class SearchCriterion(Generic[T]):
    """
    One filter condition of a :class:`SearchSpecification`.

    Until an operator method is called the criterion is unconfigured
    (``clause is None``): it carries no value and is therefore never
    applied.  ``None`` values are accepted by every operator and mean
    "filter not requested".
    """

    def __init__(
        self,
        fields: Sequence[str],
        specification: SearchSpecification[T],
    ) -> None:
        self._fields = tuple(fields)
        self._specification = specification
        self.condition = True
        self.strict = False
        self.clause: CriterionClause | None = None

    # -- accessors -----------------------------------------------------------

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    @property
    def path(self) -> str:
        """Dotted form of the field path (``author.name``)."""
        return ".".join(self._fields)

    @property
    def operator(self) -> SearchOperator | None:
        return self.clause.operator if self.clause is not None else None

    @property
    def value(self) -> Any:
        return self.clause.value if self.clause is not None else None

    @property
    def is_configured(self) -> bool:
        return self.clause is not None

    # -- inclusion -----------------------------------------------------------

    def only_if(self, condition: bool | None) -> SearchCriterion[T]:
        """Apply the criterion only when *condition* is true."""
        self.condition = bool(condition)
        return self

    def has_value(self) -> bool:
        """
        Check whether a value has been set, or in the case of a
        collection, whether it is non-empty.
        """
        value = self.value
        if value is None:
            return False
        return not (is_collection(value) and len(value) == 0)

    # -- operators -----------------------------------------------------------

    def eq(self, value: Any) -> SearchSpecification[T]:
        return self._apply(SearchOperator.EQUALS, value)

    def ne(self, value: Any) -> SearchSpecification[T]:
        return self._apply(SearchOperator.NOT_EQUAL, value)

    def like(self, value: str | None) -> SearchSpecification[T]:
        """Case-insensitive substring match."""
        return self._apply(SearchOperator.LIKE, value)

    def in_(self, value: Collection[Any] | None) -> SearchSpecification[T]:
        """Membership test; skipped when *value* is empty."""
        return self._apply(SearchOperator.IN, value)

    def not_in(self, value: Collection[Any] | None) -> SearchSpecification[T]:
        return self._apply(SearchOperator.NOT_IN, value)

    def strictly_in(self, value: Collection[Any] | None) -> SearchSpecification[T]:
        """
        Membership test that is applied even when *value* is empty,
        in which case nothing matches.
        """
        self.strict = True
        return self._apply(SearchOperator.IN, () if value is None else value)

    def gt(self, value: Any) -> SearchSpecification[T]:
        return self._apply(SearchOperator.GREATER_THAN, value)

    def gte(self, value: Any) -> SearchSpecification[T]:
        return self._apply(SearchOperator.GREATER_THAN_EQUAL, value)

    def lt(self, value: Any) -> SearchSpecification[T]:
        return self._apply(SearchOperator.LESS_THAN, value)

    def lte(self, value: Any) -> SearchSpecification[T]:
        return self._apply(SearchOperator.LESS_THAN_EQUAL, value)

    # -- internals -----------------------------------------------------------

    def _apply(self, operator: SearchOperator, value: Any) -> SearchSpecification[T]:
        if value is not None:
            _check_operand(operator, value, self.path)
        self.clause = CriterionClause(operator, value)
        return self._specification

    def __repr__(self) -> str:
        return (
            f"SearchCriterion(fields={self._fields!r}, operator={self.operator!r}, "
            f"value={self.value!r}, condition={self.condition}, strict={self.strict})"
        )
