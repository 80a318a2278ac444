"""
Fluent builder turning optional search criteria into one AND predicate.

Example::

    spec = (
        SearchSpecification[Book]()
        .add("title").like(form.title)
        .add("publication_date").gte(form.published_after)
        .add("author", "name").in_(form.author_names)
    )
    stmt = build_search_statement(Book, spec)

Every criterion whose value is missing (``None`` or an empty collection)
is left out, so unset form fields simply do not filter.  A criterion
built with ``strictly_in`` is always applied, and an empty collection
then matches nothing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .criterion import SearchCriterion, is_collection
from .exceptions import ValidationError
from .memory import MemoryQueryContext

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .context import QueryContext
    from .evaluator import MemoryOperatorRegistry

T = TypeVar("T")
P = TypeVar("P")

logger = logging.getLogger(__name__)


def _normalise_path(fields: tuple[str | Sequence[str], ...]) -> tuple[str, ...]:
    """
    Flatten ``("author.name",)``, ``("author", "name")`` and
    ``(["author", "name"],)`` into segments.
    """
    items: Sequence[Any] = fields
    if len(fields) == 1 and isinstance(fields[0], list | tuple):
        items = fields[0]
    names: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise ValidationError(
                f"Field path segments must be strings, got {type(item).__name__}"
            )
        names.append(item)
    segments = tuple(part for name in names for part in name.split("."))
    if not segments:
        raise ValidationError("A field path needs at least one segment")
    if any(not part for part in segments):
        raise ValidationError(
            f"Field path contains an empty segment: {'.'.join(names)!r}",
            path=".".join(names),
        )
    return segments


class SearchSpecification(Generic[T]):
    """
    Ordered collection of :class:`SearchCriterion` compiled into one
    conjunctive predicate by :meth:`to_predicate`.

    A criterion contributes only when

    * its ``condition`` is true (see :meth:`SearchCriterion.only_if`), and
    * it is ``strict`` or :meth:`SearchCriterion.has_value` is true.

    The specification is not consumed by evaluation: it can be compiled
    again, against the same or another :class:`QueryContext`.
    """

    def __init__(self) -> None:
        self._criteria: list[SearchCriterion[T]] = []

    @property
    def criteria(self) -> tuple[SearchCriterion[T], ...]:
        return tuple(self._criteria)

    def add(self, *fields: str | Sequence[str]) -> SearchCriterion[T]:
        """
        Register a criterion on a field path and return it for configuration.

        ``add("author", "name")``, ``add(["author", "name"])`` and
        ``add("author.name")`` are equivalent:
        every segment but the last is a relationship to join.
        """
        criterion = SearchCriterion(_normalise_path(fields), self)
        self._criteria.append(criterion)
        return criterion

    def contributing_criteria(self) -> list[SearchCriterion[T]]:
        """Criteria that pass the inclusion rules, in insertion order."""
        contributing: list[SearchCriterion[T]] = []
        for criterion in self._criteria:
            if not criterion.condition:
                logger.debug("Skipping criterion %s: condition is false", criterion.path)
                continue
            if not (criterion.strict or criterion.has_value()):
                logger.debug("Skipping criterion %s: no value", criterion.path)
                continue
            contributing.append(criterion)
        return contributing

    # -- compilation ---------------------------------------------------------

    def to_predicate(self, context: QueryContext[P]) -> P:
        """
        Compile the contributing criteria into one predicate.

        Each criterion resolves its own joins; nothing is shared between
        criteria with a common path prefix.  With no contributing criteria
        the result is the context's always-true conjunction.
        """
        fragments = [
            self._to_fragment(criterion, context)
            for criterion in self.contributing_criteria()
        ]
        logger.debug(
            "Combining %d of %d criteria into one predicate",
            len(fragments),
            len(self._criteria),
        )
        return context.conjunction(fragments)

    @staticmethod
    def _resolve_attribute(criterion: SearchCriterion[Any], context: QueryContext[Any]) -> Any:
        *relationships, name = criterion.fields
        source = context.root
        for relationship in relationships:
            source = context.join(source, relationship, path=criterion.path)
        return context.attribute(source, name, path=criterion.path)

    def _to_fragment(self, criterion: SearchCriterion[T], context: QueryContext[P]) -> P:
        clause = criterion.clause
        if clause is None:
            raise ValidationError(
                f"Criterion '{criterion.path}' is strict but has no operator",
                path=criterion.path,
            )
        attribute = self._resolve_attribute(criterion, context)
        return context.fragment(clause.operator, attribute, clause.value)

    # -- in-memory evaluation ------------------------------------------------

    def is_satisfied_by(
        self,
        candidate: Any,
        *,
        registry: MemoryOperatorRegistry | None = None,
    ) -> bool:
        """Evaluate the specification against a plain Python object."""
        predicate = self.to_predicate(MemoryQueryContext(registry=registry))
        return predicate(candidate)

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Contributing criteria as an ``and`` node of ``{op, attr, val}`` leaves."""
        conditions: list[dict[str, Any]] = []
        for criterion in self.contributing_criteria():
            value = criterion.value
            conditions.append(
                {
                    "op": criterion.operator.value if criterion.operator else None,
                    "attr": criterion.path,
                    "val": list(value) if is_collection(value) else value,
                }
            )
        return {"op": "and", "conditions": conditions}

    def __repr__(self) -> str:
        return f"SearchSpecification(criteria={self._criteria!r})"
