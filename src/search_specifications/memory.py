"""
In-memory query context.

Compiles a search specification into a plain ``candidate -> bool``
callable.  Entity references are resolvers returning every object
reachable from the candidate, so joins across list/tuple/set
relationships fan out and a fragment matches when any reachable value
satisfies it, like an inner join followed by a filter.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from .context import QueryContext
from .exceptions import FieldNotFoundError
from .operators_memory import DEFAULT_MEMORY_REGISTRY

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .evaluator import MemoryOperatorRegistry
    from .operators import SearchOperator

MemoryPredicate = Callable[[Any], bool]
Resolver = Callable[[Any], list[Any]]


def _available_fields(obj: Any) -> list[str]:
    if isinstance(obj, Mapping):
        return [str(k) for k in obj]
    return [name for name in dir(obj) if not name.startswith("_")]


def _read(obj: Any, name: str, path: str | None) -> Any:
    """Read *name* off *obj* by key for mappings, by attribute otherwise."""
    if isinstance(obj, Mapping):
        if name in obj:
            return obj[name]
    elif hasattr(obj, name):
        return getattr(obj, name)
    raise FieldNotFoundError(
        name,
        type(obj).__name__,
        _available_fields(obj),
        full_path=path,
    )


def _fan_out(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list | tuple | set | frozenset):
        return [item for item in value if item is not None]
    return [value]


def _root(candidate: Any) -> list[Any]:
    return [candidate]


class MemoryQueryContext(QueryContext[MemoryPredicate]):
    """
    :class:`QueryContext` over Python objects, dicts and dataclasses.

    Args:
        registry: Operator strategies.  Defaults to the shared
            ``DEFAULT_MEMORY_REGISTRY``.
    """

    def __init__(self, registry: MemoryOperatorRegistry | None = None) -> None:
        self._registry = registry if registry is not None else DEFAULT_MEMORY_REGISTRY

    @property
    def root(self) -> Resolver:
        return _root

    def join(self, source: Resolver, name: str, *, path: str | None = None) -> Resolver:
        def resolve(candidate: Any) -> list[Any]:
            return [
                related
                for obj in source(candidate)
                for related in _fan_out(_read(obj, name, path))
            ]

        return resolve

    def attribute(
        self, source: Resolver, name: str, *, path: str | None = None
    ) -> Resolver:
        def resolve(candidate: Any) -> list[Any]:
            return [_read(obj, name, path) for obj in source(candidate)]

        return resolve

    def fragment(
        self, operator: SearchOperator, attribute: Resolver, value: Any
    ) -> MemoryPredicate:
        strategy = self._registry.require(operator)

        def predicate(candidate: Any) -> bool:
            return any(strategy.evaluate(v, value) for v in attribute(candidate))

        return predicate

    def conjunction(self, fragments: Sequence[MemoryPredicate]) -> MemoryPredicate:
        parts = tuple(fragments)

        def predicate(candidate: Any) -> bool:
            return all(part(candidate) for part in parts)

        return predicate
