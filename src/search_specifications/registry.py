"""
Operator strategies and the registries that dispatch to them.

Each backend translates a :class:`SearchOperator` through a registry of
small strategy objects, one per operator.  Registries are plain mutable
containers: build one with a backend's ``build_default_*`` factory and
``register`` / ``unregister`` strategies to customise it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from .exceptions import OperatorNotSupportedError

if TYPE_CHECKING:
    from .operators import SearchOperator


class OperatorStrategy:
    """Base for backend strategies; subclasses set ``operator``."""

    operator: ClassVar[SearchOperator]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.operator.value!r})"


S = TypeVar("S", bound=OperatorStrategy)


class OperatorRegistry(Generic[S]):
    """Strategies of one backend keyed by the operator they handle."""

    def __init__(self) -> None:
        self._strategies: dict[SearchOperator, S] = {}

    def register(self, strategy: S) -> None:
        """Add *strategy*, replacing any strategy for the same operator."""
        self._strategies[strategy.operator] = strategy

    def register_all(self, *strategies: S) -> None:
        for strategy in strategies:
            self.register(strategy)

    def unregister(self, operator: SearchOperator) -> None:
        self._strategies.pop(operator, None)

    def get(self, operator: SearchOperator) -> S | None:
        return self._strategies.get(operator)

    def has(self, operator: SearchOperator) -> bool:
        return operator in self._strategies

    @property
    def supported_operators(self) -> set[SearchOperator]:
        return set(self._strategies)

    def require(self, operator: SearchOperator) -> S:
        """
        Return the strategy for *operator*.

        Raises:
            OperatorNotSupportedError: If nothing is registered for it.
        """
        strategy = self.get(operator)
        if strategy is None:
            raise OperatorNotSupportedError(
                operator.value, [known.value for known in self._strategies]
            )
        return strategy
