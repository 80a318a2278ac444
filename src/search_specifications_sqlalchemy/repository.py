"""
Async repository running search specifications against a database.

Usage::

    repo = SQLAlchemySearchRepository(BookModel, session_factory=async_sessionmaker(engine))
    books = await repo.find_all(
        SearchSpecification[BookModel]()
        .add("title").like(query)
        .add("author.name").in_(authors)
    )
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import select

from .compiler import build_count_statement, build_search_statement

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession

    from search_specifications.specification import SearchSpecification

    from .strategy import SQLAlchemyOperatorRegistry

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SQLAlchemySearchRepository(Generic[T]):
    """
    Read-only repository filtering ``model`` rows with search specifications.

    Supports two session patterns:

    1. **Per-call session**:
       ``await repo.find_all(spec, session=session)``

    2. **Factory-injected session** (opened and closed per call):
       ``SQLAlchemySearchRepository(Book, session_factory=async_sessionmaker(engine))``
    """

    def __init__(
        self,
        model: type[T],
        session_factory: Callable[[], AsyncSession] | None = None,
        *,
        registry: SQLAlchemyOperatorRegistry | None = None,
    ) -> None:
        self.model = model
        self._session_factory = session_factory
        self._registry = registry

    # -- session helpers ----------------------------------------------------

    @asynccontextmanager
    async def _session_scope(
        self, session: AsyncSession | None = None
    ) -> AsyncIterator[AsyncSession]:
        if session is not None:
            yield session
            return
        if self._session_factory is None:
            raise ValueError("No session provided or configured.")
        async with self._session_factory() as owned:
            yield owned

    # -- queries ------------------------------------------------------------

    def statement(self, spec: SearchSpecification[T]) -> Select[Any]:
        """The ``Select`` that ``find_all`` would execute."""
        return build_search_statement(self.model, spec, registry=self._registry)

    async def find_all(
        self,
        spec: SearchSpecification[T],
        session: AsyncSession | None = None,
    ) -> list[T]:
        logger.debug("Searching %s with %r", self.model.__name__, spec)
        async with self._session_scope(session) as active:
            result = await active.scalars(self.statement(spec))
            return list(result.all())

    async def find_one(
        self,
        spec: SearchSpecification[T],
        session: AsyncSession | None = None,
    ) -> T | None:
        """
        Return the single matching row, or ``None``.

        Raises:
            sqlalchemy.exc.MultipleResultsFound: If more than one row matches.
        """
        async with self._session_scope(session) as active:
            result = await active.scalars(self.statement(spec))
            return result.one_or_none()

    async def count(
        self,
        spec: SearchSpecification[T],
        session: AsyncSession | None = None,
    ) -> int:
        stmt = build_count_statement(self.model, spec, registry=self._registry)
        async with self._session_scope(session) as active:
            return int(await active.scalar(stmt) or 0)

    async def exists(
        self,
        spec: SearchSpecification[T],
        session: AsyncSession | None = None,
    ) -> bool:
        stmt = select(self.statement(spec).exists())
        async with self._session_scope(session) as active:
            return bool(await active.scalar(stmt))
