"""Case-insensitive substring matching in SQL."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import func

from search_specifications.operators import SearchOperator, like_pattern

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class LikeOperator(SQLAlchemyOperator):
    """``lower(column) LIKE '%<lowercased value>%'``, wildcards left unescaped."""

    operator = SearchOperator.LIKE

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return func.lower(column).like(like_pattern(str(value)))
