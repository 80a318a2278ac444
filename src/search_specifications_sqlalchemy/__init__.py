"""
SearchSpecification-to-SQLAlchemy compilation.

Public API:
    - ``SQLAlchemyQueryContext``: query context over a mapped class
    - ``build_search_statement(model, spec)``: filtered ``Select``
    - ``build_count_statement(model, spec)``: ``count(*)`` of the matches
    - ``SQLAlchemySearchRepository``: async find/count/exists
    - ``DEFAULT_SQLA_REGISTRY``: the default operator registry
    - ``SQLAlchemyOperator`` / ``SQLAlchemyOperatorRegistry``: extension
      points for custom operators
"""

from .compiler import build_count_statement, build_search_statement
from .context import SQLAlchemyQueryContext
from .operators import DEFAULT_SQLA_REGISTRY, build_default_sqla_registry
from .repository import SQLAlchemySearchRepository
from .strategy import SQLAlchemyOperator, SQLAlchemyOperatorRegistry

__all__ = [
    "SQLAlchemyQueryContext",
    "build_search_statement",
    "build_count_statement",
    "SQLAlchemySearchRepository",
    "DEFAULT_SQLA_REGISTRY",
    "build_default_sqla_registry",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
]
