from .context import QueryContext
from .criterion import CriterionClause, SearchCriterion
from .evaluator import MemoryOperator, MemoryOperatorRegistry
from .exceptions import (
    FieldNotFoundError,
    OperatorNotSupportedError,
    RelationshipTraversalError,
    SearchSpecificationError,
    ValidationError,
)
from .memory import MemoryQueryContext
from .operators import SearchOperator
from .operators_memory import DEFAULT_MEMORY_REGISTRY, build_default_registry
from .registry import OperatorRegistry, OperatorStrategy
from .specification import SearchSpecification

__all__ = [
    # Core types
    "SearchOperator",
    "SearchSpecification",
    "SearchCriterion",
    "CriterionClause",
    # Contexts
    "QueryContext",
    "MemoryQueryContext",
    # Strategies and registries
    "OperatorStrategy",
    "OperatorRegistry",
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "DEFAULT_MEMORY_REGISTRY",
    "build_default_registry",
    # Exceptions
    "SearchSpecificationError",
    "ValidationError",
    "OperatorNotSupportedError",
    "FieldNotFoundError",
    "RelationshipTraversalError",
]
