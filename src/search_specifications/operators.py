from enum import Enum


class SearchOperator(str, Enum):
    """Operators a search criterion can apply."""

    # Standard comparison
    EQUALS = "="
    NOT_EQUAL = "!="
    GREATER_THAN = ">"
    GREATER_THAN_EQUAL = ">="
    LESS_THAN = "<"
    LESS_THAN_EQUAL = "<="

    # Set membership
    IN = "in"
    NOT_IN = "not_in"

    # Case-insensitive substring match
    LIKE = "like"


ORDERING_OPERATORS: frozenset[SearchOperator] = frozenset(
    {
        SearchOperator.GREATER_THAN,
        SearchOperator.GREATER_THAN_EQUAL,
        SearchOperator.LESS_THAN,
        SearchOperator.LESS_THAN_EQUAL,
    }
)
COLLECTION_OPERATORS: frozenset[SearchOperator] = frozenset(
    {SearchOperator.IN, SearchOperator.NOT_IN}
)


def like_pattern(value: str) -> str:
    """SQL LIKE pattern for a case-insensitive substring match on *value*."""
    return f"%{value.lower()}%"
