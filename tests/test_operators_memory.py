"""Tests for in-memory operator strategies and their registry."""

from __future__ import annotations

from datetime import date

import pytest

from search_specifications import (
    MemoryOperatorRegistry,
    OperatorNotSupportedError,
    SearchOperator,
)
from search_specifications.operators_memory import build_default_registry
from search_specifications.operators_memory.set import InOperator, NotInOperator
from search_specifications.operators_memory.standard import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NotEqualOperator,
)
from search_specifications.operators_memory.string import LikeOperator

# ══════════════════════════════════════════════════════════════════════
# Standard comparison operators
# ══════════════════════════════════════════════════════════════════════


class TestStandardOperators:
    """EQUALS, NOT_EQUAL and the ordering operators."""

    def test_equal(self) -> None:
        op = EqualOperator()
        assert op.evaluate(42, 42) is True
        assert op.evaluate("a", "b") is False

    def test_not_equal(self) -> None:
        op = NotEqualOperator()
        assert op.evaluate("a", "b") is True
        assert op.evaluate("a", "a") is False

    def test_ordering_on_dates(self) -> None:
        day = date(1950, 1, 1)
        assert GreaterThanOperator().evaluate(date(1964, 1, 1), day) is True
        assert GreaterThanOperator().evaluate(day, day) is False
        assert GreaterEqualOperator().evaluate(day, day) is True
        assert LessThanOperator().evaluate(date(1943, 4, 6), day) is True
        assert LessThanOperator().evaluate(day, day) is False
        assert LessEqualOperator().evaluate(day, day) is True

    @pytest.mark.parametrize(
        "op",
        [
            EqualOperator(),
            NotEqualOperator(),
            GreaterThanOperator(),
            GreaterEqualOperator(),
            LessThanOperator(),
            LessEqualOperator(),
        ],
    )
    def test_none_field_never_matches(self, op) -> None:
        assert op.evaluate(None, 1) is False

    def test_mismatched_ordering_types_raise(self) -> None:
        with pytest.raises(TypeError):
            GreaterThanOperator().evaluate(date(2000, 1, 1), "2000-01-01")


# ══════════════════════════════════════════════════════════════════════
# Set operators
# ══════════════════════════════════════════════════════════════════════


class TestSetOperators:
    def test_in(self) -> None:
        assert InOperator().evaluate("a", ["a", "b"]) is True
        assert InOperator().evaluate("c", {"a", "b"}) is False

    def test_in_empty_collection_matches_nothing(self) -> None:
        assert InOperator().evaluate("a", ()) is False

    def test_not_in(self) -> None:
        assert NotInOperator().evaluate("c", ["a", "b"]) is True
        assert NotInOperator().evaluate("a", ["a", "b"]) is False

    def test_none_field_never_matches(self) -> None:
        assert InOperator().evaluate(None, [None]) is False
        assert NotInOperator().evaluate(None, ["a"]) is False


# ══════════════════════════════════════════════════════════════════════
# String operators
# ══════════════════════════════════════════════════════════════════════


class TestLikeOperator:
    def test_substring_is_case_insensitive(self) -> None:
        op = LikeOperator()
        assert op.evaluate("Le Petit Prince", "et") is True
        assert op.evaluate("Charlie et la Chocolaterie ", "CHOCO") is True
        assert op.evaluate("XYZ", "et") is False

    def test_sql_wildcards_in_value(self) -> None:
        op = LikeOperator()
        assert op.evaluate("Le Petit Prince", "petit%prince") is True
        assert op.evaluate("Le Petit Prince", "p_tit") is True

    def test_regex_characters_are_literal(self) -> None:
        op = LikeOperator()
        assert op.evaluate("1+1=2", "1+1") is True
        assert op.evaluate("11=2", "1+1") is False

    def test_none_field_never_matches(self) -> None:
        assert LikeOperator().evaluate(None, "a") is False


# ══════════════════════════════════════════════════════════════════════
# Registry
# ══════════════════════════════════════════════════════════════════════


class TestRegistry:
    def test_default_registry_supports_every_operator(self) -> None:
        registry = build_default_registry()
        assert registry.supported_operators == set(SearchOperator)

    def test_default_registries_are_independent(self) -> None:
        first = build_default_registry()
        second = build_default_registry()
        first.unregister(SearchOperator.EQUALS)
        assert second.has(SearchOperator.EQUALS)

    def test_evaluate_delegates(self, registry: MemoryOperatorRegistry) -> None:
        assert registry.evaluate(SearchOperator.IN, 1, [1, 2]) is True

    def test_unregistered_operator_raises(self) -> None:
        registry = MemoryOperatorRegistry()
        registry.register(EqualOperator())
        with pytest.raises(OperatorNotSupportedError) as exc_info:
            registry.evaluate(SearchOperator.NOT_EQUAL, 1, 2)
        assert exc_info.value.operator == "!="
        assert exc_info.value.supported_operators == ["="]

    def test_register_replaces_strategy_for_same_operator(self) -> None:
        class ExactLike(LikeOperator):
            def evaluate(self, field_value, condition_value) -> bool:
                return bool(field_value == condition_value)

        registry = build_default_registry()
        registry.register(ExactLike())
        assert registry.evaluate(SearchOperator.LIKE, "Petit", "Petit") is True
        assert registry.evaluate(SearchOperator.LIKE, "Le Petit Prince", "petit") is False
        assert len(registry.supported_operators) == len(SearchOperator)

    def test_strategy_repr_names_operator(self) -> None:
        assert repr(NotInOperator()) == "NotInOperator('not_in')"

    def test_get_returns_strategy_or_none(self) -> None:
        registry = build_default_registry()
        assert isinstance(registry.get(SearchOperator.EQUALS), EqualOperator)
        registry.unregister(SearchOperator.EQUALS)
        assert registry.get(SearchOperator.EQUALS) is None

    def test_require_uses_get(self) -> None:
        class Fallback(MemoryOperatorRegistry):
            def get(self, operator):
                return super().get(operator) or EqualOperator()

        assert Fallback().evaluate(SearchOperator.LIKE, "a", "a") is True
