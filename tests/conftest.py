"""Shared fixtures for search specification tests."""

from __future__ import annotations

from datetime import date

import pytest

from search_specifications.operators_memory import build_default_registry

from .models import CHOCOLATERIE, PETIT_PRINCE, Author, Book, Tag


@pytest.fixture
def registry():
    """Fresh in-memory operator registry."""
    return build_default_registry()


@pytest.fixture
def petit_prince() -> Book:
    return Book(
        title=PETIT_PRINCE,
        publication_date=date(1943, 4, 6),
        author=Author("Antoine de Saint-Exupéry", "France"),
        tags=[Tag("classic"), Tag("children")],
    )


@pytest.fixture
def chocolaterie() -> Book:
    return Book(
        title=CHOCOLATERIE,
        publication_date=date(1964, 1, 1),
        author=Author("Roald Dahl", "United Kingdom"),
        tags=[Tag("children")],
    )


@pytest.fixture
def books(petit_prince: Book, chocolaterie: Book) -> list[Book]:
    return [petit_prince, chocolaterie]
