"""Plain Python entities used by the in-memory tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

PETIT_PRINCE = "Le Petit Prince"
CHOCOLATERIE = "Charlie et la Chocolaterie "


@dataclass
class Author:
    name: str
    country: str | None = None


@dataclass
class Tag:
    label: str


@dataclass
class Book:
    title: str
    publication_date: date
    author: Author | None = None
    tags: list[Tag] = field(default_factory=list)
