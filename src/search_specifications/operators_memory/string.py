"""Case-insensitive substring matching."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any

from ..evaluator import MemoryOperator
from ..operators import SearchOperator, like_pattern

_WILDCARDS = {"%": ".*", "_": "."}


@lru_cache(maxsize=256)
def compile_like(pattern: str) -> re.Pattern[str]:
    """Translate a SQL LIKE pattern into an anchored regular expression."""
    body = "".join(_WILDCARDS.get(char) or re.escape(char) for char in pattern)
    return re.compile(body, re.DOTALL)


class LikeOperator(MemoryOperator):
    """Same test as ``lower(field) LIKE '%' || lower(value) || '%'``."""

    operator = SearchOperator.LIKE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        regex = compile_like(like_pattern(str(condition_value)))
        return regex.fullmatch(str(field_value).lower()) is not None
