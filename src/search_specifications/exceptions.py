"""
Errors raised while building or compiling a search specification.

Every error derives from :class:`SearchSpecificationError` and renders
itself as a JSON-friendly dict through ``to_dict()``, so a web layer can
return it as-is.  Lookup errors (unknown field, unknown operator) carry
"did you mean" suggestions computed with :mod:`difflib`.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Iterable

# Longest list of names quoted in a FieldNotFoundError message.
_MAX_LISTED_FIELDS = 15


def _suggest(name: str, candidates: Iterable[str], *, limit: int, cutoff: float) -> list[str]:
    return get_close_matches(name, list(candidates), n=limit, cutoff=cutoff)


class SearchSpecificationError(Exception):
    """Root of the package's exception hierarchy."""

    code: ClassVar[str | None] = None

    def _details(self) -> dict[str, Any]:
        return {"message": str(self)}

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code or type(self).__name__, **self._details()}


class ValidationError(SearchSpecificationError):
    """Bad field path or operand, detected while the criterion is built."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def _details(self) -> dict[str, Any]:
        return {"message": self.message, "path": self.path}


class OperatorNotSupportedError(SearchSpecificationError):
    """
    A registry has no strategy for the requested operator.

    With the default registries every :class:`SearchOperator` is covered,
    so seeing this usually means an operator was unregistered.
    """

    code = "OPERATOR_NOT_SUPPORTED"

    def __init__(self, operator: str, supported_operators: Iterable[str]) -> None:
        self.operator = operator
        self.supported_operators = sorted(supported_operators)
        self.suggestions = _suggest(
            operator, self.supported_operators, limit=3, cutoff=0.6
        )
        super().__init__(self._describe())

    def _describe(self) -> str:
        hint = f" Did you mean: {', '.join(self.suggestions)}?" if self.suggestions else ""
        known = ", ".join(self.supported_operators)
        return f"Operator not supported: '{self.operator}'.{hint} Supported operators: {known}"

    def _details(self) -> dict[str, Any]:
        return {
            "operator": self.operator,
            "suggestions": self.suggestions,
            "supported_operators": self.supported_operators,
        }


class FieldNotFoundError(SearchSpecificationError):
    """
    A path segment names nothing on the model or object it is read from.

    The message lists close matches and the names that do exist::

        Invalid field 'titel' on 'Book'.
        Did you mean one of these?
          • title

        Available fields: author_id, id, publication_date, title
    """

    code = "FIELD_NOT_FOUND"

    def __init__(
        self,
        invalid_field: str,
        model_name: str,
        available_fields: Iterable[str],
        full_path: str | None = None,
        cutoff: float = 0.6,
    ) -> None:
        self.invalid_field = invalid_field
        self.model_name = model_name
        self.available_fields = sorted(available_fields)
        self.full_path = full_path or invalid_field
        self.suggestions = _suggest(
            invalid_field, self.available_fields, limit=5, cutoff=cutoff
        )
        super().__init__(self._describe())

    def _describe(self) -> str:
        lines = [f"Invalid field '{self.invalid_field}' on '{self.model_name}'."]
        if self.suggestions:
            lines.append("Did you mean one of these?")
            lines.extend(f"  • {name}" for name in self.suggestions)

        listed = ", ".join(self.available_fields[:_MAX_LISTED_FIELDS])
        if len(self.available_fields) > _MAX_LISTED_FIELDS:
            listed += ", ..."
        lines.append(f"Available fields: {listed}")
        return "\n".join(lines)

    def _details(self) -> dict[str, Any]:
        return {
            "field": self.invalid_field,
            "model": self.model_name,
            "full_path": self.full_path,
            "suggestions": self.suggestions,
            "available_fields": self.available_fields,
        }


class RelationshipTraversalError(ValidationError):
    """A path such as ``title.length`` tries to join through a plain column."""

    code = "RELATIONSHIP_TRAVERSAL_ERROR"

    def __init__(self, field: str, model_name: str, full_path: str | None = None) -> None:
        self.field = field
        self.model_name = model_name
        self.full_path = full_path or field
        super().__init__(
            f"Cannot traverse '{field}' on '{model_name}': it is not a "
            f"relationship. Full path: '{self.full_path}'",
            path=full_path,
        )

    def _details(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "model": self.model_name,
            "full_path": self.full_path,
        }
