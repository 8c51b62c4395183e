"""
Validation of request bodies against the Book schema.

``validate_book`` never raises.  It returns ``Valid`` carrying the
parsed ``Book`` or ``Invalid`` carrying one message per failing field,
in schema order, so callers branch on the result instead of catching
exceptions.
"""

from dataclasses import dataclass
from typing import Any, List, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from books_api.app.schemas.book import BOOK_FIELD_TYPES, INTEGER_MAX, INTEGER_MIN, Book

NOT_AN_OBJECT = "book must be an object"


@dataclass(frozen=True)
class Valid:
    book: Book


@dataclass(frozen=True)
class Invalid:
    violations: Tuple[str, ...]


ValidationResult = Union[Valid, Invalid]


def validate_book(payload: Any) -> ValidationResult:
    """Check ``payload`` against the Book schema.

    Every field is checked in a single pass.  A missing field is
    reported as ``"<field> is required"`` and a value of the wrong JSON
    type as ``"<field> must be of type <string|integer>"``.  Integers
    outside the 64-bit range and strings that are not valid UTF-8 are
    rejected as well, since the table could not store them.
    """
    if not isinstance(payload, dict):
        return Invalid((NOT_AN_OBJECT,))
    try:
        book = Book.model_validate(payload)
    except PydanticValidationError as exc:
        return Invalid(tuple(_violations(exc)))
    return Valid(book)


def _violations(exc: PydanticValidationError) -> List[str]:
    failing = {}
    for error in exc.errors():
        if not error["loc"]:
            failing.setdefault("", NOT_AN_OBJECT)
            continue
        field = str(error["loc"][0])
        if error["type"] == "missing":
            failing.setdefault(field, f"{field} is required")
        elif error["type"] in ("greater_than_equal", "less_than_equal"):
            failing.setdefault(field, f"{field} must be between {INTEGER_MIN} and {INTEGER_MAX}")
        elif error["type"] in ("value_error", "string_unicode"):
            failing.setdefault(field, f"{field} must be valid UTF-8 text")
        else:
            failing.setdefault(field, f"{field} must be of type {BOOK_FIELD_TYPES[field]}")
    # Report in schema order rather than pydantic's error order.
    order = {name: index for index, name in enumerate(BOOK_FIELD_TYPES)}
    return [failing[field] for field in sorted(failing, key=lambda name: order.get(name, -1))]
