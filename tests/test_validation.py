"""Unit tests for request body validation."""

import pytest

from books_api.app.schemas.book import BOOK_FIELD_TYPES, INTEGER_MAX, INTEGER_MIN, Book
from books_api.app.schemas.validation import Invalid, Valid, validate_book
from tests.utils import NEW_BOOK


class TestValidateBook:
    def test_valid_payload(self):
        result = validate_book(dict(NEW_BOOK))
        assert isinstance(result, Valid)
        assert result.book == Book(**NEW_BOOK)

    def test_extra_fields_are_ignored(self):
        result = validate_book({**NEW_BOOK, "rating": 5, "tags": ["x"]})
        assert isinstance(result, Valid)
        assert result.book.model_dump() == NEW_BOOK

    @pytest.mark.parametrize("field", list(BOOK_FIELD_TYPES))
    def test_each_field_is_required(self, field):
        payload = {k: v for k, v in NEW_BOOK.items() if k != field}
        assert validate_book(payload) == Invalid((f"{field} is required",))

    @pytest.mark.parametrize(
        "field, value, expected",
        [
            ("pages", "123", "integer"),
            ("year", 2020.5, "integer"),
            ("year", True, "integer"),
            ("title", False, "string"),
            ("isbn", 123456789, "string"),
            ("author", None, "string"),
            ("language", ["english"], "string"),
        ],
    )
    def test_wrong_type(self, field, value, expected):
        result = validate_book({**NEW_BOOK, field: value})
        assert result == Invalid((f"{field} must be of type {expected}",))

    def test_reports_every_failure_in_schema_order(self):
        payload = {**NEW_BOOK, "year": "2020", "pages": "123", "title": False}
        del payload["author"]
        del payload["isbn"]

        result = validate_book(payload)

        assert isinstance(result, Invalid)
        assert result.violations == (
            "isbn is required",
            "author is required",
            "pages must be of type integer",
            "title must be of type string",
            "year must be of type integer",
        )

    @pytest.mark.parametrize("field", ["pages", "year"])
    @pytest.mark.parametrize("value", [INTEGER_MAX + 1, INTEGER_MIN - 1, 2**70])
    def test_integer_outside_storage_range(self, field, value):
        result = validate_book({**NEW_BOOK, field: value})
        assert result == Invalid((f"{field} must be between {INTEGER_MIN} and {INTEGER_MAX}",))

    @pytest.mark.parametrize("value", [INTEGER_MAX, INTEGER_MIN, 0])
    def test_integer_storage_bounds_accepted(self, value):
        assert isinstance(validate_book({**NEW_BOOK, "year": value}), Valid)

    @pytest.mark.parametrize("field", ["isbn", "title", "author"])
    def test_lone_surrogate_rejected(self, field):
        result = validate_book({**NEW_BOOK, field: "abc\udc80"})
        assert result == Invalid((f"{field} must be valid UTF-8 text",))

    def test_non_ascii_text_accepted(self):
        assert isinstance(validate_book({**NEW_BOOK, "title": "Les Misérables 📚"}), Valid)

    @pytest.mark.parametrize("payload", [None, [], "book", 42])
    def test_non_object_payload(self, payload):
        assert validate_book(payload) == Invalid(("book must be an object",))

    def test_empty_object_lists_all_fields(self):
        result = validate_book({})
        assert isinstance(result, Invalid)
        assert len(result.violations) == 8

    def test_does_not_modify_payload(self):
        payload = {**NEW_BOOK, "extra": 1}
        validate_book(payload)
        assert payload == {**NEW_BOOK, "extra": 1}


def test_field_types():
    assert BOOK_FIELD_TYPES == {
        "isbn": "string",
        "amazon_url": "string",
        "author": "string",
        "language": "string",
        "pages": "integer",
        "publisher": "string",
        "title": "string",
        "year": "integer",
    }
