"""
Pydantic models for book data.

``Book`` is the single record exchanged by the API and stored in the
``books`` table.  It is strict: values are never coerced, so ``"123"``
is not accepted for ``pages`` and ``False`` is not accepted for
``title``.  Unknown fields are dropped.  Values must also fit the
table: integers within SQLite's 64-bit range and strings that encode
as UTF-8.

The remaining models are the response envelopes returned by the
routes.
"""

from typing import List, Union

from pydantic import BaseModel, Field, field_validator

# Range of an SQLite INTEGER column.
INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1


class Book(BaseModel):
    isbn: str = Field(..., examples=["0691161518"])
    amazon_url: str = Field(..., examples=["http://a.co/eobPtX2"])
    author: str = Field(..., examples=["Matthew Lane"])
    language: str = Field(..., examples=["english"])
    pages: int = Field(..., ge=INTEGER_MIN, le=INTEGER_MAX, examples=[264])
    publisher: str = Field(..., examples=["Princeton University Press"])
    title: str = Field(..., examples=["Power-Up: Unlocking the Hidden Mathematics in Video Games"])
    year: int = Field(..., ge=INTEGER_MIN, le=INTEGER_MAX, examples=[2017])

    model_config = {
        "strict": True,
        "extra": "ignore",
    }

    @field_validator("isbn", "amazon_url", "author", "language", "publisher", "title")
    @classmethod
    def validate_utf8(cls, v: str) -> str:
        # JSON allows lone surrogates such as "\ud800"; SQLite does not.
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("must be valid UTF-8 text")
        return v


# Expected JSON type of every field, in schema order.
BOOK_FIELD_TYPES = {
    name: "integer" if field.annotation is int else "string"
    for name, field in Book.model_fields.items()
}


class BookResponse(BaseModel):
    book: Book


class BookListResponse(BaseModel):
    books: List[Book]


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Envelope used for every error response."""

    message: Union[str, List[str]]
    status: int
