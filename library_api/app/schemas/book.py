"""
Pydantic schemas for books.

``title``, ``author`` and ``isbn`` are required and must not be empty.
The check runs on missing values too, so a request that omits all
three fields is reported with one error per field.
"""

from typing import Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from library_api.app.models import Book


def _not_empty(value: Optional[str], info: ValidationInfo) -> str:
    if not value:
        raise ValueError(f"{info.field_name} must not be empty")
    return value


class BookCreate(BaseModel):
    """Schema for creating a new book."""

    title: Optional[str] = Field(None, validate_default=True, examples=["Lalalala"])
    author: Optional[str] = Field(None, validate_default=True, examples=["Ederson"])
    isbn: Optional[str] = Field(None, validate_default=True, examples=["001"])

    @field_validator("title", "author", "isbn")
    @classmethod
    def check_not_empty(cls, value: Optional[str], info: ValidationInfo) -> str:
        return _not_empty(value, info)

    def to_domain(self) -> Book:
        return Book(title=self.title, author=self.author, isbn=self.isbn)


class BookUpdate(BaseModel):
    """Schema for updating a book.

    Only ``title`` and ``author`` can change; an ``isbn`` sent by the
    client is accepted and ignored.
    """

    title: Optional[str] = Field(None, validate_default=True)
    author: Optional[str] = Field(None, validate_default=True)
    isbn: Optional[str] = None

    @field_validator("title", "author")
    @classmethod
    def check_not_empty(cls, value: Optional[str], info: ValidationInfo) -> str:
        return _not_empty(value, info)


class BookRead(BaseModel):
    """Schema for reading a book."""

    id: int
    title: str
    author: str
    isbn: str

    model_config = {
        "from_attributes": True,
    }
