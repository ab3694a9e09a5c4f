"""
Business logic for books.

``BookService`` guards ISBN uniqueness on create and refuses updates
or deletes of books that were never persisted.  The uniqueness check
runs in application code first; the unique index on ``books.isbn``
catches the case where two concurrent creates both pass it.
"""

from __future__ import annotations

import logging
from typing import Optional

from library_api.app.core.exceptions import (
    BusinessError,
    DataIntegrityError,
    IllegalArgumentError,
)
from library_api.app.core.pagination import PageRequest, PageResult
from library_api.app.models import Book
from library_api.app.repositories import BookRepository

DUPLICATE_ISBN_MESSAGE = "Isbn já cadastrado"
MISSING_ID_MESSAGE = "Book id cant be null"

logger = logging.getLogger(__name__)


class BookService:
    """Service class for managing books."""

    def __init__(self, repository: BookRepository) -> None:
        self.repository = repository

    async def save(self, book: Book) -> Book:
        """Persist a new book and return it with its assigned id.

        Raises ``BusinessError`` if a book with the same isbn exists.
        """
        if self.repository.exists_by_isbn(book.isbn):
            logger.warning("Rejected book with duplicate isbn %s", book.isbn)
            raise BusinessError(DUPLICATE_ISBN_MESSAGE)
        try:
            saved = self.repository.save(book)
        except DataIntegrityError as exc:
            logger.warning("Store rejected duplicate isbn %s", book.isbn)
            raise BusinessError(DUPLICATE_ISBN_MESSAGE) from exc
        logger.info("Created book %s (isbn %s)", saved.id, saved.isbn)
        return saved

    async def get_by_id(self, book_id: int) -> Optional[Book]:
        return self.repository.get_by_id(book_id)

    async def get_by_isbn(self, isbn: str) -> Optional[Book]:
        return self.repository.get_by_isbn(isbn)

    async def update(self, book: Optional[Book]) -> Book:
        """Persist the current field values of an existing book."""
        if book is None or book.id is None:
            raise IllegalArgumentError(MISSING_ID_MESSAGE)
        updated = self.repository.save(book)
        logger.info("Updated book %s", updated.id)
        return updated

    async def delete(self, book: Optional[Book]) -> None:
        if book is None or book.id is None:
            raise IllegalArgumentError(MISSING_ID_MESSAGE)
        self.repository.delete(book)
        logger.info("Deleted book %s", book.id)

    async def find(self, example: Book, page_request: PageRequest) -> PageResult[Book]:
        """Return a page of books matching the non-empty fields of ``example``."""
        return self.repository.find_by_example(example, page_request)
