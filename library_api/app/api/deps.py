"""
FastAPI dependency providers.

Services are built per request on top of fresh repositories.  Tests
can replace them through ``app.dependency_overrides``.
"""

from fastapi import Query

from library_api.app.core.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_INDEX,
    MAX_PAGE_SIZE,
    PageRequest,
)
from library_api.app.repositories import BookRepository, LoanRepository
from library_api.app.services import BookService, LoanService


def get_book_service() -> BookService:
    return BookService(BookRepository())


def get_loan_service() -> LoanService:
    return LoanService(LoanRepository())


def get_page_request(
    page: int = Query(0, ge=0, le=MAX_PAGE_INDEX, description="Zero-based page index"),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Page size"),
) -> PageRequest:
    return PageRequest(page=page, size=size)
