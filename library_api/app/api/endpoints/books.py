"""
Book endpoints.

CRUD for books plus a filtered listing and the loans of one book.
Lookups by id that find nothing answer 404; the duplicate isbn rule is
reported as 400 by the error translator.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from library_api.app.api.deps import get_book_service, get_loan_service, get_page_request
from library_api.app.core.pagination import PageRequest
from library_api.app.models import Book
from library_api.app.schemas.book import BookCreate, BookRead, BookUpdate
from library_api.app.schemas.loan import LoanRead
from library_api.app.schemas.page import Page
from library_api.app.services import BookService, LoanService

router = APIRouter()

BOOK_NOT_FOUND = "Book not found"


async def _get_book_or_404(book_id: int, service: BookService) -> Book:
    book = await service.get_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BOOK_NOT_FOUND)
    return book


@router.post("", response_model=BookRead, status_code=status.HTTP_201_CREATED)
async def create_book(
    book_in: BookCreate,
    service: BookService = Depends(get_book_service),
) -> BookRead:
    """Create a book.  Returns 400 if the isbn is already registered."""
    book = await service.save(book_in.to_domain())
    return BookRead.model_validate(book)


@router.get("", response_model=Page[BookRead])
async def find_books(
    title: Optional[str] = Query(None, description="Case-insensitive substring of the title"),
    author: Optional[str] = Query(None, description="Case-insensitive substring of the author"),
    isbn: Optional[str] = Query(None, description="Case-insensitive substring of the isbn"),
    page_request: PageRequest = Depends(get_page_request),
    service: BookService = Depends(get_book_service),
) -> Page[BookRead]:
    """Page through books matching every filter that is given."""
    result = await service.find(Book(title=title, author=author, isbn=isbn), page_request)
    return Page[BookRead].from_result(result, BookRead.model_validate)


@router.get("/{book_id}", response_model=BookRead)
async def get_book(
    book_id: int = Path(..., description="ID of the book"),
    service: BookService = Depends(get_book_service),
) -> BookRead:
    book = await _get_book_or_404(book_id, service)
    return BookRead.model_validate(book)


@router.put("/{book_id}", response_model=BookRead)
async def update_book(
    book_in: BookUpdate,
    book_id: int = Path(..., description="ID of the book"),
    service: BookService = Depends(get_book_service),
) -> BookRead:
    """Change title and author of a book; the isbn is kept."""
    book = await _get_book_or_404(book_id, service)
    book.title = book_in.title
    book.author = book_in.author
    updated = await service.update(book)
    return BookRead.model_validate(updated)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_id: int = Path(..., description="ID of the book"),
    service: BookService = Depends(get_book_service),
) -> None:
    book = await _get_book_or_404(book_id, service)
    await service.delete(book)
    return None


@router.get("/{book_id}/loans", response_model=Page[LoanRead])
async def list_book_loans(
    book_id: int = Path(..., description="ID of the book"),
    page_request: PageRequest = Depends(get_page_request),
    service: BookService = Depends(get_book_service),
    loan_service: LoanService = Depends(get_loan_service),
) -> Page[LoanRead]:
    """Page through the loans of one book, each with the book embedded."""
    book = await _get_book_or_404(book_id, service)
    result = await loan_service.get_loans_by_book(book, page_request)
    return Page[LoanRead].from_result(result, LoanRead.from_domain)
