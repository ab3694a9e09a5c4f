"""
Loan endpoints.

Lending a book answers with the bare id of the new loan.  Returning a
book is a PATCH of the ``returned`` flag.  Listings embed the borrowed
book in every loan.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from library_api.app.api.deps import get_book_service, get_loan_service, get_page_request
from library_api.app.core.pagination import PageRequest
from library_api.app.models import Loan, LoanFilter
from library_api.app.schemas.loan import LoanCreate, LoanRead, ReturnedLoan
from library_api.app.schemas.page import Page
from library_api.app.services import BookService, LoanService

router = APIRouter()

BOOK_NOT_FOUND_FOR_ISBN = "Book not found for passed isbn"
LOAN_NOT_FOUND = "Loan not found"


@router.post("", response_model=int, status_code=status.HTTP_201_CREATED)
async def create_loan(
    loan_in: LoanCreate,
    service: LoanService = Depends(get_loan_service),
    book_service: BookService = Depends(get_book_service),
) -> int:
    """Lend the book with the given isbn to a customer, dated today.

    Returns 400 if no book has that isbn or the book is already lent.
    """
    book = await book_service.get_by_isbn(loan_in.isbn) if loan_in.isbn else None
    if book is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BOOK_NOT_FOUND_FOR_ISBN)
    loan = Loan(
        customer=loan_in.customer,
        book_id=book.id,
        book=book,
        loan_date=date.today(),
    )
    saved = await service.save(loan)
    return saved.id


@router.patch("/{loan_id}")
async def return_book(
    returned_in: ReturnedLoan,
    loan_id: int = Path(..., description="ID of the loan"),
    service: LoanService = Depends(get_loan_service),
) -> Response:
    loan = await service.get_by_id(loan_id)
    if loan is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=LOAN_NOT_FOUND)
    loan.returned = returned_in.returned
    await service.update(loan)
    return Response(status_code=status.HTTP_200_OK)


@router.get("", response_model=Page[LoanRead])
async def find_loans(
    isbn: Optional[str] = Query(None, description="Exact isbn of the borrowed book"),
    customer: Optional[str] = Query(None, description="Exact customer name"),
    page_request: PageRequest = Depends(get_page_request),
    service: LoanService = Depends(get_loan_service),
) -> Page[LoanRead]:
    """Page through loans whose book isbn OR customer matches."""
    result = await service.find(LoanFilter(isbn=isbn, customer=customer), page_request)
    return Page[LoanRead].from_result(result, LoanRead.from_domain)


@router.get("/late", response_model=List[LoanRead])
async def list_late_loans(
    service: LoanService = Depends(get_loan_service),
) -> List[LoanRead]:
    """Open loans lent more than four days ago."""
    loans = await service.get_all_late_loans()
    return [LoanRead.from_domain(loan) for loan in loans]
