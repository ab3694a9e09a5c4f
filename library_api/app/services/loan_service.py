"""
Business logic for loans.

``LoanService`` enforces that a book has at most one open loan, lists
loans per book or by filter and reports late loans.  A loan is late
when it is still open and was lent more than ``LATE_LOAN_DAYS`` days
ago.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List, Optional

from library_api.app.core.exceptions import BusinessError, DataIntegrityError
from library_api.app.core.pagination import PageRequest, PageResult
from library_api.app.models import Book, Loan, LoanFilter
from library_api.app.repositories import LoanRepository

BOOK_ALREADY_LOANED_MESSAGE = "Book already loaned"
LATE_LOAN_DAYS = 4

logger = logging.getLogger(__name__)


class LoanService:
    """Service class for managing loans."""

    def __init__(self, repository: LoanRepository) -> None:
        self.repository = repository

    async def save(self, loan: Loan) -> Loan:
        """Persist a new loan and return it with its id and loan date.

        Raises ``BusinessError`` if the book already has an open loan.
        A loan without a date is dated today.
        """
        book = loan.book if loan.book is not None else Book(id=loan.book_id)
        if self.repository.exists_by_book_and_not_returned(book):
            logger.warning("Rejected loan of book %s: already loaned", book.id)
            raise BusinessError(BOOK_ALREADY_LOANED_MESSAGE)
        if loan.loan_date is None:
            loan.loan_date = date.today()
        try:
            saved = self.repository.save(loan)
        except DataIntegrityError as exc:
            logger.warning("Store rejected second open loan of book %s", book.id)
            raise BusinessError(BOOK_ALREADY_LOANED_MESSAGE) from exc
        logger.info("Created loan %s of book %s for %s", saved.id, book.id, saved.customer)
        return saved

    async def get_by_id(self, loan_id: int) -> Optional[Loan]:
        return self.repository.get_by_id(loan_id)

    async def update(self, loan: Loan) -> Loan:
        """Persist the current field values of ``loan`` (used to flip ``returned``)."""
        try:
            updated = self.repository.save(loan)
        except DataIntegrityError as exc:
            logger.warning("Store rejected reopening loan %s: book %s has an open loan", loan.id, loan.book_id)
            raise BusinessError(BOOK_ALREADY_LOANED_MESSAGE) from exc
        logger.info("Updated loan %s (returned=%s)", updated.id, updated.returned)
        return updated

    async def get_loans_by_book(self, book: Book, page_request: PageRequest) -> PageResult[Loan]:
        return self.repository.find_by_book(book, page_request)

    async def get_all_late_loans(self, today: Optional[date] = None) -> List[Loan]:
        """Return open loans dated strictly before ``today - LATE_LOAN_DAYS``."""
        threshold = (today or date.today()) - timedelta(days=LATE_LOAN_DAYS)
        return self.repository.find_by_loan_date_before_and_not_returned(threshold)

    async def find(self, loan_filter: LoanFilter, page_request: PageRequest) -> PageResult[Loan]:
        return self.repository.find_by_book_isbn_or_customer(
            loan_filter.isbn, loan_filter.customer, page_request
        )
