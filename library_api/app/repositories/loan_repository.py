"""
Persistence for Loan records.

Loans are always read joined with their Book so callers get the
embedded record without a second lookup.  ``loan_date`` is stored as
an ISO date string, which keeps date comparisons valid as plain
string comparisons in SQL.
"""

from __future__ import annotations

import sqlite3
from datetime import date
from typing import List, Optional

from library_api.app.core.db import get_connection
from library_api.app.core.pagination import PageRequest, PageResult
from library_api.app.models import Book, Loan
from library_api.app.repositories._sql import fits_integer, raise_if_unique_violation

_SELECT_LOANS = """
    SELECT l.id, l.customer, l.book_id, l.loan_date, l.returned,
           b.title AS book_title, b.author AS book_author, b.isbn AS book_isbn
    FROM loans l
    JOIN books b ON b.id = l.book_id
"""

# Open = returned flag unset or false.
_OPEN = "(l.returned IS NULL OR l.returned = 0)"


class LoanRepository:
    def save(self, loan: Loan) -> Loan:
        """Insert ``loan`` when it has no id yet, update it otherwise."""
        book_id = loan.book.id if loan.book is not None else loan.book_id
        returned = None if loan.returned is None else int(loan.returned)
        loan_date = loan.loan_date.isoformat() if loan.loan_date else None
        conn = get_connection()
        try:
            cursor = conn.cursor()
            try:
                if loan.id is None:
                    cursor.execute(
                        "INSERT INTO loans (customer, book_id, loan_date, returned) VALUES (?, ?, ?, ?)",
                        (loan.customer, book_id, loan_date, returned),
                    )
                    loan_id = cursor.lastrowid
                else:
                    cursor.execute(
                        "UPDATE loans SET customer = ?, book_id = ?, loan_date = ?, returned = ? WHERE id = ?",
                        (loan.customer, book_id, loan_date, returned, loan.id),
                    )
                    loan_id = loan.id
            except sqlite3.IntegrityError as exc:
                raise_if_unique_violation(exc)
                raise
            conn.commit()
            row = cursor.execute(_SELECT_LOANS + " WHERE l.id = ?", (loan_id,)).fetchone()
            return self._row_to_loan(row)
        finally:
            conn.close()

    def get_by_id(self, loan_id: int) -> Optional[Loan]:
        if not fits_integer(loan_id):
            return None
        conn = get_connection()
        try:
            row = conn.execute(_SELECT_LOANS + " WHERE l.id = ?", (loan_id,)).fetchone()
            return self._row_to_loan(row) if row else None
        finally:
            conn.close()

    def exists_by_book_and_not_returned(self, book: Book) -> bool:
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT EXISTS(SELECT 1 FROM loans l WHERE l.book_id = ? AND {_OPEN}) AS found",
                (book.id,),
            ).fetchone()
            return bool(row["found"])
        finally:
            conn.close()

    def find_by_book(self, book: Book, page_request: PageRequest) -> PageResult[Loan]:
        return self._page("l.book_id = ?", (book.id,), page_request)

    def find_by_book_isbn_or_customer(
        self,
        isbn: Optional[str],
        customer: Optional[str],
        page_request: PageRequest,
    ) -> PageResult[Loan]:
        """Page of loans whose book isbn equals ``isbn`` OR whose customer equals ``customer``.

        Only the provided values take part in the predicate; when neither
        is provided every loan matches.
        """
        clauses: List[str] = []
        params: List[str] = []
        if isbn:
            clauses.append("b.isbn = ?")
            params.append(isbn)
        if customer:
            clauses.append("l.customer = ?")
            params.append(customer)
        return self._page(" OR ".join(clauses), tuple(params), page_request)

    def find_by_loan_date_before_and_not_returned(self, threshold: date) -> List[Loan]:
        conn = get_connection()
        try:
            rows = conn.execute(
                _SELECT_LOANS + f" WHERE l.loan_date < ? AND {_OPEN} ORDER BY l.loan_date, l.id",
                (threshold.isoformat(),),
            ).fetchall()
            return [self._row_to_loan(row) for row in rows]
        finally:
            conn.close()

    def _page(self, predicate: str, params: tuple, page_request: PageRequest) -> PageResult[Loan]:
        where = f" WHERE {predicate}" if predicate else ""
        conn = get_connection()
        try:
            total = conn.execute(
                "SELECT COUNT(*) AS total FROM loans l JOIN books b ON b.id = l.book_id" + where,
                params,
            ).fetchone()["total"]
            rows = conn.execute(
                _SELECT_LOANS + where + " ORDER BY l.id LIMIT ? OFFSET ?",
                (*params, page_request.size, page_request.offset),
            ).fetchall()
            return PageResult(
                content=[self._row_to_loan(row) for row in rows],
                page_request=page_request,
                total_elements=total,
            )
        finally:
            conn.close()

    @staticmethod
    def _row_to_loan(row: sqlite3.Row) -> Loan:
        book = Book(
            id=row["book_id"],
            title=row["book_title"],
            author=row["book_author"],
            isbn=row["book_isbn"],
        )
        return Loan(
            id=row["id"],
            customer=row["customer"],
            book_id=row["book_id"],
            loan_date=date.fromisoformat(row["loan_date"]),
            returned=None if row["returned"] is None else bool(row["returned"]),
            book=book,
        )
