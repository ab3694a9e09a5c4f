from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .book import Book


@dataclass
class Loan:
    id: Optional[int] = None
    customer: Optional[str] = None
    book_id: Optional[int] = None
    loan_date: Optional[date] = None
    # None = not yet set; both None and False mean the loan is open.
    returned: Optional[bool] = None
    # Resolved on read; the stored reference is ``book_id``.
    book: Optional[Book] = None


@dataclass
class LoanFilter:
    """Loan search criteria; matched as ``isbn`` OR ``customer``."""

    isbn: Optional[str] = None
    customer: Optional[str] = None
