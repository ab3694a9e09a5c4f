"""
Service layer.

Each service encapsulates the business rules for one domain and talks
to storage only through the repositories it is constructed with, so
tests can hand it doubles instead of a database.
"""

from .book_service import BookService
from .loan_service import LoanService

__all__ = ["BookService", "LoanService"]
