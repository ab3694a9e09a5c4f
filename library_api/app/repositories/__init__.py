"""
Repository layer.

Each repository owns the SQL for one table and converts rows to the
plain records in ``models``.  Services depend on repositories, never
the other way round.
"""

from .book_repository import BookRepository
from .loan_repository import LoanRepository

__all__ = ["BookRepository", "LoanRepository"]
