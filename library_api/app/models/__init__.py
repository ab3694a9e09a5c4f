"""
Plain domain records.

Records reference each other through explicit foreign-key fields;
a Book's loans are looked up through ``LoanRepository`` rather than
held on the Book itself.
"""

from .book import Book
from .loan import Loan, LoanFilter

__all__ = ["Book", "Loan", "LoanFilter"]
