"""
Pydantic schemas for loans.

Loan responses use camelCase ``loanDate`` on the wire and embed the
borrowed book.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from library_api.app.models import Loan
from library_api.app.schemas.book import BookRead


class LoanCreate(BaseModel):
    """Schema for lending a book, identified by isbn, to a customer."""

    isbn: Optional[str] = Field(None, examples=["001"])
    customer: Optional[str] = Field(None, examples=["Fulano"])


class ReturnedLoan(BaseModel):
    """Schema for setting the returned flag of a loan."""

    returned: bool


class LoanRead(BaseModel):
    id: int
    customer: Optional[str] = None
    loan_date: date = Field(..., alias="loanDate")
    returned: Optional[bool] = None
    book: Optional[BookRead] = None

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_domain(cls, loan: Loan) -> "LoanRead":
        return cls(
            id=loan.id,
            customer=loan.customer,
            loan_date=loan.loan_date,
            returned=loan.returned,
            book=BookRead.model_validate(loan.book) if loan.book is not None else None,
        )
