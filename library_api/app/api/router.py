"""
Top‑level API router.

Aggregates the domain routers.  The application mounts it under the
``/api`` prefix.
"""

from fastapi import APIRouter

from .endpoints import books, loans

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["books"])
router.include_router(loans.router, prefix="/loans", tags=["loans"])
