"""
Pagination primitives shared by repositories and services.

``PageRequest`` describes which slice of a result set is wanted;
``PageResult`` carries that slice together with the total number of
matching rows so the HTTP layer can build the page envelope.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 1000
# Keeps page * size inside a signed 64-bit OFFSET.
MAX_PAGE_INDEX = (2**63 - 1) // MAX_PAGE_SIZE


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index and page size."""

    page: int = 0
    size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("Page index must not be less than zero")
        if self.size < 1:
            raise ValueError("Page size must not be less than one")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class PageResult(Generic[T]):
    content: List[T] = field(default_factory=list)
    page_request: PageRequest = field(default_factory=PageRequest)
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.page_request.size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def first(self) -> bool:
        return self.page_request.page == 0

    @property
    def last(self) -> bool:
        return self.page_request.page + 1 >= self.total_pages
