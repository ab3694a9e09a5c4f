"""
Page envelope returned by listing endpoints.

Field names follow the camelCase wire format (``totalElements``,
``numberOfElements``...).
"""

from typing import Callable, Generic, List, TypeVar

from pydantic import BaseModel, Field

from library_api.app.core.pagination import PageResult

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    content: List[T]
    total_elements: int = Field(..., alias="totalElements")
    total_pages: int = Field(..., alias="totalPages")
    number: int
    size: int
    number_of_elements: int = Field(..., alias="numberOfElements")
    first: bool
    last: bool
    empty: bool

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_result(cls, result: PageResult, mapper: Callable) -> "Page":
        return cls(
            content=[mapper(item) for item in result.content],
            total_elements=result.total_elements,
            total_pages=result.total_pages,
            number=result.page_request.page,
            size=result.page_request.size,
            number_of_elements=result.number_of_elements,
            first=result.first,
            last=result.last,
            empty=result.number_of_elements == 0,
        )
