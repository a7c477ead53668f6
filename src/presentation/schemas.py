"""
Pydantic v2 response schemas for paginated payloads.

``PaginationMeta`` mirrors :class:`domain.models.pagination.PaginationResult`
field for field and serializes under camelCase aliases; ``PageResponse``
carries a page of data next to it, ready for an API body or a template
context.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.models.pagination import PageWrapper, PaginationResult

T = TypeVar("T")


class _CamelModel(BaseModel):
    """Base model that reads snake_case attributes and writes camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )


class PaginationMeta(_CamelModel):
    """Pagination metadata included in every paginated response."""

    page: int = Field(..., ge=1, description="Current page number (1-indexed).")
    total_count: int = Field(..., description="Total number of items.")
    page_size: int = Field(..., ge=1, description="Items per page.")
    block_size: int = Field(..., ge=1, description="Page links per block.")
    total_page_count: int = Field(..., description="Total number of pages.")
    total_block_count: int = Field(..., description="Total number of blocks.")
    block: int = Field(..., description="Block containing the current page.")
    start_page: int = Field(..., description="First page of the current block.")
    end_page: int = Field(..., description="Last page of the current block.")
    first_page: int = Field(..., description="Always 1.")
    last_page: int = Field(..., description="Equal to the total page count.")
    prev_page: int = Field(..., description="Previous page, never below 1.")
    next_page: int = Field(..., description="Next page, never above the last page.")
    prev_block: int = Field(..., description="First page of the previous block.")
    next_block: int = Field(..., description="First page of the next block.")
    has_prev_block: bool
    has_next_block: bool
    offset: int = Field(..., description="Zero-based index of the first item on the page.")
    limit: int = Field(..., description="Number of items fetched for the page.")

    @classmethod
    def from_result(cls, result: PaginationResult) -> PaginationMeta:
        return cls.model_validate(result)


class PageResponse(BaseModel, Generic[T]):
    """A page of data together with its pagination metadata."""

    model_config = ConfigDict(populate_by_name=True)

    data: T
    pageable: PaginationMeta

    @classmethod
    def from_page(cls, page: PageWrapper[T]) -> PageResponse[T]:
        return cls(data=page.data, pageable=PaginationMeta.from_result(page.result))
