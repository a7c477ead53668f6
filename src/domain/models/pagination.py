from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, fields
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


@dataclass(frozen=True)
class PaginationResult:
    """Fully computed pagination state for one requested page.

    Built by :meth:`domain.services.paginator.Paginator.compute`; every
    field is final once constructed.
    """

    page: int
    total_count: int
    page_size: int
    block_size: int
    total_page_count: int
    total_block_count: int
    block: int
    start_page: int
    end_page: int
    first_page: int
    last_page: int
    prev_page: int
    next_page: int
    prev_block: int
    next_block: int
    has_prev_block: bool
    has_next_block: bool
    offset: int
    limit: int

    @property
    def page_numbers(self) -> range:
        """Page numbers of the current block, ``start_page`` to ``end_page``."""
        return range(self.start_page, self.end_page + 1)

    def to_dict(self) -> dict[str, Any]:
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class PageWrapper(Generic[T]):
    """A caller's payload paired with the pagination it was fetched under."""

    result: PaginationResult
    data: T

    def map(self, func: Callable[[T], U]) -> PageWrapper[U]:
        """Transform the payload, preserving pagination metadata."""
        return PageWrapper(result=self.result, data=func(self.data))
