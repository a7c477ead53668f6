"""Pagination application service.

Runs the count / compute / bounded-fetch / wrap sequence a host performs
for every paginated listing.  Delegates the arithmetic to the domain-layer
:class:`Paginator`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, TypeVar

from application.schemas.pagination import PaginationParams
from domain.models.pagination import PageWrapper

if TYPE_CHECKING:
    from domain.services.paginator import Paginator

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


# ---------------------------------------------------------------------------
# Data source port interface
# ---------------------------------------------------------------------------


class PagedSource(Protocol[T_co]):
    """Port: a countable data source that supports bounded fetches."""

    def count(self) -> int: ...

    def fetch(self, offset: int, limit: int) -> Sequence[T_co]: ...


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class PaginationService:
    """Fetches one page of a :class:`PagedSource` and pairs it with its pagination."""

    def __init__(self, paginator: Paginator) -> None:
        self._paginator = paginator

    def get_page(
        self,
        source: PagedSource[T],
        params: PaginationParams | None = None,
    ) -> PageWrapper[list[T]]:
        """Count *source*, compute pagination for *params* and fetch that page.

        Errors raised by the source propagate to the caller unchanged.
        """
        params = params or PaginationParams()
        total = source.count()
        result = self._paginator.compute(
            params.page,
            total,
            params.page_size,
            params.block_size,
        )
        rows = list(source.fetch(result.offset, result.limit))

        logger.debug(
            "Fetched page %d of %d (offset=%d, limit=%d, rows=%d, total=%d)",
            result.page,
            result.total_page_count,
            result.offset,
            result.limit,
            len(rows),
            total,
        )
        return self._paginator.wrap(result, rows)
