from __future__ import annotations

from typing import TypeVar

from domain.models.pagination import PageWrapper, PaginationResult

T = TypeVar("T")

DEFAULT_PAGE_SIZE: int = 10
DEFAULT_BLOCK_SIZE: int = 5


def _ceil_div(numerator: int, denominator: int) -> int:
    # Integer ceiling; exact for ints of any size, including negatives.
    return -(-numerator // denominator)


class Paginator:
    """Block-style pagination calculator.

    Pages are grouped into blocks of ``block_size`` page links (pages 1-5
    are block 1, 6-10 block 2, ...).  Out-of-range input is normalized,
    never rejected: a non-positive page becomes 1 and a non-positive size
    falls back to the paginator default.  ``block`` and ``offset`` are not
    clamped against the page count, so a page past the end still yields
    the block and offset that page number implies.
    """

    def __init__(
        self,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        default_block_size: int = DEFAULT_BLOCK_SIZE,
    ) -> None:
        self.default_page_size = default_page_size
        self.default_block_size = default_block_size

    def compute(
        self,
        page: int,
        total_count: int,
        page_size: int | None = None,
        block_size: int | None = None,
    ) -> PaginationResult:
        if page_size is None or page_size <= 0:
            page_size = self.default_page_size
        if block_size is None or block_size <= 0:
            block_size = self.default_block_size

        page = 1 if page <= 0 else page

        total_page_count = _ceil_div(total_count, page_size)
        total_block_count = _ceil_div(total_page_count, block_size)
        block = _ceil_div(page, block_size)

        start_page = (block - 1) * block_size + 1
        end_page = start_page - 1 + block_size
        if end_page >= total_page_count:
            end_page = total_page_count
        # Overrides the clamp: an empty result still reports one page link.
        if total_page_count == 0:
            end_page = 1

        prev_page = max(page - 1, 1)
        next_page = page + 1
        if total_page_count < next_page:
            next_page = total_page_count

        prev_block = max((block - 2) * block_size + 1, 1)
        next_block = block * block_size + 1
        if next_block > total_page_count:
            next_block = total_page_count

        return PaginationResult(
            page=page,
            total_count=total_count,
            page_size=page_size,
            block_size=block_size,
            total_page_count=total_page_count,
            total_block_count=total_block_count,
            block=block,
            start_page=start_page,
            end_page=end_page,
            first_page=1,
            last_page=total_page_count,
            prev_page=prev_page,
            next_page=next_page,
            prev_block=prev_block,
            next_block=next_block,
            has_prev_block=block > 1,
            has_next_block=total_block_count > block,
            offset=(page - 1) * page_size,
            limit=page_size,
        )

    def wrap(self, result: PaginationResult, data: T) -> PageWrapper[T]:
        return PageWrapper(result=result, data=data)
