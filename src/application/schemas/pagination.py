"""Pagination request parameters.

Provides the ``PaginationParams`` value object a host builds from an
incoming request (typically a query string) before asking the
:class:`PaginationService` for a page.  Normalization of the values is
left to :meth:`Paginator.compute`; this module only coerces types.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_DEFAULT_PAGE: int = 1


def _coerce_int(value: Any, default: int | None) -> int | None:
    if value is None:
        return default
    if isinstance(value, float) and not value.is_integer():
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class PaginationParams:
    """Immutable pagination request parameters.

    ``page`` is 1-based.  ``page_size`` / ``block_size`` of ``None`` mean
    "use the paginator default".  Out-of-range values are kept as given.
    """

    page: int = _DEFAULT_PAGE
    page_size: int | None = None
    block_size: int | None = None

    @classmethod
    def from_query(
        cls,
        query: Mapping[str, Any],
        *,
        page_key: str = "page",
        size_key: str = "size",
        block_key: str = "block",
    ) -> PaginationParams:
        """Build params from a query-string mapping.

        Missing, non-numeric or non-integral values (``"1.5"`` as well as
        ``2.9``) fall back to the field default instead of raising, so
        ``?page=abc`` behaves like no page at all.
        """
        return cls(
            page=_coerce_int(query.get(page_key), _DEFAULT_PAGE),  # type: ignore[arg-type]
            page_size=_coerce_int(query.get(size_key), None),
            block_size=_coerce_int(query.get(block_key), None),
        )
