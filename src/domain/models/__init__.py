from domain.models.pagination import PageWrapper, PaginationResult

__all__ = [
    "PageWrapper",
    "PaginationResult",
]
