"""Shared fixtures for unit tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from application.services.pagination_service import PaginationService
from domain.services.paginator import Paginator
from infrastructure.adapters import InMemoryPagedSource
from infrastructure.container import reset_container

ARTICLES = [f"article-{n:03d}" for n in range(1, 101)]


@pytest.fixture
def paginator() -> Paginator:
    return Paginator()


@pytest.fixture
def pagination_service(paginator: Paginator) -> PaginationService:
    return PaginationService(paginator=paginator)


@pytest.fixture
def article_source() -> InMemoryPagedSource[str]:
    return InMemoryPagedSource(ARTICLES)


@pytest.fixture
def empty_source() -> InMemoryPagedSource[str]:
    return InMemoryPagedSource()


@pytest.fixture(autouse=True)
def _clean_pagination_env(monkeypatch):
    for name in (
        "PAGINATION_DEFAULT_PAGE_SIZE",
        "PAGINATION_DEFAULT_BLOCK_SIZE",
        "PAGINATION_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_container()
    yield
    reset_container()
