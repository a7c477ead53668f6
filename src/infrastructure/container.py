"""Dependency injection container for the block paginator.

Wires settings into the domain paginator and the application service,
exposing factory functions a host framework can hand to its own
dependency system.
"""

from __future__ import annotations

import logging

from application.services.pagination_service import PaginationService
from domain.services.paginator import Paginator
from infrastructure.settings import PaginationSettings, get_settings

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Central DI container that owns all service instances."""

    def __init__(self, settings: PaginationSettings | None = None) -> None:
        self._settings = settings or get_settings()

        # Domain services
        self.paginator = Paginator(
            default_page_size=self._settings.default_page_size,
            default_block_size=self._settings.default_block_size,
        )

        # Application services
        self.pagination_service = PaginationService(paginator=self.paginator)

        logger.info(
            "ServiceContainer initialized (page_size=%d, block_size=%d)",
            self.paginator.default_page_size,
            self.paginator.default_block_size,
        )

    @property
    def settings(self) -> PaginationSettings:
        return self._settings


# Module-level singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Return the global container singleton."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """Reset the global container (for testing)."""
    global _container
    _container = None


# ---------------------------------------------------------------------------
# Dependency factories
# ---------------------------------------------------------------------------


def get_paginator() -> Paginator:
    return get_container().paginator


def get_pagination_service() -> PaginationService:
    return get_container().pagination_service
