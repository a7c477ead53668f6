"""Pagination settings loaded from environment variables via Pydantic."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class PaginationSettings(BaseSettings):
    """Central configuration for the block paginator."""

    model_config = {"env_prefix": "PAGINATION_", "case_sensitive": False}

    # Sizes used when a caller omits them or passes a non-positive value
    default_page_size: int = Field(default=10, ge=1)
    default_block_size: int = Field(default=5, ge=1)

    # Logging
    log_level: str = "INFO"


def get_settings() -> PaginationSettings:
    """Return freshly loaded pagination settings."""
    return PaginationSettings()
