"""Pagination settings for connection queries.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_DEFAULT_LIMIT=100, PAGINATION_MAX_LIMIT=1000
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        default_limit: Page size when neither first nor last is given.
        max_limit: Maximum rows returned by a single page (hard limit).
    """

    default_limit: int = Field(
        default=1000,
        ge=1,
        le=10000,
        description="Default page size when first/last are not specified",
    )
    max_limit: int = Field(
        default=1000,
        ge=1,
        le=10000,
        description="Maximum allowed page size (hard limit)",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _default_within_max(self) -> PaginationSettings:
        if self.default_limit > self.max_limit:
            msg = "default_limit must not exceed max_limit"
            raise ValueError(msg)
        return self
