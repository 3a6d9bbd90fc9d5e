"""Configuration settings using Pydantic Settings.

Provides typed defaults with environment variable support for the API
client, the query layer, pagination and analytics.

Usage:
    from safeplots.config import ApiSettings, QuerySettings

    # Load from environment variables (SAFEPLOTS_API_*, SAFEPLOTS_QUERY_*)
    api_settings = ApiSettings()
    query_settings = QuerySettings()

    # Or override with explicit values
    api_settings = ApiSettings(url="https://api.example.com/v1")
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the REST client.

    Attributes:
        url: Base URL of the backend API. Requests fail softly when unset.
        timeout: Request timeout in seconds.

    Environment Variables:
        SAFEPLOTS_API_URL
        SAFEPLOTS_API_TIMEOUT
    """

    model_config = SettingsConfigDict(
        env_prefix="SAFEPLOTS_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str | None = None
    timeout: float = 30.0


class QuerySettings(BaseSettings):  # type: ignore[misc]
    """Defaults for ResourceQuery instances.

    Attributes:
        retry_count: Automatic re-attempts after the first failure.
        retry_delay: Backoff unit in seconds; attempt n waits n * retry_delay.
        show_error_toast: Notify on terminal failure.

    Environment Variables:
        SAFEPLOTS_QUERY_RETRY_COUNT
        SAFEPLOTS_QUERY_RETRY_DELAY
        SAFEPLOTS_QUERY_SHOW_ERROR_TOAST
    """

    model_config = SettingsConfigDict(
        env_prefix="SAFEPLOTS_QUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    retry_count: int = Field(default=0, ge=0)
    retry_delay: float = Field(default=1.0, ge=0)
    show_error_toast: bool = True


class PaginationSettings(BaseSettings):  # type: ignore[misc]
    """Defaults for listing pagination.

    Environment Variables:
        SAFEPLOTS_PAGINATION_INITIAL_PAGE
        SAFEPLOTS_PAGINATION_INITIAL_LIMIT
        SAFEPLOTS_PAGINATION_MAX_VISIBLE
    """

    model_config = SettingsConfigDict(
        env_prefix="SAFEPLOTS_PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    initial_page: int = Field(default=1, ge=1)
    initial_limit: int = Field(default=12, gt=0)
    max_visible: int = Field(default=5, gt=0)


class AnalyticsSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the local analytics queue.

    Attributes:
        capacity: Maximum events kept; the oldest are evicted first.
        debug: Also log every tracked event.

    Environment Variables:
        SAFEPLOTS_ANALYTICS_CAPACITY
        SAFEPLOTS_ANALYTICS_DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="SAFEPLOTS_ANALYTICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    capacity: int = Field(default=100, gt=0)
    debug: bool = False
