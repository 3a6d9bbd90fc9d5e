"""Configuration module using Pydantic Settings.

Usage:
    from safeplots.config import ApiSettings, QuerySettings

    settings = ApiSettings(url="https://api.example.com")
    query = QuerySettings(retry_count=2)
"""

from safeplots.config.settings import (
    AnalyticsSettings,
    ApiSettings,
    PaginationSettings,
    QuerySettings,
)

__all__ = [
    "ApiSettings",
    "QuerySettings",
    "PaginationSettings",
    "AnalyticsSettings",
]
