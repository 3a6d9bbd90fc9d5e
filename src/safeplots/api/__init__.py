"""REST client wrapper and API error handling.

Usage:
    from safeplots.api import ApiClient, ApiError, handle_api_error
"""

from safeplots.api.client import ApiClient, build_url
from safeplots.api.errors import (
    ERROR_MESSAGES,
    ApiError,
    handle_api_error,
    with_error_handling,
)
from safeplots.api.models import ApiResponse, PaginatedResponse

__all__ = [
    # Client
    "ApiClient",
    "build_url",
    # Models
    "ApiResponse",
    "PaginatedResponse",
    # Errors
    "ApiError",
    "ERROR_MESSAGES",
    "handle_api_error",
    "with_error_handling",
]
