"""SafePlots: data-fetching, mutation and pagination primitives for listing clients.

Usage:
    from safeplots import ApiClient, Paginator, ResourceQuery

    paginator = Paginator(initial_limit=12)
    async with ApiClient() as client:
        query = ResourceQuery(
            client.fetcher("/properties", paginator.get_query_params),
            retry_count=2,
        )
        await query.start()
        paginator.set_total_count(query.data["total"])

        paginator.next_page()
        await query.refetch()
"""

__version__ = "0.1.0"

# API client
from safeplots.api import (
    ApiClient,
    ApiError,
    ApiResponse,
    PaginatedResponse,
    handle_api_error,
    with_error_handling,
)

# Notifications
from safeplots.notifications import (
    Notification,
    NotificationBus,
    Notifier,
    Variant,
)

# Pagination
from safeplots.pagination import (
    ELLIPSIS,
    PaginationState,
    Paginator,
    get_page_numbers,
)

# Queries and mutations
from safeplots.query import (
    Mutation,
    MutationState,
    QueryError,
    QueryState,
    ResourceQuery,
)

__all__ = [
    # Version
    "__version__",
    # Query
    "ResourceQuery",
    "Mutation",
    "QueryState",
    "MutationState",
    "QueryError",
    # Pagination
    "Paginator",
    "PaginationState",
    "get_page_numbers",
    "ELLIPSIS",
    # Notifications
    "Notification",
    "NotificationBus",
    "Notifier",
    "Variant",
    # API
    "ApiClient",
    "ApiError",
    "ApiResponse",
    "PaginatedResponse",
    "handle_api_error",
    "with_error_handling",
]
