"""Data fetching and mutation primitives.

Usage:
    from safeplots.query import Mutation, ResourceQuery

    query = ResourceQuery(fetch_stats, retry_count=2)
    await query.start()

    delete = Mutation(delete_property, show_success_toast=True)
    await delete.mutate(property_id)
"""

from safeplots.query.base import StatefulResource
from safeplots.query.errors import QueryError, normalize_error
from safeplots.query.models import MutationState, QueryState, RetryPolicy
from safeplots.query.mutation import Mutation
from safeplots.query.resource import ResourceQuery

__all__ = [
    # Primitives
    "ResourceQuery",
    "Mutation",
    "StatefulResource",
    # Models
    "QueryState",
    "MutationState",
    "RetryPolicy",
    # Errors
    "QueryError",
    "normalize_error",
]
