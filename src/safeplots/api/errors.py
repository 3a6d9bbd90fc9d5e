"""API error taxonomy and user-facing error handling.

Usage:
    try:
        data = (await client.get("/admin/stats")).unwrap()
    except ApiError as error:
        handle_api_error(error, notifier, session=session)

    result = await with_error_handling(
        lambda: approve_seller(seller_id),
        notifier=notifier,
        show_success=True,
        success_message="Seller approved",
    )
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, TypeVar

from safeplots.notifications import Notification, Notifier

if TYPE_CHECKING:
    from safeplots.storage.session import SessionStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApiError(Exception):
    """Failed API call.

    Attributes:
        status: HTTP status code, 0 for network failures.
        code: Optional machine-readable error code from the server.
    """

    def __init__(self, message: str, status: int, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code

    def __repr__(self) -> str:
        return f"ApiError(status={self.status}, code={self.code!r}, message={self.message!r})"


ERROR_MESSAGES: dict[int, str] = {
    400: "Invalid request. Please check your input.",
    401: "Your session has expired. Please login again.",
    403: "You do not have permission to perform this action.",
    404: "The requested resource was not found.",
    409: "This action conflicts with existing data.",
    422: "The provided data is invalid.",
    429: "Too many requests. Please try again later.",
    500: "Something went wrong. Please try again later.",
    502: "Service temporarily unavailable. Please try again.",
    503: "Service is under maintenance. Please try again later.",
}

GENERIC_ERROR_MESSAGE = "Something went wrong."

# code -> (title, description, logs out)
_CODE_NOTIFICATIONS: dict[str, tuple[str, str, bool]] = {
    "INVALID_CREDENTIALS": ("Login Failed", "Invalid email or password.", False),
    "USER_BANNED": (
        "Account Suspended",
        "Your account has been suspended. Contact support for assistance.",
        True,
    ),
    "EMAIL_NOT_VERIFIED": ("Email Not Verified", "Please verify your email to continue.", False),
    "SELLER_NOT_VERIFIED": (
        "Seller Not Verified",
        "Your seller account is pending verification.",
        False,
    ),
}


def handle_api_error(
    error: ApiError,
    notifier: Notifier,
    session: SessionStore | None = None,
    on_logout: Callable[[], None] | None = None,
) -> None:
    """Turn an ApiError into notifications and, where needed, a logout.

    Logging out clears the session (if given) and calls on_logout, which is
    where a UI redirects to its sign-in screen.
    """

    def logout() -> None:
        if session is not None:
            session.clear()
        if on_logout is not None:
            on_logout()

    status, code = error.status, error.code

    if status == 401:
        notifier.notify(Notification.error("Please login again to continue.", title="Session Expired"))
        logout()
        return

    if status == 403:
        notifier.notify(
            Notification.error(error.message or ERROR_MESSAGES[403], title="Access Denied")
        )
        return

    if status == 0 or code == "NETWORK_ERROR":
        notifier.notify(
            Notification.error(
                "Please check your internet connection and try again.",
                title="Connection Error",
            )
        )
        return

    if code == "TOKEN_EXPIRED":
        logout()
        return

    if code in _CODE_NOTIFICATIONS:
        title, description, logs_out = _CODE_NOTIFICATIONS[code]
        notifier.notify(Notification.error(description, title=title))
        if logs_out:
            logout()
        return

    description = error.message or ERROR_MESSAGES.get(status) or GENERIC_ERROR_MESSAGE
    notifier.notify(Notification.error(description))


async def with_error_handling(
    operation: Callable[[], Awaitable[T]],
    *,
    notifier: Notifier,
    show_success: bool = False,
    success_message: str | None = None,
    on_error: Callable[[ApiError], None] | None = None,
) -> T | None:
    """Await operation, returning None instead of raising on failure.

    on_error only sees ApiError failures; other failures are logged.
    """
    try:
        result = await operation()
    except ApiError as error:
        logger.debug("Operation failed: %r", error)
        if on_error is not None:
            on_error(error)
        return None
    except Exception:
        logger.exception("Operation failed")
        return None

    if show_success:
        notifier.notify(Notification.success(success_message or "Operation completed successfully."))
    return result
