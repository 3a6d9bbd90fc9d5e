"""Tests for API error handling and response models."""

import pytest

from safeplots.api import (
    ERROR_MESSAGES,
    ApiError,
    ApiResponse,
    PaginatedResponse,
    handle_api_error,
    with_error_handling,
)
from safeplots.notifications import Variant


def test_unwrap_success():
    assert ApiResponse(success=True, data={"id": 1}).unwrap() == {"id": 1}


def test_unwrap_failure_raises():
    response = ApiResponse(success=False, error="Request failed", status=409)

    with pytest.raises(ApiError) as exc_info:
        response.unwrap()

    assert exc_info.value.status == 409
    assert exc_info.value.message == "Request failed"


def test_unwrap_failure_without_status():
    with pytest.raises(ApiError) as exc_info:
        ApiResponse(success=False).unwrap()

    assert exc_info.value.status == 0


def test_paginated_response_accepts_camel_case():
    page = PaginatedResponse[dict].model_validate(
        {"items": [{"id": "p-1"}], "total": 25, "page": 2, "pageSize": 12, "totalPages": 3}
    )

    assert page.page_size == 12
    assert page.total_pages == 3
    assert PaginatedResponse(page_size=6).page_size == 6


def test_unauthorized_logs_out(notifier, session):
    logged_out = []

    handle_api_error(ApiError("x", 401), notifier, session=session, on_logout=lambda: logged_out.append(True))

    assert notifier.notifications[0].title == "Session Expired"
    assert session.current_user() is None
    assert logged_out == [True]


def test_forbidden(notifier, session):
    handle_api_error(ApiError("", 403), notifier, session=session)

    notification = notifier.notifications[0]
    assert notification.title == "Access Denied"
    assert notification.description == ERROR_MESSAGES[403]
    assert session.is_authenticated()


@pytest.mark.parametrize("error", [ApiError("offline", 0), ApiError("x", 502, code="NETWORK_ERROR")])
def test_connection_errors(notifier, error):
    handle_api_error(error, notifier)

    assert notifier.notifications[0].title == "Connection Error"


def test_token_expired_logs_out_silently(notifier, session):
    handle_api_error(ApiError("expired", 400, code="TOKEN_EXPIRED"), notifier, session=session)

    assert notifier.notifications == []
    assert session.current_user() is None


@pytest.mark.parametrize(
    ("code", "title", "logs_out"),
    [
        ("INVALID_CREDENTIALS", "Login Failed", False),
        ("USER_BANNED", "Account Suspended", True),
        ("EMAIL_NOT_VERIFIED", "Email Not Verified", False),
        ("SELLER_NOT_VERIFIED", "Seller Not Verified", False),
    ],
)
def test_coded_errors(notifier, session, code, title, logs_out):
    handle_api_error(ApiError("x", 400, code=code), notifier, session=session)

    assert notifier.notifications[0].title == title
    assert notifier.notifications[0].variant is Variant.DESTRUCTIVE
    assert session.is_authenticated() is not logs_out


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (ApiError("Listing already exists", 409), "Listing already exists"),
        (ApiError("", 429), ERROR_MESSAGES[429]),
        (ApiError("", 418), "Something went wrong."),
    ],
)
def test_generic_errors(notifier, error, expected):
    handle_api_error(error, notifier)

    assert notifier.notifications[0].title == "Error"
    assert notifier.notifications[0].description == expected


@pytest.mark.asyncio
async def test_with_error_handling_success(notifier):
    async def operation() -> str:
        return "approved"

    result = await with_error_handling(
        operation, notifier=notifier, show_success=True, success_message="Seller approved"
    )

    assert result == "approved"
    assert notifier.notifications[0].description == "Seller approved"


@pytest.mark.asyncio
async def test_with_error_handling_api_error(notifier):
    seen = []

    async def operation() -> str:
        raise ApiError("Conflict", 409)

    result = await with_error_handling(operation, notifier=notifier, on_error=seen.append)

    assert result is None
    assert [e.status for e in seen] == [409]
    assert notifier.notifications == []


@pytest.mark.asyncio
async def test_with_error_handling_other_error(notifier):
    seen = []

    async def operation() -> str:
        raise RuntimeError("bug")

    result = await with_error_handling(
        operation, notifier=notifier, show_success=True, on_error=seen.append
    )

    assert result is None
    assert seen == []
    assert notifier.notifications == []
