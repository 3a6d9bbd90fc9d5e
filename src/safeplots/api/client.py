"""Thin async REST client for the listings backend.

Every method returns an ApiResponse; HTTP and network failures are mapped
to user-facing messages instead of raised.

Usage:
    session = SessionStore(JsonFileKeyValueStore("state.json"))
    async with ApiClient.with_session(session) as client:
        response = await client.get("/properties", params={"page": 1, "limit": 12})
        if response.success:
            listing = PaginatedResponse[dict].model_validate(response.data)

        # Query functions that reject on failure, for ResourceQuery
        query = ResourceQuery(client.fetcher("/properties", paginator.get_query_params))
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import IO, Any
from urllib.parse import urlencode

import httpx

from safeplots.api.models import ApiResponse
from safeplots.config import ApiSettings
from safeplots.storage.session import SessionStore

logger = logging.getLogger(__name__)

QueryParams = Mapping[str, str | int | float | bool | None]
FileContent = bytes | IO[bytes] | tuple[str, bytes | IO[bytes]]

API_URL_NOT_CONFIGURED = "API URL not configured. Please set SAFEPLOTS_API_URL."
SESSION_EXPIRED = "Session expired. Please login again."
FORBIDDEN = "You do not have permission to perform this action."
SERVER_ERROR = "Server error. Please try again later."
NETWORK_ERROR = "Network error. Please check your connection."
UPLOAD_NETWORK_ERROR = "Upload failed. Please try again."


def _format_param(value: str | int | float | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(base_url: str, endpoint: str, params: QueryParams | None = None) -> str:
    """Join base URL and endpoint, appending params that are neither None nor empty."""
    url = f"{base_url}{endpoint}"
    if not params:
        return url

    query = {
        key: _format_param(value)
        for key, value in params.items()
        if value is not None and value != ""
    }
    if not query:
        return url
    return f"{url}?{urlencode(query)}"


def _payload_data(payload: Any) -> Any:
    """The body's ``data`` field if it holds a value, otherwise the whole body."""
    if isinstance(payload, dict):
        data = payload.get("data")
        if data is not None and data is not False and data != "" and data != 0:
            return data
    return payload


def _payload_error(payload: Any) -> str | None:
    if isinstance(payload, dict):
        error = payload.get("error")
        if error:
            return str(error)
    return None


class ApiClient:
    """Async REST client with bearer auth and soft failure handling.

    Args:
        settings: Base URL and timeout. Loaded from the environment if None.
        token_provider: Returns the bearer token to send, or None.
        on_unauthorized: Called when the server answers 401.
        transport: Optional httpx transport (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        settings: ApiSettings | None = None,
        *,
        token_provider: Callable[[], str | None] | None = None,
        on_unauthorized: Callable[[], None] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or ApiSettings()
        self._token_provider = token_provider
        self._on_unauthorized = on_unauthorized
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.timeout),
            transport=transport,
        )

    @classmethod
    def with_session(
        cls,
        session: SessionStore,
        settings: ApiSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> ApiClient:
        """Client that authenticates from session and clears it on 401."""
        return cls(
            settings,
            token_provider=session.token,
            on_unauthorized=session.clear,
            transport=transport,
        )

    @property
    def base_url(self) -> str | None:
        return self._settings.url

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _auth_headers(self) -> dict[str, str]:
        token = self._token_provider() if self._token_provider is not None else None
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: QueryParams | None = None,
        body: Any = None,
    ) -> ApiResponse[Any]:
        base_url = self._settings.url
        if not base_url:
            return ApiResponse(success=False, error=API_URL_NOT_CONFIGURED)

        url = build_url(base_url, endpoint, params)
        headers = {"Content-Type": "application/json", **self._auth_headers()}

        try:
            response = await self._client.request(
                method,
                url,
                headers=headers,
                json=body,
            )
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("API request failed: %s %s: %s", method, url, exc)
            return ApiResponse(success=False, error=NETWORK_ERROR, status=0)

        return self._interpret(response.status_code, payload, "Request failed")

    def _interpret(self, status: int, payload: Any, fallback: str) -> ApiResponse[Any]:
        if status == 401:
            if self._on_unauthorized is not None:
                self._on_unauthorized()
            return ApiResponse(success=False, error=SESSION_EXPIRED, status=status)

        if status == 403:
            return ApiResponse(success=False, error=FORBIDDEN, status=status)

        if status >= 500:
            return ApiResponse(success=False, error=SERVER_ERROR, status=status)

        if not 200 <= status < 300:
            return ApiResponse(
                success=False,
                error=_payload_error(payload) or fallback,
                status=status,
            )

        message = payload.get("message") if isinstance(payload, dict) else None
        return ApiResponse(
            success=True,
            data=_payload_data(payload),
            message=message if isinstance(message, str) else None,
            status=status,
        )

    async def get(self, endpoint: str, params: QueryParams | None = None) -> ApiResponse[Any]:
        return await self._request("GET", endpoint, params=params)

    async def post(
        self, endpoint: str, body: Any = None, params: QueryParams | None = None
    ) -> ApiResponse[Any]:
        return await self._request("POST", endpoint, params=params, body=body)

    async def put(self, endpoint: str, body: Any = None) -> ApiResponse[Any]:
        return await self._request("PUT", endpoint, body=body)

    async def patch(self, endpoint: str, body: Any = None) -> ApiResponse[Any]:
        return await self._request("PATCH", endpoint, body=body)

    async def delete(self, endpoint: str) -> ApiResponse[Any]:
        return await self._request("DELETE", endpoint)

    async def upload(
        self,
        endpoint: str,
        file: FileContent,
        additional_data: Mapping[str, str] | None = None,
    ) -> ApiResponse[Any]:
        """POST a multipart form with the file under the ``file`` field."""
        base_url = self._settings.url
        if not base_url:
            return ApiResponse(success=False, error=API_URL_NOT_CONFIGURED)

        url = f"{base_url}{endpoint}"
        try:
            response = await self._client.post(
                url,
                headers=self._auth_headers(),
                files={"file": file},
                data=dict(additional_data or {}),
            )
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Upload failed: %s: %s", url, exc)
            return ApiResponse(success=False, error=UPLOAD_NETWORK_ERROR, status=0)

        if not response.is_success:
            return ApiResponse(
                success=False,
                error=_payload_error(payload) or "Upload failed",
                status=response.status_code,
            )
        return ApiResponse(success=True, data=_payload_data(payload), status=response.status_code)

    def fetcher(
        self,
        endpoint: str,
        params: QueryParams | Callable[[], QueryParams] | None = None,
    ) -> Callable[[], Awaitable[Any]]:
        """Query function for ResourceQuery: GETs endpoint and raises ApiError on failure.

        params may be a callable so each execution reads current values,
        e.g. ``paginator.get_query_params``.
        """

        async def query_fn() -> Any:
            resolved = params() if callable(params) else params
            response = await self.get(endpoint, resolved)
            return response.unwrap()

        query_fn.__qualname__ = f"GET {endpoint}"
        return query_fn
