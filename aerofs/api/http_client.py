"""
HTTP client for the AeroFS API.

Provides a thin synchronous wrapper around httpx with bearer authentication,
error mapping and log sanitization.
"""

from collections.abc import Iterator
from typing import Any

import httpx
import structlog

from aerofs.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from aerofs.exceptions import (
    APIError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NetworkError,
    NotFoundError,
    PreconditionFailedError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)

logger = structlog.get_logger(__name__)

SENSITIVE_KEYS = frozenset(
    {
        "access_token",
        "refresh_token",
        "client_secret",
        "code",
        "password",
        "Authorization",
    }
)

_STATUS_ERRORS: dict[int, type[APIError]] = {
    httpx.codes.BAD_REQUEST: BadRequestError,
    httpx.codes.UNAUTHORIZED: UnauthorizedError,
    httpx.codes.FORBIDDEN: ForbiddenError,
    httpx.codes.NOT_FOUND: NotFoundError,
    httpx.codes.CONFLICT: ConflictError,
    httpx.codes.PRECONDITION_FAILED: PreconditionFailedError,
}


def sanitize_for_log(data: dict[str, Any]) -> dict[str, Any]:
    """
    Remove sensitive fields from a dict before logging.

    Recursively sanitizes nested dictionaries and lists.

    Args:
        data: Dictionary that may contain sensitive values.

    Returns:
        Copy with sensitive values replaced by "***".
    """
    result = {}
    for key, value in data.items():
        if key in SENSITIVE_KEYS:
            result[key] = "***"
        elif isinstance(value, dict):
            result[key] = sanitize_for_log(value)
        elif isinstance(value, list):
            result[key] = [
                sanitize_for_log(item) if isinstance(item, dict) else item for item in value
            ]
        else:
            result[key] = value
    return result


class HttpClient:
    """Synchronous HTTP client for the AeroFS API."""

    def __init__(
        self,
        base_url: str,
        *,
        access_token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: URL every relative request path is joined to.
            access_token: Bearer token sent on authenticated requests.
            timeout: Request timeout in seconds.
            user_agent: User-Agent header value.
            transport: Optional transport for testing (mock transport).
        """
        self._access_token = access_token
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "User-Agent": user_agent,
            },
        )

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, POST, etc.).
            path: API path relative to the base URL (e.g., "/files/abc").
            params: Query parameters.
            json: JSON body for POST/PUT requests.
            data: Form-encoded body.
            content: Raw request body.
            headers: Extra request headers.
            authenticated: Whether to include the bearer token.

        Returns:
            The successful response.

        Raises:
            APIError: If the API returns a non-2xx status.
            NetworkError: If the request fails due to network issues.
        """
        request_headers = self._build_headers(headers, authenticated)
        logger.debug(
            "API request",
            method=method,
            path=path,
            params=sanitize_for_log(params) if params else None,
        )

        try:
            response = self._client.request(
                method,
                path,
                params=params,
                json=json,
                data=data,
                content=content,
                headers=request_headers,
            )
        except httpx.TransportError as e:
            msg = f"Request failed: {e}"
            raise NetworkError(msg, method=method, path=path) from e

        if response.is_error:
            self._raise_api_error(response, path)

        logger.debug("API response", method=method, path=path, status=response.status_code)
        return response

    def request_json(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Make an API request and decode its JSON body.

        Returns:
            Decoded body, or None when the response has no content.

        Raises:
            APIError: If the status is an error or the body is not valid JSON.
        """
        response = self.request(method, path, **kwargs)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise APIError(
                "Invalid JSON response from API",
                code=response.status_code,
                endpoint=path,
            ) from e

    def stream(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        chunk_size: int | None = None,
    ) -> Iterator[bytes]:
        """
        Stream a response body (for large downloads).

        Args:
            method: HTTP method.
            path: API path relative to the base URL.
            params: Query parameters.
            headers: Extra request headers.
            chunk_size: Size of chunks to yield; httpx default when None.

        Yields:
            Response content in chunks.

        Raises:
            APIError: If the API returns a non-2xx status.
            NetworkError: If the transfer fails.
        """
        request_headers = self._build_headers(headers, authenticated=True)
        logger.debug("API stream", method=method, path=path)
        try:
            with self._client.stream(
                method, path, params=params, headers=request_headers
            ) as response:
                if response.is_error:
                    response.read()
                    self._raise_api_error(response, path)
                yield from response.iter_bytes(chunk_size)
        except httpx.TransportError as e:
            msg = f"Stream failed: {e}"
            raise NetworkError(msg, method=method, path=path) from e

    def _build_headers(self, headers: dict[str, str] | None, authenticated: bool) -> dict[str, str]:
        result = dict(headers or {})
        if authenticated and self._access_token:
            result["Authorization"] = f"Bearer {self._access_token}"
        return result

    @staticmethod
    def _raise_api_error(response: httpx.Response, endpoint: str) -> None:
        error_msg = _error_message(response)
        status = response.status_code
        logger.debug("API error", endpoint=endpoint, status=status, error=error_msg)

        if (error_cls := _STATUS_ERRORS.get(status)) is not None:
            raise error_cls(error_msg, endpoint=endpoint)
        if status == httpx.codes.TOO_MANY_REQUESTS:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                error_msg,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
                endpoint=endpoint,
            )
        if status >= httpx.codes.INTERNAL_SERVER_ERROR:
            raise ServerError(error_msg, code=status, endpoint=endpoint)

        msg = f"{error_msg} (status={status})"
        raise APIError(msg, code=status, endpoint=endpoint)


def _error_message(response: httpx.Response) -> str:
    """Extract the message from an AeroFS {"type", "message"} error body."""
    try:
        data = response.json()
    except ValueError:
        return response.text or response.reason_phrase or "Unknown error"
    if isinstance(data, dict):
        message = data.get("message") or data.get("error_description") or data.get("error")
        if message:
            error_type = data.get("type")
            return f"{error_type}: {message}" if error_type else str(message)
    return response.text or "Unknown error"
