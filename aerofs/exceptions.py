"""
AeroFS exception hierarchy.

All exceptions inherit from AeroFSError for easy catching.
"""

from typing import Any


class AeroFSError(Exception):
    """Base exception for all aerofs errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class InvalidArgumentError(AeroFSError, ValueError):
    """A caller-supplied value (configuration, token, code) is invalid."""


class APIError(AeroFSError):
    """API request returned a non-success status."""

    def __init__(self, message: str, *, code: int, endpoint: str | None = None) -> None:
        super().__init__(message, code=code, endpoint=endpoint)
        self.code = code
        self.endpoint = endpoint


class BadRequestError(APIError):
    """Request was malformed (400)."""

    def __init__(self, message: str, *, endpoint: str | None = None) -> None:
        super().__init__(message, code=400, endpoint=endpoint)


class UnauthorizedError(APIError):
    """Access token missing, invalid or expired (401)."""

    def __init__(self, message: str, *, endpoint: str | None = None) -> None:
        super().__init__(message, code=401, endpoint=endpoint)


class ForbiddenError(APIError):
    """Token lacks the scope or the user lacks the permission (403)."""

    def __init__(self, message: str, *, endpoint: str | None = None) -> None:
        super().__init__(message, code=403, endpoint=endpoint)


class NotFoundError(APIError):
    """Resource not found (file, folder, user, share)."""

    def __init__(self, message: str, *, endpoint: str | None = None) -> None:
        super().__init__(message, code=404, endpoint=endpoint)


class ConflictError(APIError):
    """Resource already exists or the operation conflicts with its state (409)."""

    def __init__(self, message: str, *, endpoint: str | None = None) -> None:
        super().__init__(message, code=409, endpoint=endpoint)


class PreconditionFailedError(APIError):
    """If-Match ETag no longer matches the resource (412)."""

    def __init__(self, message: str, *, endpoint: str | None = None) -> None:
        super().__init__(message, code=412, endpoint=endpoint)


class RateLimitError(APIError):
    """Rate limited by API."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        retry_after: int | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message, code=429, endpoint=endpoint)
        self.retry_after = retry_after


class ServerError(APIError):
    """Server-side error (5xx)."""

    def __init__(self, message: str, *, code: int = 500, endpoint: str | None = None) -> None:
        super().__init__(message, code=code, endpoint=endpoint)


class NetworkError(AeroFSError):
    """Network-level error (connection failed, timeout)."""
