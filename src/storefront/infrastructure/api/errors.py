"""Errors surfaced by the storefront API client.

Transport failures are normalized into one user-facing message per
case. Error responses from the server keep the server's own message
verbatim so validation text reaches the shopper unchanged.
"""

from __future__ import annotations

from typing import Any

TIMEOUT_MESSAGE = "The request took too long. Please try again."
UNREACHABLE_MESSAGE = "Cannot reach the server. Please check your network connection."


class ApiError(Exception):
    """The API call failed. ``status_code`` is None for transport failures."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


class RequestTimeoutError(ApiError):
    """No answer within the timeout. Safe to retry."""

    def __init__(self) -> None:
        super().__init__(TIMEOUT_MESSAGE)


class ServerUnreachableError(ApiError):
    """No response at all: DNS, refused connection, dropped network."""

    def __init__(self) -> None:
        super().__init__(UNREACHABLE_MESSAGE)


class UnauthorizedError(ApiError):
    """The server rejected the session token (HTTP 401).

    By the time this is raised the session has already been signed out.
    """
