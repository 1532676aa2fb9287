"""HTTP binding for the storefront REST API.

Every outgoing request carries the session token as a bearer credential
when one is held. Every response is classified before the caller sees
it:

- timeout        -> ``RequestTimeoutError`` (retryable)
- no response    -> ``ServerUnreachableError``
- HTTP 401       -> forced logout, redirect to the login view, then
                    ``UnauthorizedError`` whichever endpoint was called
- other >= 400   -> ``ApiError`` with the server's message verbatim

There is no retry, backoff or request de-duplication. Concurrent calls
are last-write-wins; views that care use ``LatestRequestGuard``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from storefront.application.auth_store import AuthStore
from storefront.infrastructure.api.envelope import ApiEnvelope
from storefront.infrastructure.api.errors import (
    ApiError,
    RequestTimeoutError,
    ServerUnreachableError,
    UnauthorizedError,
)
from storefront.infrastructure.api.navigator import Navigator
from storefront.infrastructure.config import Settings

logger = logging.getLogger(__name__)


class ApiClient:

    def __init__(
        self,
        settings: Settings,
        auth: AuthStore,
        navigator: Navigator,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._auth = auth
        self._navigator = navigator
        self._http = httpx.Client(
            base_url=settings.api_url,
            timeout=settings.timeout,
            headers={"Accept": "application/json"},
            event_hooks={"request": [self._attach_token]},
            transport=transport,
        )

    @property
    def upload_timeout(self) -> float:
        return self._settings.upload_timeout

    # --- Verbs ----------------------------------------------------------------

    def get(self, url: str, **kwargs: Any) -> ApiEnvelope:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> ApiEnvelope:
        return self.request("POST", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> ApiEnvelope:
        return self.request("PUT", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> ApiEnvelope:
        return self.request("DELETE", url, **kwargs)

    def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
        files: Any = None,
        timeout: float | None = None,
    ) -> ApiEnvelope:
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            response = self._http.request(
                method,
                url,
                params=params,
                json=json,
                data=data,
                files=files,
                timeout=timeout if timeout is not None else self._settings.timeout,
            )
        except httpx.TimeoutException as exc:
            logger.error("Request timeout: %s %s", method, url)
            raise RequestTimeoutError() from exc
        except httpx.TransportError as exc:
            logger.error("Network error on %s %s: %s", method, url, exc)
            raise ServerUnreachableError() from exc

        return self._handle_response(response)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- Hooks ----------------------------------------------------------------

    def _attach_token(self, request: httpx.Request) -> None:
        token = self._auth.token
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    def _handle_response(self, response: httpx.Response) -> ApiEnvelope:
        body = self._decode(response)

        if response.status_code == 401:
            logger.info("Session rejected by %s, signing out", response.request.url)
            self._auth.logout()
            self._navigator.redirect(self._settings.login_path)
            raise UnauthorizedError(
                self._message_from(body, response), status_code=401, payload=body
            )

        if response.is_error:
            raise ApiError(
                self._message_from(body, response),
                status_code=response.status_code,
                payload=body,
            )

        return ApiEnvelope.from_json(body)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        content_type = response.headers.get("content-type", "")
        if "json" in content_type:
            try:
                return response.json()
            except ValueError:
                return response.text
        return response.text

    @staticmethod
    def _message_from(body: Any, response: httpx.Response) -> str:
        if isinstance(body, dict):
            for key in ("message", "error"):
                if isinstance(body.get(key), str) and body[key]:
                    return body[key]
        return response.reason_phrase or f"HTTP {response.status_code}"
