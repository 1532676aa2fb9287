"""Tests for the HTTP client's auth injection and response classification.

Requests go through ``httpx.MockTransport``; nothing leaves the process.
"""

from pathlib import Path

import httpx
import pytest

from storefront.infrastructure.api.errors import (
    TIMEOUT_MESSAGE,
    UNREACHABLE_MESSAGE,
    ApiError,
    RequestTimeoutError,
    ServerUnreachableError,
    UnauthorizedError,
)
from storefront.infrastructure.bootstrap import build_context
from storefront.infrastructure.config import Settings
from tests.fakes import InMemoryStateStorage, make_user

SETTINGS = Settings(api_url="http://shop.test/api", data_dir=Path("unused"))


def _context(handler):
    seen = []

    def recording(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    app = build_context(
        SETTINGS,
        storage=InMemoryStateStorage(),
        transport=httpx.MockTransport(recording),
    )
    return app, seen


def _ok(request):
    return httpx.Response(200, json={"success": True, "data": []})


class TestRequestInterceptor:

    def test_no_authorization_header_when_anonymous(self):
        app, seen = _context(_ok)
        app.apis.products.list()
        assert "authorization" not in seen[0].headers

    def test_bearer_token_attached_when_signed_in(self):
        app, seen = _context(_ok)
        app.auth.login(make_user(), "tok-123")
        app.apis.orders.mine()
        assert seen[0].headers["authorization"] == "Bearer tok-123"

    def test_urls_are_relative_to_api_base(self):
        app, seen = _context(_ok)
        app.apis.products.search("roses")
        assert str(seen[0].url) == "http://shop.test/api/products/search?q=roses"

    def test_none_params_are_dropped(self):
        app, seen = _context(_ok)
        app.apis.blogs.featured()
        assert seen[0].url.params.get("limit") is None


class TestEnvelope:

    def test_paginated_envelope(self):
        def handler(request):
            return httpx.Response(
                200,
                json={
                    "success": True,
                    "data": [{"_id": "a"}],
                    "pagination": {"page": 2, "limit": 12, "total": 30, "totalPages": 3},
                },
            )

        app, _ = _context(handler)
        envelope = app.apis.products.list(page=2)
        assert envelope.success
        assert envelope.data == [{"_id": "a"}]
        assert envelope.pagination.total_pages == 3


class TestFailureClassification:

    def test_timeout_is_normalized(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        app, _ = _context(handler)
        with pytest.raises(RequestTimeoutError) as exc_info:
            app.apis.products.list()
        assert exc_info.value.message == TIMEOUT_MESSAGE
        assert exc_info.value.status_code is None

    def test_no_response_is_normalized(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        app, _ = _context(handler)
        with pytest.raises(ServerUnreachableError) as exc_info:
            app.apis.categories.list()
        assert str(exc_info.value) == UNREACHABLE_MESSAGE

    def test_server_message_passed_through_verbatim(self):
        def handler(request):
            return httpx.Response(
                400, json={"success": False, "message": "Mã giảm giá đã hết hạn"}
            )

        app, _ = _context(handler)
        with pytest.raises(ApiError) as exc_info:
            app.apis.coupons.validate("SPRING", 500_000)
        assert exc_info.value.message == "Mã giảm giá đã hết hạn"
        assert exc_info.value.status_code == 400
        assert not isinstance(exc_info.value, UnauthorizedError)

    def test_error_without_json_body(self):
        def handler(request):
            return httpx.Response(502, text="Bad gateway")

        app, _ = _context(handler)
        with pytest.raises(ApiError) as exc_info:
            app.apis.products.featured()
        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"

    def test_other_errors_keep_session(self):
        def handler(request):
            return httpx.Response(403, json={"success": False, "message": "Admin only"})

        app, _ = _context(handler)
        app.auth.login(make_user(), "tok")
        with pytest.raises(ApiError):
            app.apis.users.list()
        assert app.auth.is_authenticated
        assert app.navigator.current is None


class TestUnauthorized:

    @pytest.mark.parametrize(
        "call",
        [
            lambda app: app.apis.orders.mine(),
            lambda app: app.apis.products.get("abc"),
            lambda app: app.apis.reviews.create({"rating": 5}),
            lambda app: app.apis.users.delete("u2"),
        ],
    )
    def test_401_forces_logout_and_redirect_from_any_endpoint(self, call):
        def handler(request):
            return httpx.Response(401, json={"success": False, "message": "Token expired"})

        app, _ = _context(handler)
        app.auth.login(make_user(), "tok")
        with pytest.raises(UnauthorizedError) as exc_info:
            call(app)
        assert exc_info.value.message == "Token expired"
        assert not app.auth.is_authenticated
        assert app.auth.user is None
        assert app.navigator.current == "/login"

    def test_401_resets_chat_session(self):
        class Channel:
            closed = False

            def disconnect(self):
                self.closed = True

        def handler(request):
            return httpx.Response(401, json={"success": False, "message": "Not authorized"})

        app, _ = _context(handler)
        channel = Channel()
        app.chat.attach("customer", channel)
        app.auth.login(make_user(), "tok")
        with pytest.raises(UnauthorizedError):
            app.apis.auth.me()
        assert channel.closed


class TestUploads:

    def test_upload_is_multipart_with_long_timeout(self, tmp_path):
        image = tmp_path / "proof.jpg"
        image.write_bytes(b"\xff\xd8jpeg")

        app, seen = _context(lambda r: httpx.Response(200, json={"success": True, "data": {"url": "/u/p.jpg"}}))
        envelope = app.apis.upload.payment_proof("DH00001", image)
        request = seen[0]
        assert envelope.data == {"url": "/u/p.jpg"}
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert request.extensions["timeout"]["read"] == SETTINGS.upload_timeout
        body = request.read()
        assert b'name="orderId"' in body
        assert b"DH00001" in body
