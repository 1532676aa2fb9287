"""End-to-end tests for the click commands against a mocked API."""

from pathlib import Path

import httpx
from click.testing import CliRunner

from storefront.infrastructure.bootstrap import build_context
from storefront.infrastructure.cli.main import cli
from storefront.infrastructure.config import Settings
from tests.fakes import InMemoryStateStorage, make_product, make_user

SETTINGS = Settings(api_url="http://shop.test/api", data_dir=Path("unused"))

PRODUCTS = {
    "p1": {"_id": "p1", "name": "Red Roses", "price": 100000, "stock": 10},
    "p2": {"_id": "p2", "name": "Tulips", "price": 50000, "salePrice": 40000, "stock": 2},
    "p3": {"_id": "p3", "name": "Old Stock", "price": 10000, "stock": 0, "isActive": False},
}
USER = {"_id": "u1", "name": "Lan", "email": "lan@example.com", "role": "user"}


def _handler(request: httpx.Request) -> httpx.Response:
    path = request.url.path.removeprefix("/api")
    if request.method == "GET" and path == "/products":
        return httpx.Response(200, json={"success": True, "data": list(PRODUCTS.values())})
    if request.method == "GET" and path.startswith("/products/"):
        product = PRODUCTS.get(path.rsplit("/", 1)[-1])
        if product is None:
            return httpx.Response(404, json={"success": False, "message": "Product not found"})
        return httpx.Response(200, json={"success": True, "data": product})
    if request.method == "POST" and path == "/auth/login":
        return httpx.Response(200, json={"success": True, "data": {"user": USER, "token": "tok"}})
    if request.method == "POST" and path in ("/orders", "/orders/guest"):
        return httpx.Response(
            201,
            json={"success": True, "data": {"_id": "o1", "orderCode": "DH00001", "orderStatus": "pending", "total": 230000}},
        )
    if request.method == "GET" and path == "/orders":
        if request.headers.get("authorization") != "Bearer tok":
            return httpx.Response(401, json={"success": False, "message": "Token expired"})
        return httpx.Response(200, json={"success": True, "data": []})
    return httpx.Response(404, json={"success": False, "message": "Not found"})


def _app():
    return build_context(
        SETTINGS, storage=InMemoryStateStorage(), transport=httpx.MockTransport(_handler)
    )


def _run(app, *args):
    return CliRunner().invoke(cli, list(args), obj=app)


class TestCartCommands:

    def test_add_and_show(self):
        app = _app()
        result = _run(app, "cart", "add", "--id", "p1", "--quantity", "2")
        assert result.exit_code == 0, result.output
        assert "Added 2 x Red Roses" in result.output

        _run(app, "cart", "add", "--id", "p2", "--quantity", "3")
        result = _run(app, "cart", "show")
        assert "320.000₫" in result.output
        assert "(exceeds stock)" in result.output

    def test_set_zero_removes(self):
        app = _app()
        _run(app, "cart", "add", "--id", "p1")
        result = _run(app, "cart", "set", "--id", "p1", "--quantity", "0")
        assert "Your cart is empty." in result.output

    def test_unknown_product(self):
        result = _run(_app(), "cart", "add", "--id", "zzz")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_inactive_product(self):
        result = _run(_app(), "cart", "add", "--id", "p3")
        assert result.exit_code == 1
        assert "no longer for sale" in result.output


class TestAuthCommands:

    def test_login_whoami_logout(self):
        app = _app()
        result = _run(app, "auth", "login", "--email", "lan@example.com", "--password", "pw")
        assert result.exit_code == 0, result.output
        assert "Signed in as Lan" in result.output
        assert "role=user" in _run(app, "auth", "whoami").output
        assert "Signed out." in _run(app, "auth", "logout").output
        assert not app.auth.is_authenticated

    def test_expired_token_signs_out(self):
        app = _app()
        app.auth.login(make_user(), "stale")
        result = _run(app, "order", "list")
        assert result.exit_code == 1
        assert "Token expired" in result.output
        assert "auth login" in result.output
        assert not app.auth.is_authenticated
        assert app.navigator.current == "/login"


class TestOrderCommands:

    def test_guest_checkout_clears_cart(self):
        app = _app()
        app.cart.add(make_product("p1"), 2)
        result = _run(
            app, "order", "checkout", "--name", "Lan", "--phone", "0901", "--address", "12 Le Loi"
        )
        assert result.exit_code == 0, result.output
        assert "Guest order DH00001 placed" in result.output
        assert "230.000₫" in result.output
        assert app.cart.is_empty

    def test_checkout_empty_cart(self):
        result = _run(
            _app(), "order", "checkout", "--name", "Lan", "--phone", "0901", "--address", "x"
        )
        assert result.exit_code == 1
        assert "Cart is empty" in result.output


class TestFavoritesCommands:

    def test_add_list_remove(self):
        app = _app()
        _run(app, "favorites", "add", "--id", "p2")
        _run(app, "favorites", "add", "--id", "p2")
        result = _run(app, "favorites", "list")
        assert result.output.count("Tulips") == 1
        _run(app, "favorites", "remove", "--id", "p2")
        assert "No favorites yet." in _run(app, "favorites", "list").output


class TestProductCommands:

    def test_list_marks_favorites(self):
        app = _app()
        app.favorites.add(make_product("p1"))
        result = _run(app, "product", "list")
        assert result.exit_code == 0, result.output
        assert "Red Roses" in result.output
        assert "40.000₫" in result.output
        assert " *" in result.output

    def test_listing_guard_belongs_to_the_context(self):
        first, second = _app(), _app()
        assert first.listing_guard is not second.listing_guard
        token = first.listing_guard.begin()
        _run(first, "product", "list")
        assert not first.listing_guard.is_current(token)
        assert second.listing_guard.is_current(second.listing_guard.begin())
