"""API-backed implementations of the domain gateways.

Translate envelopes into domain objects; a 404 from a lookup endpoint
means "not found" rather than a failure.
"""

from __future__ import annotations

from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.session import User
from storefront.domain.repository.auth_gateway import AuthGateway
from storefront.domain.repository.order_gateway import OrderGateway
from storefront.domain.repository.product_catalog import ProductCatalog
from storefront.infrastructure.api.endpoints import AuthAPI, OrdersAPI, ProductsAPI
from storefront.infrastructure.api.errors import ApiError


class ApiProductCatalog(ProductCatalog):

    def __init__(self, products: ProductsAPI) -> None:
        self._products = products

    def get_by_id(self, product_id: str) -> Product | None:
        try:
            envelope = self._products.get(product_id)
        except ApiError as exc:
            if exc.status_code == 404:
                return None
            raise
        if not envelope.data:
            return None
        return Product.from_api(envelope.data)

    def list_products(self, **filters: object) -> list[Product]:
        envelope = self._products.list(**filters)
        return [Product.from_api(raw) for raw in envelope.data or []]


class ApiOrderGateway(OrderGateway):

    def __init__(self, orders: OrdersAPI) -> None:
        self._orders = orders

    def place(self, payload: dict[str, Any], *, guest: bool) -> dict[str, Any]:
        envelope = self._orders.create_guest(payload) if guest else self._orders.create(payload)
        if not envelope.success or not isinstance(envelope.data, dict):
            raise ValidationError(envelope.message or "Order was not accepted")
        return envelope.data

    def list_mine(self) -> list[dict[str, Any]]:
        return list(self._orders.mine().data or [])

    def lookup_guest(self, order_id: str, phone: str) -> dict[str, Any] | None:
        try:
            envelope = self._orders.lookup_guest(order_id, phone)
        except ApiError as exc:
            if exc.status_code == 404:
                return None
            raise
        return envelope.data or None


class ApiAuthGateway(AuthGateway):

    def __init__(self, auth: AuthAPI) -> None:
        self._auth = auth

    def authenticate(self, email: str, password: str) -> tuple[User, str]:
        envelope = self._auth.login(email, password)
        data = envelope.data if isinstance(envelope.data, dict) else {}
        token = data.get("token")
        raw_user = data.get("user")
        if not token or not isinstance(raw_user, dict):
            raise ValidationError(envelope.message or "Login response carried no session")
        return User.from_api(raw_user), token
