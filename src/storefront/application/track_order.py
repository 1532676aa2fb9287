"""Application service: Track Order use case (query)."""

from __future__ import annotations

from typing import Any

from storefront.application.auth_store import AuthStore
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.repository.order_gateway import OrderGateway


class TrackOrderHandler:

    def __init__(self, order_gateway: OrderGateway, auth_store: AuthStore) -> None:
        self._orders = order_gateway
        self._auth = auth_store

    def my_orders(self) -> list[dict[str, Any]]:
        if not self._auth.is_authenticated:
            raise ValidationError("Sign in to see your orders")
        return self._orders.list_mine()

    def guest_order(self, order_ref: str, phone: str) -> dict[str, Any]:
        if not order_ref.strip() or not phone.strip():
            raise ValidationError("Order code and phone are required")
        order = self._orders.lookup_guest(order_ref.strip(), phone.strip())
        if order is None:
            raise EntityNotFoundError(f"Order {order_ref} not found for that phone number")
        return order
