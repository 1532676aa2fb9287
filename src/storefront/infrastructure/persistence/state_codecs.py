"""Record layouts for the persisted client stores.

Snapshots keep the camelCase shape the storefront API uses, so the files
under the data directory can be read alongside API payloads:

- auth:      ``{user, token, isAuthenticated}``
- cart:      ``{items: [{product, quantity}], totalItems, totalPrice}``
- favorites: ``{items: [product]}``

Derived fields are written for readers of the file but ignored on load;
the stores recompute them from the lines.
"""

from __future__ import annotations

from typing import Any

from storefront.domain.model.cart import CartLine, CartState, total_items, total_price
from storefront.domain.model.favorites import FavoritesState
from storefront.domain.model.product import Product
from storefront.domain.model.session import SessionState, User

AUTH_KEY = "auth-storage"
CART_KEY = "cart-storage"
FAVORITES_KEY = "favorites-storage"


class SessionCodec:

    @staticmethod
    def to_record(state: SessionState) -> dict[str, Any]:
        return {
            "user": state.user.to_api() if state.user is not None else None,
            "token": state.token,
            "isAuthenticated": state.is_authenticated,
        }

    @staticmethod
    def from_record(record: dict[str, Any]) -> SessionState:
        raw_user = record.get("user")
        token = record.get("token")
        if raw_user is None or not token:
            # A half-populated record rehydrates as anonymous
            return SessionState()
        if not isinstance(token, str):
            raise TypeError(f"token must be a string, got {type(token).__name__}")
        return SessionState(user=User.from_api(raw_user), token=token)


class CartCodec:

    @staticmethod
    def to_record(state: CartState) -> dict[str, Any]:
        return {
            "items": [
                {"product": line.product.to_api(), "quantity": line.quantity}
                for line in state.items
            ],
            "totalItems": total_items(state),
            "totalPrice": total_price(state).to_number(),
        }

    @staticmethod
    def from_record(record: dict[str, Any]) -> CartState:
        lines: list[CartLine] = []
        seen: set[str] = set()
        for raw in record.get("items", []):
            product = Product.from_api(raw["product"])
            quantity = raw["quantity"]
            if not isinstance(quantity, int) or isinstance(quantity, bool):
                raise TypeError(f"quantity must be an integer, got {quantity!r}")
            if quantity <= 0 or product.id in seen:
                raise ValueError(f"invalid cart line for product {product.id}")
            seen.add(product.id)
            lines.append(CartLine(product, quantity))
        return CartState(items=tuple(lines))


class FavoritesCodec:

    @staticmethod
    def to_record(state: FavoritesState) -> dict[str, Any]:
        return {"items": [product.to_api() for product in state.items]}

    @staticmethod
    def from_record(record: dict[str, Any]) -> FavoritesState:
        items: list[Product] = []
        seen: set[str] = set()
        for raw in record.get("items", []):
            product = Product.from_api(raw)
            if product.id not in seen:
                seen.add(product.id)
                items.append(product)
        return FavoritesState(items=tuple(items))
