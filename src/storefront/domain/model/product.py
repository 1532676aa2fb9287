"""Product snapshot.

Products are owned by the remote catalog. The client only holds copies
received from the API and never mutates them; a snapshot is replaced
wholesale when a fresher copy is fetched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

# Keys handled explicitly; anything else the API sends is carried in ``extra``.
_KNOWN_KEYS = {
    "_id", "name", "slug", "price", "salePrice", "images",
    "category", "stock", "isActive",
}


@dataclass(frozen=True)
class Product:
    """A catalog product as last seen by the client."""

    id: str
    name: str
    price: Money
    sale_price: Money | None = None
    slug: str = ""
    images: tuple[str, ...] = ()
    category: dict[str, Any] | str | None = field(default=None, hash=False)
    stock: int = 0
    is_active: bool = True
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def effective_price(self) -> Money:
        """Sale price when present and lower than list price, else list price."""
        if self.sale_price is not None and self.sale_price < self.price:
            return self.sale_price
        return self.price

    @property
    def on_sale(self) -> bool:
        return self.effective_price != self.price

    # --- Wire format ----------------------------------------------------------

    @staticmethod
    def from_api(raw: dict[str, Any]) -> Product:
        """Build a snapshot from the API's camelCase product record."""
        try:
            product_id = raw["_id"]
            name = raw["name"]
            price = raw["price"]
        except (KeyError, TypeError) as exc:
            raise ValidationError(f"Malformed product record: missing {exc}") from exc

        sale_price = raw.get("salePrice")
        return Product(
            id=str(product_id),
            name=name,
            price=Money.of(price),
            # A sale price of 0 means "no sale" on the wire
            sale_price=Money.of(sale_price) if sale_price else None,
            slug=raw.get("slug", ""),
            images=tuple(raw.get("images") or ()),
            category=raw.get("category"),
            stock=int(raw.get("stock", 0)),
            is_active=bool(raw.get("isActive", True)),
            extra={k: v for k, v in raw.items() if k not in _KNOWN_KEYS},
        )

    def to_api(self) -> dict[str, Any]:
        raw: dict[str, Any] = dict(self.extra)
        raw.update(
            {
                "_id": self.id,
                "name": self.name,
                "slug": self.slug,
                "price": self.price.to_number(),
                "images": list(self.images),
                "category": self.category,
                "stock": self.stock,
                "isActive": self.is_active,
            }
        )
        if self.sale_price is not None:
            raw["salePrice"] = self.sale_price.to_number()
        return raw
