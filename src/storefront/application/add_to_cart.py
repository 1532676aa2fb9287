"""Application service: Add To Cart use case.

Views that already hold a product snapshot call ``CartStore.add``
directly. This handler is for callers that only know the product id.
"""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_catalog import ProductCatalog


class AddToCartHandler:

    def __init__(self, catalog: ProductCatalog, cart_store: CartStore) -> None:
        self._catalog = catalog
        self._cart = cart_store

    def handle(self, product_id: str, quantity: int = 1) -> Product:
        if quantity <= 0:
            raise ValidationError("Quantity must be positive")

        product = self._catalog.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if not product.is_active:
            raise ValidationError(f"'{product.name}' is no longer for sale")

        self._cart.add(product, quantity)
        return product
