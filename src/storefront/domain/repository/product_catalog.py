"""Abstract read access to the remote product catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductCatalog(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a fresh snapshot of a product, or None if unknown."""

    @abstractmethod
    def list_products(self, **filters: object) -> list[Product]:
        """Return one page of products matching ``filters``."""
