"""Application service: Browse Products use case.

Listing loads can overlap when the shopper pages or refines a search
before the previous page arrives. Only the newest load's result is
handed back; older ones come back as ``None``.
"""

from __future__ import annotations

import logging
from typing import Any

from storefront.application.request_guard import LatestRequestGuard
from storefront.domain.model.product import Product
from storefront.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class BrowseProductsHandler:

    def __init__(self, catalog: ProductCatalog, guard: LatestRequestGuard) -> None:
        self._catalog = catalog
        self._guard = guard

    def handle(self, **filters: Any) -> list[Product] | None:
        token = self._guard.begin()
        products = self._catalog.list_products(**filters)
        if not self._guard.is_current(token):
            logger.debug("Dropping superseded product listing %s", filters)
            return None
        return products
