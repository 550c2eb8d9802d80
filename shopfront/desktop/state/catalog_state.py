"""Reactive catalog state: load status, products and the reduced list."""

from __future__ import annotations

import logging
from typing import List, Optional

from fletx.core import RxList, RxStr

from shopfront.shared.domain.catalog import Catalog, Product, filter_below
from shopfront.shared.infrastructure.catalog_source import CatalogLoadState, LoadStatus

logger = logging.getLogger(__name__)


class CatalogState:
    """Mirrors a CatalogLoadState into FletXr properties.

    ``products`` stays empty until a catalog is loaded; ``reduced()`` is
    recomputed from it on every call.
    """

    def __init__(self, price_threshold: int, catalog: Optional[Catalog] = None) -> None:
        self.price_threshold = price_threshold
        self.status: RxStr = RxStr(LoadStatus.LOADING.value)
        self.error: RxStr = RxStr("")
        self.products: RxList[Product] = RxList([])
        self._catalog: Optional[Catalog] = None
        if catalog is not None:
            self.apply(CatalogLoadState.loaded(catalog))

    @property
    def catalog(self) -> Optional[Catalog]:
        return self._catalog

    @property
    def is_loaded(self) -> bool:
        return self.status.value == LoadStatus.LOADED.value

    def apply(self, state: CatalogLoadState) -> None:
        """Move to ``state``. A loaded catalog is kept if a later load fails."""
        if state.status is LoadStatus.LOADED:
            self._catalog = state.catalog
            self.products.value = list(state.catalog)
            self.error.value = ""
        elif state.status is LoadStatus.FAILED:
            self.error.value = state.error or "Unknown error"
        self.status.value = state.status.value
        logger.debug(f"Catalog state is now {state!r}")

    def reduced(self) -> List[Product]:
        """Products priced below the configured threshold, in catalog order."""
        return filter_below(self.products.value, self.price_threshold)

    def find(self, product_id: str) -> Optional[Product]:
        if self._catalog is None:
            return None
        return self._catalog.get(product_id)
