from __future__ import annotations

import threading
from typing import List, Optional, Sequence

from apps.common import get_logger
from apps.common.persistence import DocumentAdapter

from .dtos import ProductDTO
from .mappers import ProductMapper

logger = get_logger(__name__).bind(component="catalog", layer="service")

# Upper bound on documents read back from the adapter when the in-process
# catalog is empty.
ADAPTER_LIST_LIMIT = 20


class CatalogService:
    """Read-only product catalog.

    The seed list is loaded into process memory on first use and is the source
    of truth for listing whenever it is non-empty; the adapter is seeded with
    the same list once, if it is reachable and empty.
    """

    def __init__(self, products: DocumentAdapter, seed_products: Sequence[ProductDTO]):
        self.products = products
        self._seed_products = list(seed_products)
        self._catalog: List[ProductDTO] = []
        self._initialized = False
        self._adapter_seeded = False
        self._init_lock = threading.Lock()
        self.logger = logger.bind(service="CatalogService")

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> bool:
        """Load the in-process catalog and seed an empty adapter.

        Returns True when this call (or an earlier one) wrote the seed list to
        the adapter.
        """
        with self._init_lock:
            if self._initialized:
                return self._adapter_seeded
            count = self.products.count()
            if not count.ok:
                self.logger.warning(
                    "Catalog adapter unavailable; serving in-memory products",
                    error=str(count.error),
                )
            elif count.value == 0 and self._seed_products:
                inserted = self.products.insert_many(
                    ProductMapper.to_document(p) for p in self._seed_products
                )
                self._adapter_seeded = inserted.ok
                if inserted.ok:
                    self.logger.info("Seeded catalog adapter", inserted=inserted.value)
                else:
                    self.logger.warning(
                        "Catalog seeding failed", error=str(inserted.error)
                    )
            else:
                self.logger.debug("Catalog adapter already populated", count=count.value)
            self._catalog = list(self._seed_products)
            self._initialized = True
            self.logger.info("Catalog loaded", products=len(self._catalog))
            return self._adapter_seeded

    def list_products(self) -> List[ProductDTO]:
        self._ensure_initialized()
        if self._catalog:
            return list(self._catalog)
        result = self.products.find_all(limit=ADAPTER_LIST_LIMIT)
        if result.ok and result.value:
            self.logger.debug("Listing products from adapter", count=len(result.value))
            return ProductMapper.many_to_dto(result.value)
        return list(self._catalog)

    def find_product(self, product_id: int) -> Optional[ProductDTO]:
        self._ensure_initialized()
        self.logger.debug("Fetching product", product_id=product_id)
        result = self.products.find_one(id=product_id)
        if result.ok and result.value:
            return ProductMapper.to_dto(result.value)
        for product in self._catalog:
            if product.id == product_id:
                return product
        self.logger.info("Product not found", product_id=product_id)
        return None

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.initialize()
