from __future__ import annotations

from functools import lru_cache

from apps.common.persistence import build_document_adapter

from .mappers import ProductMapper
from .models import Product
from .seed import build_seed_products
from .services import CatalogService


@lru_cache(maxsize=None)
def build_catalog_service() -> CatalogService:
    """Process-wide catalog; every view and the cart share this instance."""
    return CatalogService(
        products=build_document_adapter(
            Product,
            name="products",
            to_document=ProductMapper.model_to_document,
            from_document=ProductMapper.document_to_fields,
        ),
        seed_products=build_seed_products(),
    )
