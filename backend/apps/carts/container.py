from __future__ import annotations

from functools import lru_cache

from apps.catalog.container import build_catalog_service

from .services import CartService


@lru_cache(maxsize=None)
def build_cart_service() -> CartService:
    """The single cart instance shared by the cart and checkout views."""
    return CartService(catalog=build_catalog_service())
