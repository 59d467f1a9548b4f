from __future__ import annotations

from typing import Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.catalog.dtos import ProductDTO


class ProductLookupProtocol(Protocol):
    def find_product(self, product_id: int) -> Optional["ProductDTO"]:
        ...
