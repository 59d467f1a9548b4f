from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from apps.api.exceptions import InvalidRequestError, ResourceNotFoundError
from apps.common import get_logger

from .dtos import CartDTO, CartLineDTO
from .protocols import ProductLookupProtocol
from .utils import compute_total, copy_lines

logger = get_logger(__name__).bind(component="carts", layer="service")


class CartService:
    """The process-wide shopping cart.

    Lines keep insertion order and hold at most one entry per product. Every
    read and write goes through one re-entrant lock; callers only ever receive
    copies of the lines.
    """

    def __init__(self, catalog: ProductLookupProtocol):
        self.catalog = catalog
        self._lines: List[CartLineDTO] = []
        self._lock = threading.RLock()
        self.logger = logger.bind(service="CartService")

    @contextmanager
    def locked(self) -> Iterator["CartService"]:
        """Hold the cart lock across several calls (checkout snapshot + clear)."""
        with self._lock:
            yield self

    def add_item(self, product_id: Optional[int], qty: Optional[int]) -> List[CartLineDTO]:
        if not product_id or qty is None or qty < 1:
            self.logger.info("Rejected cart add", product_id=product_id, qty=qty)
            raise InvalidRequestError("Invalid productId or qty")
        # Product lookup may touch the database; keep it outside the lock
        product = self.catalog.find_product(product_id)
        if product is None:
            raise ResourceNotFoundError(
                "Product not found", details={"productId": product_id}
            )
        with self._lock:
            line = self._find_line(product_id)
            if line is not None:
                line.qty += qty
                self.logger.info(
                    "Incremented cart line", product_id=product_id, qty=line.qty
                )
            else:
                self._lines.append(
                    CartLineDTO(
                        product_id=product.id,
                        name=product.name,
                        price=product.price,
                        qty=qty,
                    )
                )
                self.logger.info("Added cart line", product_id=product_id, qty=qty)
            return copy_lines(self._lines)

    def update_item(self, product_id: int, qty: Optional[int]) -> List[CartLineDTO]:
        if qty is None or qty < 1:
            self.logger.info("Rejected cart update", product_id=product_id, qty=qty)
            raise InvalidRequestError("Invalid quantity")
        with self._lock:
            line = self._require_line(product_id)
            line.qty = qty
            self.logger.info("Updated cart line", product_id=product_id, qty=qty)
            return copy_lines(self._lines)

    def remove_item(self, product_id: int) -> List[CartLineDTO]:
        with self._lock:
            line = self._require_line(product_id)
            self._lines.remove(line)
            self.logger.info("Removed cart line", product_id=product_id)
            return copy_lines(self._lines)

    def list_items(self) -> List[CartLineDTO]:
        with self._lock:
            return copy_lines(self._lines)

    def get_cart(self) -> CartDTO:
        with self._lock:
            items = copy_lines(self._lines)
        return CartDTO(items=items, total=compute_total(items))

    def clear(self) -> None:
        with self._lock:
            cleared = len(self._lines)
            self._lines = []
        self.logger.info("Cart cleared", cleared_lines=cleared)

    def _find_line(self, product_id: int) -> Optional[CartLineDTO]:
        for line in self._lines:
            if line.product_id == product_id:
                return line
        return None

    def _require_line(self, product_id: int) -> CartLineDTO:
        line = self._find_line(product_id)
        if line is None:
            self.logger.info("Cart line not found", product_id=product_id)
            raise ResourceNotFoundError(
                "Item not found in cart", details={"productId": product_id}
            )
        return line
