from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

from django.utils import timezone

from apps.api.exceptions import InvalidRequestError
from apps.carts.dtos import CartLineDTO
from apps.carts.services import CartService
from apps.carts.utils import compute_total, copy_lines
from apps.common import get_logger
from apps.common.persistence import DocumentAdapter

from .dtos import CheckoutRecordDTO, ReceiptDTO
from .mappers import CheckoutMapper

logger = get_logger(__name__).bind(component="checkout", layer="service")


class CheckoutService:
    """Mock checkout: snapshot, total, best-effort record, clear the cart.

    There is no idempotency key. A retried request records a second checkout
    and clears an already empty cart.
    """

    def __init__(
        self,
        carts: CartService,
        records: DocumentAdapter,
        clock: Callable[[], datetime] = timezone.now,
    ):
        self.carts = carts
        self.records = records
        self.clock = clock
        self.logger = logger.bind(service="CheckoutService")

    def checkout(
        self,
        name: Optional[str],
        email: Optional[str],
        cart_items: Optional[List[CartLineDTO]] = None,
    ) -> ReceiptDTO:
        name = (name or "").strip()
        email = (email or "").strip()
        if not name or not email:
            self.logger.info("Checkout rejected: missing customer details")
            raise InvalidRequestError("Name and email are required")

        # Holding the cart lock keeps lines added mid-checkout from being
        # cleared without being charged.
        with self.carts.locked():
            if cart_items is not None:
                items = copy_lines(cart_items)
                source = "override"
            else:
                items = self.carts.list_items()
                source = "cart"
            if not items:
                self.logger.info("Checkout rejected: cart is empty", source=source)
                raise InvalidRequestError("Cart is empty")

            record = CheckoutRecordDTO(
                name=name,
                email=email,
                items=items,
                total=compute_total(items),
                timestamp=self.clock(),
            )
            self._persist(record)
            # The live cart is cleared even when an override list was charged
            self.carts.clear()

        self.logger.info(
            "Checkout completed",
            source=source,
            lines=len(items),
            total=record.total,
        )
        return CheckoutMapper.to_receipt(record)

    def _persist(self, record: CheckoutRecordDTO) -> bool:
        result = self.records.save(CheckoutMapper.to_document(record))
        if not result.ok:
            self.logger.warning(
                "Checkout record not persisted", email=record.email, error=str(result.error)
            )
            return False
        self.logger.debug("Checkout record persisted", adapter=self.records.name)
        return True
