from __future__ import annotations

from functools import lru_cache

from apps.carts.container import build_cart_service
from apps.common.persistence import build_document_adapter

from .mappers import CheckoutMapper
from .models import CheckoutRecord
from .services import CheckoutService


@lru_cache(maxsize=None)
def build_checkout_service() -> CheckoutService:
    return CheckoutService(
        carts=build_cart_service(),
        records=build_document_adapter(
            CheckoutRecord,
            name="checkouts",
            to_document=CheckoutMapper.model_to_document,
            from_document=CheckoutMapper.document_to_fields,
        ),
    )
