from datetime import datetime, timezone
from typing import Any, Dict, Mapping

from apps.carts.mappers import CartLineMapper
from apps.common.money import quantize_money

from .dtos import CheckoutRecordDTO, ReceiptDTO
from .models import CheckoutRecord


def format_timestamp(value: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


class CheckoutMapper:
    @staticmethod
    def to_document(record: CheckoutRecordDTO) -> Dict[str, Any]:
        return {
            "name": record.name,
            "email": record.email,
            "cartItems": CartLineMapper.many_to_documents(record.items),
            "total": record.total,
            "timestamp": record.timestamp,
        }

    @staticmethod
    def model_to_document(record: CheckoutRecord) -> Dict[str, Any]:
        return {
            "id": record.pk,
            "name": record.name,
            "email": record.email,
            "cartItems": list(record.cart_items or []),
            "total": quantize_money(record.total),
            "timestamp": record.timestamp,
        }

    @staticmethod
    def document_to_fields(document: Mapping[str, Any]) -> Dict[str, Any]:
        fields = {
            "name": document["name"],
            "email": document["email"],
            "cart_items": list(document.get("cartItems") or []),
            "total": quantize_money(document["total"]),
        }
        if document.get("timestamp") is not None:
            fields["timestamp"] = document["timestamp"]
        return fields

    @staticmethod
    def to_receipt(record: CheckoutRecordDTO) -> ReceiptDTO:
        return ReceiptDTO(
            name=record.name,
            email=record.email,
            items=list(record.items),
            total=record.total,
            timestamp=format_timestamp(record.timestamp),
        )
