from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List

from apps.carts.dtos import CartLineDTO


@dataclass(frozen=True)
class ReceiptDTO:
    name: str
    email: str
    items: List[CartLineDTO] = field(default_factory=list)
    total: Decimal = Decimal("0.00")
    timestamp: str = ""


@dataclass(frozen=True)
class CheckoutRecordDTO:
    name: str
    email: str
    items: List[CartLineDTO]
    total: Decimal
    timestamp: datetime
