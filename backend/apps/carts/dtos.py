from dataclasses import dataclass, field
from decimal import Decimal
from typing import List


@dataclass
class CartLineDTO:
    product_id: int
    name: str
    price: Decimal
    qty: int


@dataclass
class CartDTO:
    items: List[CartLineDTO] = field(default_factory=list)
    total: Decimal = Decimal("0.00")
