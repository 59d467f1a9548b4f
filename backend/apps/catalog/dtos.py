from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: Decimal
    description: str
    image: str
