from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from apps.common.money import to_decimal

from .dtos import CartLineDTO


@dataclass
class CartLineCommand:
    product_id: int
    name: str
    price: Decimal
    qty: int

    @staticmethod
    def from_raw(raw: Dict[str, Any]) -> Optional["CartLineCommand"]:
        if not isinstance(raw, dict):
            return None
        pid = raw.get("productId", raw.get("product_id"))
        try:
            pid = int(pid) if pid is not None else None
        except (ValueError, TypeError):
            pid = None
        try:
            qty = int(raw.get("qty", 0))
        except (ValueError, TypeError):
            qty = 0
        try:
            # Client-supplied prices are charged as given; totals round once
            price = to_decimal(raw.get("price"))
        except (InvalidOperation, ValueError, TypeError):
            price = None
        name = str(raw.get("name") or "").strip()
        if not pid or qty < 1 or not name:
            return None
        if price is None or not price.is_finite() or price < 0:
            return None
        return CartLineCommand(product_id=pid, name=name, price=price, qty=qty)

    def to_line(self) -> CartLineDTO:
        return CartLineDTO(
            product_id=self.product_id, name=self.name, price=self.price, qty=self.qty
        )


def parse_cart_lines(raw_items: Optional[List[Any]]) -> Optional[List[CartLineDTO]]:
    """Lines supplied by a client; ``None`` means "use the live cart"."""
    if raw_items is None:
        return None
    lines: List[CartLineDTO] = []
    for raw in raw_items:
        cmd = CartLineCommand.from_raw(raw)
        if cmd:
            lines.append(cmd.to_line())
    return lines
