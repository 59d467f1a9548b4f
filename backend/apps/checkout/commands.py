from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from apps.carts.commands import parse_cart_lines
from apps.carts.dtos import CartLineDTO


@dataclass
class CheckoutCommand:
    name: str
    email: str
    # None means "charge the live cart"; an empty list is an empty override
    cart_items: Optional[List[CartLineDTO]] = None

    @staticmethod
    def from_raw(payload: Dict[str, Any]) -> "CheckoutCommand":
        if not isinstance(payload, dict):
            raise ValueError("Payload must be a dict")
        raw_items = payload.get("cartItems", payload.get("cart_items"))
        return CheckoutCommand(
            name=str(payload.get("name") or "").strip(),
            email=str(payload.get("email") or "").strip(),
            cart_items=parse_cart_lines(raw_items),
        )
