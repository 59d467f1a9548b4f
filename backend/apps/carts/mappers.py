from typing import Any, Dict, Iterable, List, Mapping

from apps.common.money import quantize_money

from .dtos import CartLineDTO


class CartLineMapper:
    """Cart lines as embedded JSON documents ``{productId, name, price, qty}``."""

    @staticmethod
    def to_document(line: CartLineDTO) -> Dict[str, Any]:
        # JSON columns cannot hold Decimal; cents survive the float round-trip
        return {
            "productId": line.product_id,
            "name": line.name,
            "price": float(line.price),
            "qty": line.qty,
        }

    @staticmethod
    def from_document(document: Mapping[str, Any]) -> CartLineDTO:
        return CartLineDTO(
            product_id=int(document["productId"]),
            name=document["name"],
            price=quantize_money(document["price"]),
            qty=int(document["qty"]),
        )

    @staticmethod
    def many_to_documents(lines: Iterable[CartLineDTO]) -> List[Dict[str, Any]]:
        return [CartLineMapper.to_document(line) for line in lines]

    @staticmethod
    def many_from_documents(documents: Iterable[Mapping[str, Any]]) -> List[CartLineDTO]:
        return [CartLineMapper.from_document(doc) for doc in documents]
