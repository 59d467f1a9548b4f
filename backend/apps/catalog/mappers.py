from typing import Any, Dict, Iterable, List, Mapping

from apps.common.money import quantize_money

from .dtos import ProductDTO
from .models import Product


class ProductMapper:
    """Converts products between model instances, adapter documents and DTOs."""

    @staticmethod
    def model_to_document(product: Product) -> Dict[str, Any]:
        return {
            "id": product.id,
            "name": product.name,
            "price": quantize_money(product.price),
            "description": product.description,
            "image": product.image,
        }

    @staticmethod
    def document_to_fields(document: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            "id": int(document["id"]),
            "name": document["name"],
            "price": quantize_money(document["price"]),
            "description": document.get("description") or "",
            "image": document.get("image") or "",
        }

    @staticmethod
    def to_document(dto: ProductDTO) -> Dict[str, Any]:
        return {
            "id": dto.id,
            "name": dto.name,
            "price": dto.price,
            "description": dto.description,
            "image": dto.image,
        }

    @staticmethod
    def to_dto(document: Mapping[str, Any]) -> ProductDTO:
        return ProductDTO(**ProductMapper.document_to_fields(document))

    @staticmethod
    def many_to_dto(documents: Iterable[Mapping[str, Any]]) -> List[ProductDTO]:
        return [ProductMapper.to_dto(d) for d in documents]
