"""Deterministic storefront catalog derived from the bundled product images."""
import re
from decimal import Decimal
from typing import List, Sequence

from .dtos import ProductDTO

CATALOG_IMAGE_FILES = (
    "bag.jpeg",
    "dragon_bracelet.jpg",
    "jacket.png",
    "micropave.jpg",
    "rose_gold_earrings.jpeg",
    "solitare_ring.jpeg",
    "sweater.png",
    "tshirt.jpeg",
)

BASE_PRICE = Decimal("29.99")
PRICE_STEP = Decimal("20")

_IMAGE_SUFFIX = re.compile(r"\.(jpeg|jpg|png|gif)$", re.IGNORECASE)


def format_product_name(filename: str) -> str:
    """``rose_gold_earrings.jpeg`` -> ``Rose Gold Earrings``."""
    stem = _IMAGE_SUFFIX.sub("", filename)
    words = re.sub(r"[_-]", " ", stem).split(" ")
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def build_seed_products(image_files: Sequence[str] = CATALOG_IMAGE_FILES) -> List[ProductDTO]:
    products = []
    for index, image_file in enumerate(image_files):
        name = format_product_name(image_file)
        products.append(
            ProductDTO(
                id=index + 1,
                name=name,
                price=BASE_PRICE + PRICE_STEP * index,
                description=f"Premium {name.lower()}",
                image=f"/{image_file}",
            )
        )
    return products
