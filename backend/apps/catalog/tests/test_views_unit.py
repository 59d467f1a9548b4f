import unittest
from decimal import Decimal
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory

from apps.catalog.dtos import ProductDTO
from apps.catalog.views import ProductListView


def make_product_dto(product_id=1, name="Bag", price="29.99"):
    return ProductDTO(
        id=product_id,
        name=name,
        price=Decimal(price),
        description=f"Premium {name.lower()}",
        image=f"/{name.lower()}.jpeg",
    )


class CatalogViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def test_product_list_serializes_products(self):
        service = Mock()
        service.list_products.return_value = [make_product_dto(1), make_product_dto(2, "Jacket", "49.99")]
        with patch.object(ProductListView, "service", service):
            response = ProductListView.as_view()(self.factory.get("/api/products"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data), 2)
        self.assertEqual(response.data[0]["id"], 1)
        self.assertEqual(response.data[0]["image"], "/bag.jpeg")
        self.assertEqual(response.data[1]["price"], Decimal("49.99"))

    def test_product_list_empty(self):
        service = Mock()
        service.list_products.return_value = []
        with patch.object(ProductListView, "service", service):
            response = ProductListView.as_view()(self.factory.get("/api/products"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, [])

    def test_unexpected_error_becomes_500(self):
        service = Mock()
        service.list_products.side_effect = RuntimeError("catalog exploded")
        with patch.object(ProductListView, "service", service):
            response = ProductListView.as_view()(self.factory.get("/api/products"))
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data["error"], "Server error: catalog exploded")

    def test_post_not_allowed(self):
        with patch.object(ProductListView, "service", Mock()):
            response = ProductListView.as_view()(self.factory.post("/api/products", {}, format="json"))
        self.assertEqual(response.status_code, 405)
        self.assertEqual(response.data["code"], "METHOD_NOT_ALLOWED")
