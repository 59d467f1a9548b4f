import unittest
from decimal import Decimal

from apps.catalog.dtos import ProductDTO
from apps.catalog.seed import build_seed_products
from apps.catalog.services import ADAPTER_LIST_LIMIT, CatalogService
from apps.common.persistence import AdapterResult, AdapterUnavailableError, InMemoryDocumentAdapter


class UnavailableAdapter:
    """Adapter whose every call reports the backing store as unreachable."""

    name = "products"

    def __init__(self):
        self.calls = []

    def _fail(self, operation):
        self.calls.append(operation)
        return AdapterResult.failure(AdapterUnavailableError(self.name, operation, "connection refused"))

    def find_all(self, limit=None):
        return self._fail("find_all")

    def find_one(self, **filters):
        return self._fail("find_one")

    def insert_many(self, documents):
        return self._fail("insert_many")

    def save(self, document):
        return self._fail("save")

    def count(self):
        return self._fail("count")


def make_product(pid, name="Item", price="10.00"):
    return ProductDTO(id=pid, name=name, price=Decimal(price), description="", image="")


class CatalogServiceTests(unittest.TestCase):
    def setUp(self):
        self.adapter = InMemoryDocumentAdapter("products")
        self.service = CatalogService(self.adapter, build_seed_products())

    def test_initialize_seeds_empty_adapter_once(self):
        self.assertTrue(self.service.initialize())
        self.assertEqual(self.adapter.count().value, 8)
        self.assertTrue(self.service.initialize())
        self.assertEqual(self.adapter.count().value, 8)

    def test_initialize_leaves_populated_adapter_alone(self):
        self.adapter.insert_many([{"id": 50, "name": "Existing", "price": Decimal("5.00")}])
        self.assertFalse(self.service.initialize())
        self.assertEqual(self.adapter.count().value, 1)
        self.assertEqual(len(self.service.list_products()), 8)

    def test_list_products_is_stable_across_calls(self):
        first = self.service.list_products()
        second = self.service.list_products()
        self.assertEqual(first, second)
        self.assertEqual(first[0].name, "Bag")
        self.assertTrue(self.service.initialized)

    def test_list_products_returns_copy(self):
        listed = self.service.list_products()
        listed.clear()
        self.assertEqual(len(self.service.list_products()), 8)

    def test_empty_catalog_lists_from_adapter_with_limit(self):
        self.adapter.insert_many(
            {"id": i, "name": f"P{i}", "price": Decimal("1.00")} for i in range(1, 30)
        )
        service = CatalogService(self.adapter, [])
        products = service.list_products()
        self.assertEqual(len(products), ADAPTER_LIST_LIMIT)
        self.assertEqual(products[0].name, "P1")

    def test_find_product_prefers_adapter_document(self):
        self.adapter.save({"id": 1, "name": "Bag", "price": Decimal("19.99")})
        self.assertEqual(self.service.find_product(1).price, Decimal("19.99"))

    def test_find_product_unknown_returns_none(self):
        self.assertIsNone(self.service.find_product(999))


class CatalogServiceUnavailableAdapterTests(unittest.TestCase):
    def setUp(self):
        self.adapter = UnavailableAdapter()
        self.service = CatalogService(self.adapter, [make_product(1, "Bag", "29.99"), make_product(2, "Jacket")])

    def test_initialize_falls_back_to_memory(self):
        self.assertFalse(self.service.initialize())
        self.assertNotIn("insert_many", self.adapter.calls)
        self.assertEqual([p.id for p in self.service.list_products()], [1, 2])

    def test_find_product_falls_back_to_memory(self):
        product = self.service.find_product(1)
        self.assertEqual(product.name, "Bag")
        self.assertIn("find_one", self.adapter.calls)

    def test_empty_catalog_and_unavailable_adapter_lists_nothing(self):
        service = CatalogService(UnavailableAdapter(), [])
        self.assertEqual(service.list_products(), [])
