import unittest
from datetime import datetime, timezone
from decimal import Decimal

from apps.api.exceptions import InvalidRequestError
from apps.carts.dtos import CartLineDTO
from apps.carts.services import CartService
from apps.catalog.seed import build_seed_products
from apps.catalog.services import CatalogService
from apps.checkout.services import CheckoutService
from apps.common.persistence import AdapterResult, AdapterUnavailableError, InMemoryDocumentAdapter

FIXED_NOW = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)


class FailingRecords:
    name = "checkouts"

    def __init__(self):
        self.attempts = 0

    def save(self, document):
        self.attempts += 1
        return AdapterResult.failure(AdapterUnavailableError(self.name, "save", "timeout"))


class CheckoutServiceTests(unittest.TestCase):
    def setUp(self):
        catalog = CatalogService(InMemoryDocumentAdapter("products"), build_seed_products())
        self.cart = CartService(catalog)
        self.records = InMemoryDocumentAdapter("checkouts")
        self.service = CheckoutService(self.cart, self.records, clock=lambda: FIXED_NOW)

    def test_checkout_live_cart(self):
        self.cart.add_item(1, 2)
        self.assertEqual(self.cart.get_cart().total, Decimal("59.98"))
        self.cart.update_item(1, 5)
        self.assertEqual(self.cart.get_cart().total, Decimal("149.95"))

        receipt = self.service.checkout("Ada", "ada@example.com")

        self.assertEqual(receipt.name, "Ada")
        self.assertEqual(receipt.email, "ada@example.com")
        self.assertEqual(receipt.total, Decimal("149.95"))
        self.assertEqual(len(receipt.items), 1)
        self.assertEqual(receipt.items[0].qty, 5)
        self.assertEqual(receipt.timestamp, "2024-05-01T12:30:45.123Z")
        cart = self.cart.get_cart()
        self.assertEqual(cart.items, [])
        self.assertEqual(cart.total, Decimal("0.00"))

    def test_checkout_records_document(self):
        self.cart.add_item(2, 1)
        self.service.checkout("Ada", "ada@example.com")
        docs = self.records.find_all().value
        self.assertEqual(len(docs), 1)
        self.assertEqual(docs[0]["email"], "ada@example.com")
        self.assertEqual(docs[0]["cartItems"][0]["productId"], 2)
        self.assertEqual(docs[0]["total"], Decimal("49.99"))

    def test_missing_customer_details_rejected(self):
        self.cart.add_item(1, 1)
        for name, email in [("", "a@b.c"), ("Ada", None), ("   ", "a@b.c"), (None, None)]:
            with self.assertRaises(InvalidRequestError) as ctx:
                self.service.checkout(name, email)
            self.assertEqual(ctx.exception.message, "Name and email are required")
        self.assertEqual(len(self.cart.list_items()), 1)

    def test_empty_cart_rejected_and_nothing_recorded(self):
        with self.assertRaises(InvalidRequestError) as ctx:
            self.service.checkout("Ada", "ada@example.com")
        self.assertEqual(ctx.exception.message, "Cart is empty")
        self.assertEqual(self.records.count().value, 0)
        self.assertEqual(self.cart.list_items(), [])

    def test_empty_override_rejected(self):
        self.cart.add_item(1, 1)
        with self.assertRaises(InvalidRequestError):
            self.service.checkout("Ada", "ada@example.com", [])
        self.assertEqual(len(self.cart.list_items()), 1)

    def test_override_items_are_charged_and_live_cart_cleared(self):
        self.cart.add_item(1, 1)
        override = [CartLineDTO(product_id=7, name="Sweater", price=Decimal("10.00"), qty=3)]
        receipt = self.service.checkout("Ada", "ada@example.com", override)
        self.assertEqual(receipt.total, Decimal("30.00"))
        self.assertEqual([i.product_id for i in receipt.items], [7])
        self.assertEqual(self.cart.list_items(), [])

    def test_persistence_failure_does_not_fail_checkout(self):
        records = FailingRecords()
        service = CheckoutService(self.cart, records, clock=lambda: FIXED_NOW)
        self.cart.add_item(3, 1)
        receipt = service.checkout("Ada", "ada@example.com")
        self.assertEqual(receipt.total, Decimal("69.99"))
        self.assertEqual(records.attempts, 1)
        self.assertEqual(self.cart.list_items(), [])

    def test_override_prices_are_summed_before_rounding(self):
        override = [
            CartLineDTO(product_id=1, name="Bag", price=Decimal("9.999"), qty=1),
            CartLineDTO(product_id=2, name="Ring", price=Decimal("0.004"), qty=1),
        ]
        receipt = self.service.checkout("Ada", "ada@example.com", override)
        self.assertEqual(receipt.total, Decimal("10.00"))
        self.assertEqual(receipt.items[0].price, Decimal("9.999"))
