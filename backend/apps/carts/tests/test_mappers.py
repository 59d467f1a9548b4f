import unittest
from decimal import Decimal

from apps.carts.dtos import CartLineDTO
from apps.carts.mappers import CartLineMapper
from apps.carts.utils import compute_total, copy_lines


class CartLineMapperTests(unittest.TestCase):
    def test_to_document_uses_json_safe_types(self):
        doc = CartLineMapper.to_document(CartLineDTO(product_id=1, name="Bag", price=Decimal("29.99"), qty=2))
        self.assertEqual(doc, {"productId": 1, "name": "Bag", "price": 29.99, "qty": 2})

    def test_from_document_restores_decimal_price(self):
        line = CartLineMapper.from_document({"productId": "7", "name": "Sweater", "price": 149.99, "qty": "1"})
        self.assertEqual(line, CartLineDTO(product_id=7, name="Sweater", price=Decimal("149.99"), qty=1))

    def test_many_helpers_keep_order(self):
        lines = [
            CartLineDTO(product_id=2, name="B", price=Decimal("1.00"), qty=1),
            CartLineDTO(product_id=1, name="A", price=Decimal("2.00"), qty=1),
        ]
        docs = CartLineMapper.many_to_documents(lines)
        self.assertEqual([d["productId"] for d in docs], [2, 1])
        self.assertEqual(CartLineMapper.many_from_documents(docs), lines)


class CartUtilsTests(unittest.TestCase):
    def test_compute_total_rounds_to_cents(self):
        lines = [
            CartLineDTO(product_id=1, name="A", price=Decimal("0.105"), qty=1),
            CartLineDTO(product_id=2, name="B", price=Decimal("29.99"), qty=3),
        ]
        self.assertEqual(compute_total(lines), Decimal("90.08"))

    def test_compute_total_of_nothing_is_zero(self):
        self.assertEqual(compute_total([]), Decimal("0.00"))

    def test_copy_lines_is_shallow_per_line(self):
        original = [CartLineDTO(product_id=1, name="A", price=Decimal("1.00"), qty=1)]
        copied = copy_lines(original)
        copied[0].qty = 5
        self.assertEqual(original[0].qty, 1)

    def test_compute_total_rounds_once_after_summing(self):
        lines = [
            CartLineDTO(product_id=1, name="A", price=Decimal("9.999"), qty=1),
            CartLineDTO(product_id=2, name="B", price=Decimal("0.004"), qty=1),
        ]
        self.assertEqual(compute_total(lines), Decimal("10.00"))

    def test_compute_total_beyond_default_decimal_precision(self):
        line = CartLineDTO(product_id=1, name="A", price=Decimal("169.99"), qty=10**40)
        self.assertEqual(compute_total([line]), Decimal("16999" + "0" * 38 + ".00"))
