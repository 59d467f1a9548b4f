import unittest
from decimal import Decimal

from apps.catalog.seed import CATALOG_IMAGE_FILES, build_seed_products, format_product_name


class FormatProductNameTests(unittest.TestCase):
    def test_strips_extension_and_title_cases_words(self):
        self.assertEqual(format_product_name("rose_gold_earrings.jpeg"), "Rose Gold Earrings")
        self.assertEqual(format_product_name("jacket.png"), "Jacket")
        self.assertEqual(format_product_name("TSHIRT.JPEG"), "Tshirt")

    def test_dashes_become_spaces(self):
        self.assertEqual(format_product_name("dragon-bracelet.jpg"), "Dragon Bracelet")


class BuildSeedProductsTests(unittest.TestCase):
    def test_catalog_matches_bundled_images(self):
        products = build_seed_products()
        self.assertEqual(len(products), len(CATALOG_IMAGE_FILES))
        self.assertEqual([p.id for p in products], list(range(1, 9)))
        first, last = products[0], products[-1]
        self.assertEqual(first.name, "Bag")
        self.assertEqual(first.price, Decimal("29.99"))
        self.assertEqual(first.description, "Premium bag")
        self.assertEqual(first.image, "/bag.jpeg")
        self.assertEqual(last.name, "Tshirt")
        self.assertEqual(last.price, Decimal("169.99"))

    def test_prices_step_by_twenty(self):
        prices = [p.price for p in build_seed_products(["a.png", "b.png", "c.png"])]
        self.assertEqual(prices, [Decimal("29.99"), Decimal("49.99"), Decimal("69.99")])

    def test_is_deterministic(self):
        self.assertEqual(build_seed_products(), build_seed_products())
