import os
import sys
from types import SimpleNamespace
from unittest.mock import patch

import pytest

# Ensure backend package is importable when running `pytest` from repo root
BASE_DIR = os.path.dirname(__file__)
BACKEND_DIR = os.path.join(BASE_DIR, 'backend')
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)


@pytest.fixture
def storefront():
    """Fresh in-memory catalog, cart and checkout services wired into the API views.

    The views keep their services as class attributes, so each test swaps in
    its own instances instead of sharing the process-wide singletons.
    """
    from apps.carts.services import CartService
    from apps.carts.views import CartItemView, CartView
    from apps.catalog.seed import build_seed_products
    from apps.catalog.services import CatalogService
    from apps.catalog.views import ProductListView
    from apps.checkout.services import CheckoutService
    from apps.checkout.views import CheckoutView
    from apps.common.persistence import InMemoryDocumentAdapter

    catalog = CatalogService(
        products=InMemoryDocumentAdapter('products'),
        seed_products=build_seed_products(),
    )
    cart = CartService(catalog=catalog)
    records = InMemoryDocumentAdapter('checkouts')
    checkout = CheckoutService(carts=cart, records=records)
    with patch.object(ProductListView, 'service', catalog), \
            patch.object(CartView, 'service', cart), \
            patch.object(CartItemView, 'service', cart), \
            patch.object(CheckoutView, 'service', checkout):
        yield SimpleNamespace(catalog=catalog, cart=cart, checkout=checkout, records=records)
