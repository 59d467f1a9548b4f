from django.urls import path, re_path

from apps.carts.views import CartItemView, CartView
from apps.catalog.views import ProductListView
from apps.checkout.views import CheckoutView

# Trailing slashes are optional so the storefront can call /api/cart as-is.
urlpatterns = [
    re_path(r"^products/?$", ProductListView.as_view(), name="api-products-list"),
    re_path(r"^cart/?$", CartView.as_view(), name="api-cart"),
    re_path(
        r"^cart/(?P<product_id>\d+)/?$",
        CartItemView.as_view(),
        name="api-cart-item",
    ),
    re_path(r"^checkout/?$", CheckoutView.as_view(), name="api-checkout"),
]
