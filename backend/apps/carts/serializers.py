from decimal import Decimal

from rest_framework import serializers

# Per-request ceilings. Repeated adds can still grow a line without limit; these
# keep any reachable total inside the range a JSON number can carry.
MAX_REQUEST_QTY = 10**12
MAX_UNIT_PRICE = Decimal("1e12")


def money_field(**kwargs):
    # Amounts are rounded by the services; no digit bounds here so any total
    # the cart can reach also renders.
    return serializers.DecimalField(
        max_digits=None, decimal_places=None, coerce_to_string=False, **kwargs
    )


def qty_field():
    return serializers.IntegerField(min_value=1, max_value=MAX_REQUEST_QTY)


class CartLineSerializer(serializers.Serializer):
    productId = serializers.IntegerField(source="product_id", min_value=1)
    name = serializers.CharField()
    price = money_field(min_value=Decimal("0"), max_value=MAX_UNIT_PRICE)
    qty = qty_field()


class CartReadSerializer(serializers.Serializer):
    items = CartLineSerializer(many=True)
    total = money_field()


class CartItemAddSerializer(serializers.Serializer):
    productId = serializers.IntegerField(min_value=1)
    qty = qty_field()


class CartItemUpdateSerializer(serializers.Serializer):
    qty = qty_field()
