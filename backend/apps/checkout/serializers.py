from rest_framework import serializers

from apps.carts.serializers import CartLineSerializer, money_field


class CheckoutRequestSerializer(serializers.Serializer):
    # Presence is checked by the service so blank values map to the same 400
    name = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=True)
    email = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=True)
    cartItems = CartLineSerializer(many=True, required=False, allow_null=True)


class ReceiptSerializer(serializers.Serializer):
    name = serializers.CharField()
    email = serializers.CharField()
    items = CartLineSerializer(many=True)
    total = money_field()
    timestamp = serializers.CharField()


class CheckoutResponseSerializer(serializers.Serializer):
    receipt = ReceiptSerializer()
    message = serializers.CharField()
