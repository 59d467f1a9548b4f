from rest_framework import serializers


class ProductReadSerializer(serializers.Serializer):
    # Matches ProductDTO; prices render as JSON numbers
    id = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False)
    description = serializers.CharField(allow_blank=True)
    image = serializers.CharField(allow_blank=True)
