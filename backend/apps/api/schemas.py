from drf_spectacular.utils import inline_serializer
from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    code = serializers.CharField()
    status = serializers.IntegerField()
    details = serializers.JSONField(required=False)


def message_envelope(
    name: str,
    field: str,
    item_serializer: serializers.Serializer,
) -> serializers.Serializer:
    """Inline response schema shaped ``{message, <field>: item_serializer}``."""
    return inline_serializer(
        name=name,
        fields={
            "message": serializers.CharField(),
            field: item_serializer,
        },
    )
