from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.exceptions import InvalidRequestError
from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger

from .commands import CheckoutCommand
from .container import build_checkout_service
from .serializers import (
    CheckoutRequestSerializer,
    CheckoutResponseSerializer,
    ReceiptSerializer,
)

logger = get_logger(__name__).bind(component="checkout", layer="view")


@extend_schema(tags=["Checkout"])
class CheckoutView(APIView):
    service = build_checkout_service()
    log = logger.bind(view="CheckoutView")

    @extend_schema(
        summary="Checkout",
        description=(
            "Mock checkout. Charges `cartItems` when supplied, otherwise the current cart, "
            "then clears the cart. Recording the order is best-effort."
        ),
        request=CheckoutRequestSerializer,
        responses={
            200: CheckoutResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CheckoutRequestSerializer(data=request.data)
        if not serializer.is_valid():
            raise InvalidRequestError("Invalid checkout payload", details=serializer.errors)
        command = CheckoutCommand.from_raw(dict(serializer.validated_data))
        self.log.info(
            "Checkout requested via API",
            override=command.cart_items is not None,
        )
        receipt = self.service.checkout(command.name, command.email, command.cart_items)
        return Response(
            {"receipt": ReceiptSerializer(receipt).data, "message": "Checkout successful"}
        )
