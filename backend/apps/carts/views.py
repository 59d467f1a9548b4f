from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.exceptions import InvalidRequestError
from apps.api.schemas import ErrorResponseSerializer, message_envelope
from apps.common import get_logger

from .container import build_cart_service
from .serializers import (
    CartItemAddSerializer,
    CartItemUpdateSerializer,
    CartLineSerializer,
    CartReadSerializer,
)

logger = get_logger(__name__).bind(component="carts", layer="view")

CartMutationResponse = message_envelope(
    "CartMutationResponse", "cart", CartLineSerializer(many=True)
)


def _cart_response(message: str, lines) -> Response:
    return Response({"message": message, "cart": CartLineSerializer(lines, many=True).data})


@extend_schema(tags=["Cart"])
class CartView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartView")

    @extend_schema(
        summary="Get cart",
        description="Current cart lines with a freshly computed total.",
        responses={200: CartReadSerializer},
    )
    def get(self, request):
        dto = self.service.get_cart()
        self.log.debug("Serving cart", lines=len(dto.items), total=dto.total)
        return Response(CartReadSerializer(dto).data)

    @extend_schema(
        summary="Add item to cart",
        description=(
            "Adds a product to the cart. Adding a product already in the cart increments its quantity."
        ),
        request=CartItemAddSerializer,
        responses={
            200: CartMutationResponse,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CartItemAddSerializer(data=request.data)
        if not serializer.is_valid():
            raise InvalidRequestError("Invalid productId or qty", details=serializer.errors)
        product_id = serializer.validated_data["productId"]
        qty = serializer.validated_data["qty"]
        self.log.info("Adding item via API", product_id=product_id, qty=qty)
        lines = self.service.add_item(product_id, qty)
        return _cart_response("Item added to cart", lines)


@extend_schema(tags=["Cart"])
class CartItemView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartItemView")

    @extend_schema(
        summary="Update cart item quantity",
        description="Sets the line quantity to the given value.",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        request=CartItemUpdateSerializer,
        responses={
            200: CartMutationResponse,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, product_id):
        serializer = CartItemUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            raise InvalidRequestError("Invalid quantity", details=serializer.errors)
        qty = serializer.validated_data["qty"]
        self.log.info("Updating item via API", product_id=product_id, qty=qty)
        lines = self.service.update_item(int(product_id), qty)
        return _cart_response("Cart updated", lines)

    @extend_schema(
        summary="Remove item from cart",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={
            200: CartMutationResponse,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, product_id):
        self.log.info("Removing item via API", product_id=product_id)
        lines = self.service.remove_item(int(product_id))
        return _cart_response("Item removed from cart", lines)
