from drf_spectacular.utils import extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common import get_logger

from .container import build_catalog_service
from .serializers import ProductReadSerializer

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Catalog"])
class ProductListView(APIView):
    service = build_catalog_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        description="Full catalog in insertion order; not paginated.",
        responses={200: ProductReadSerializer(many=True)},
    )
    def get(self, request):
        products = self.service.list_products()
        self.log.debug("Serving product list", count=len(products))
        return Response(ProductReadSerializer(products, many=True).data)
