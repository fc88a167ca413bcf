"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet keyed by
barcode.  Views validate input and delegate; domain exceptions are left to
propagate to ``modules.core.exception_handler``, which maps them to status
codes and plain-text bodies.
"""

from __future__ import annotations

from typing import Any, Mapping

import structlog
from django.http import HttpResponse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import ProductRequestDTO
from modules.products.exceptions import InvalidProductRequest
from modules.products.models import Product
from modules.products.serializers import (
    ProductRequestSerializer,
    ProductResponseSerializer,
)
from modules.products.services import build_product_service
from modules.products.validators import validate_barcode, validate_product_request

logger = structlog.get_logger(__name__)

REQUEST_FIELDS = tuple(ProductRequestDTO.model_fields)


def parse_product_request(data: Any) -> ProductRequestDTO:
    """Build a ``ProductRequestDTO`` from a parsed JSON body.

    Unknown keys are ignored; a body that is not an object, or whose values
    have the wrong types, is an ``InvalidProductRequest``.
    """
    if not isinstance(data, Mapping):
        raise InvalidProductRequest("Request body must be a JSON object")
    try:
        return ProductRequestDTO(**{field: data.get(field) for field in REQUEST_FIELDS})
    except PydanticValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
        raise InvalidProductRequest(f"Malformed product request: {fields}") from exc


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` wired with the Django ORM repositories (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through the
    service/repository layer, and responses never carry the internal id.
    """

    queryset = Product.objects.none()
    serializer_class = ProductResponseSerializer
    lookup_field = "barcode"
    # Accept anything up to the next slash so malformed barcodes reach
    # validate_barcode instead of falling through to a 404.
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_product_service()

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[
            OpenApiParameter(
                "sortBy",
                OpenApiTypes.STR,
                description="Product field to sort ascending by (default: id).",
            )
        ],
        responses=ProductResponseSerializer(many=True),
    )
    def list(self, request: Request) -> Response:
        """GET /products?sortBy=<field>"""
        products = self._service.list_products(request.query_params.get("sortBy"))
        logger.info("products.listed", count=len(products))
        return Response([product.model_dump() for product in products])

    @extend_schema(responses=ProductResponseSerializer)
    def retrieve(self, request: Request, barcode: str | None = None) -> Response:
        """GET /products/{barcode}"""
        validate_barcode(barcode)
        product = self._service.get_product(barcode)
        return Response(product.model_dump())

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=ProductRequestSerializer, responses=ProductResponseSerializer)
    def create(self, request: Request) -> Response:
        """POST /products"""
        dto = parse_product_request(request.data)
        validate_product_request(dto)
        product = self._service.create_product(dto)
        return Response(product.model_dump())

    @extend_schema(request=ProductRequestSerializer, responses=ProductResponseSerializer)
    def partial_update(self, request: Request, barcode: str | None = None) -> Response:
        """PATCH /products/{barcode}"""
        validate_barcode(barcode)
        dto = parse_product_request(request.data)
        validate_product_request(dto)
        product = self._service.update_product(barcode, dto)
        return Response(product.model_dump())

    @extend_schema(responses={200: OpenApiTypes.STR})
    def destroy(self, request: Request, barcode: str | None = None) -> HttpResponse:
        """DELETE /products/{barcode}"""
        validate_barcode(barcode)
        self._service.delete_product(barcode)
        return HttpResponse(
            f"Product with barcode {barcode} was deleted",
            content_type="text/plain; charset=utf-8",
        )
