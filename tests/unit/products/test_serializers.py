"""Unit tests for the Product schema serializers.

Covers:
- Field presence on the request and response shapes.
- Response shape agreement with ``ProductOutputDTO``.
- Request validation rules mirrored for the OpenAPI schema.
"""

from __future__ import annotations

import pytest

from modules.products.dtos import ProductOutputDTO
from modules.products.serializers import (
    ProductRequestSerializer,
    ProductResponseSerializer,
)

pytestmark = pytest.mark.unit


class TestSerializerFields:
    def test_request_fields(self):
        assert set(ProductRequestSerializer().fields) == {
            "barcode",
            "name",
            "image",
            "rating",
            "price",
            "tags",
        }

    def test_response_fields_match_output_dto(self):
        assert set(ProductResponseSerializer().fields) == set(
            ProductOutputDTO.model_fields
        )

    def test_response_has_no_id(self):
        assert "id" not in ProductResponseSerializer().fields


class TestResponseRendering:
    def test_renders_output_dto_unchanged(self):
        dto = ProductOutputDTO(
            barcode="123",
            name="Widget",
            image=None,
            rating=4.5,
            price=10.0,
            tags=["a", "b"],
        )
        data = ProductResponseSerializer(dto.model_dump()).data
        assert dict(data) == dto.model_dump()


class TestRequestValidation:
    def test_minimal_body_is_valid(self):
        serializer = ProductRequestSerializer(data={"barcode": "123", "name": "W"})
        assert serializer.is_valid(), serializer.errors

    def test_non_digit_barcode_is_invalid(self):
        serializer = ProductRequestSerializer(data={"barcode": "12a", "name": "W"})
        assert not serializer.is_valid()
        assert "barcode" in serializer.errors

    def test_blank_image_is_allowed(self):
        serializer = ProductRequestSerializer(
            data={"barcode": "1", "name": "W", "image": ""}
        )
        assert serializer.is_valid(), serializer.errors


class TestOpenApiSchema:
    def test_schema_lists_product_routes(self, client):
        response = client.get("/api/schema/", {"format": "json"})
        assert response.status_code == 200
        body = response.content.decode()
        assert "/products" in body
        assert "/products/{barcode}" in body
