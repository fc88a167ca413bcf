"""Product wire shapes, declared as DRF serializers.

The views parse bodies into ``ProductRequestDTO`` and render
``ProductOutputDTO``; these serializers describe the same shapes to
drf-spectacular so the OpenAPI schema matches what is on the wire.
"""

from __future__ import annotations

from rest_framework import serializers


class ProductRequestSerializer(serializers.Serializer):
    """POST/PATCH body.  On PATCH, ``null`` means "leave unchanged"."""

    barcode = serializers.RegexField(r"^[0-9]+$")
    name = serializers.CharField()
    image = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    rating = serializers.FloatField(required=False, allow_null=True)
    price = serializers.FloatField(required=False, allow_null=True)
    tags = serializers.ListField(
        child=serializers.CharField(), required=False, allow_null=True
    )


class ProductResponseSerializer(serializers.Serializer):
    barcode = serializers.CharField()
    name = serializers.CharField()
    image = serializers.CharField(allow_null=True)
    rating = serializers.FloatField(allow_null=True)
    price = serializers.FloatField(allow_null=True)
    tags = serializers.ListField(child=serializers.CharField())
