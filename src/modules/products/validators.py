"""Boundary validation for product requests and barcode path parameters.

Pure functions: no I/O, no database access.  Checks run in a fixed order
(barcode, name, image, tags) and the first failure wins; errors are never
aggregated.
"""

from __future__ import annotations

import re
from typing import Optional, Type

from modules.products.dtos import ProductRequestDTO
from modules.products.exceptions import InvalidBarcode, InvalidProductRequest

DIGITS_ONLY = re.compile(r"[0-9]+")

# Protocols with a stock handler; anything after the colon is accepted as is.
IMAGE_URL_SCHEMES = frozenset({"http", "https", "ftp", "file", "jar", "mailto"})


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _is_url(value: str) -> bool:
    scheme, colon, rest = value.strip().partition(":")
    return bool(colon and rest) and scheme.lower() in IMAGE_URL_SCHEMES


def _check_barcode(barcode: Optional[str], error: Type[Exception]) -> None:
    if _is_blank(barcode):
        raise error("Barcode is mandatory")
    if not DIGITS_ONLY.fullmatch(barcode):
        raise error("Barcode can only contain digits")


def validate_product_request(request: ProductRequestDTO) -> None:
    """Raise ``InvalidProductRequest`` if ``request`` is not well-formed."""
    _check_barcode(request.barcode, InvalidProductRequest)

    if _is_blank(request.name):
        raise InvalidProductRequest("Name is mandatory")

    if not _is_blank(request.image) and not _is_url(request.image):
        raise InvalidProductRequest("Image must be a valid URL or empty")

    for tag in request.tags or ():
        if _is_blank(tag):
            raise InvalidProductRequest("Tag cannot be blank")


def validate_barcode(barcode: Optional[str]) -> None:
    """Raise ``InvalidBarcode`` unless ``barcode`` is a non-empty digit string."""
    _check_barcode(barcode, InvalidBarcode)
