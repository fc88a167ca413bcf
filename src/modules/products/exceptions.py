"""Product domain exceptions.

Raised by the validators and the Service Layer at the point of detection.
They propagate unmodified to the API layer, where the DRF exception handler
translates each one into its status code and a plain-text message.
"""

from __future__ import annotations

from rest_framework import status

from modules.core.exceptions import DomainError


class InvalidProductRequest(DomainError):
    """Malformed create/update body."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidBarcode(DomainError):
    """Malformed barcode path parameter."""

    status_code = status.HTTP_400_BAD_REQUEST


class BarcodeAlreadyExists(DomainError):
    """Create was attempted with a barcode that is already in use."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, barcode: str) -> None:
        super().__init__(f"Product with barcode {barcode} already exists")
        self.barcode = barcode


class ProductNotFound(DomainError):
    """No product exists for the given barcode."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, barcode: str) -> None:
        super().__init__(f"Product not found with barcode: {barcode}")
        self.barcode = barcode
