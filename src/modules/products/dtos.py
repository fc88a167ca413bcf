"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``ProductRequestDTO``: input for product creation and partial updates.
  Every field is optional at the type level; required-ness is checked by
  ``modules.products.validators``.  ``None`` means "not supplied" on update.
- ``ProductOutputDTO``: the external product shape.  It deliberately has no
  ``id`` field: the barcode is the public identifier.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from modules.products.models import Product, Tag


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class ProductRequestDTO(BaseModel):
    """Immutable DTO for product write requests (POST and PATCH bodies)."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    barcode: Optional[str] = None
    name: Optional[str] = None
    image: Optional[str] = None
    rating: Optional[float] = None
    price: Optional[float] = None
    tags: Optional[List[Optional[str]]] = None


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(frozen=True)

    barcode: str
    name: str
    image: Optional[str] = None
    rating: Optional[float] = None
    price: Optional[float] = None
    tags: List[str] = []

    @classmethod
    def from_entity(cls, product: Product, tags: Iterable[Tag]) -> ProductOutputDTO:
        """Build an output DTO from a Product row and its current tag rows."""
        return cls(
            barcode=product.barcode,
            name=product.name,
            image=product.image,
            rating=product.rating,
            price=product.price,
            tags=[tag.tag_name for tag in tags],
        )
