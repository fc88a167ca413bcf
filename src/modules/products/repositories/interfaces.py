"""Product catalog repository interfaces.

Extend ``IRepository[T]`` with the look-ups the service and the tag
reconciler need.  Every implementation must raise ``StorageFailure`` (and
nothing else) when the underlying store fails.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product, ProductTag, Tag


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_barcode(self, barcode: str) -> Optional[Product]:
        """Retrieve a product by barcode, or ``None`` when absent."""

    @abstractmethod
    def delete(self, product: Product) -> None:
        """Remove the product row."""

    @abstractmethod
    def list_sorted(self, sort_field: str = "id") -> List[Product]:
        """Return every product, ascending by ``sort_field``."""

    @abstractmethod
    def get_tags_by_product_id(self, product_id: int) -> List[Tag]:
        """Return the product's tags in association insertion order."""


class ITagRepository(IRepository["Tag"]):
    """Repository contract for the shared tag dictionary."""

    @abstractmethod
    def get_by_name(self, tag_name: str) -> Optional[Tag]:
        """Retrieve a tag by exact name, or ``None`` when absent."""


class IProductTagRepository(IRepository["ProductTag"]):
    """Repository contract for product/tag association rows."""

    @abstractmethod
    def list_by_product_id(self, product_id: int) -> List[ProductTag]:
        """Return every association row for the product."""

    @abstractmethod
    def delete_all(self, rows: Iterable[ProductTag]) -> None:
        """Delete the given association rows."""

    @abstractmethod
    def add(self, product_id: int, tag_id: int) -> ProductTag:
        """Insert a new association row."""
