"""Django ORM implementations of the product catalog repositories.

Look-ups follow the Null Object pattern: a missing row is ``None``, never an
exception.  Every method is wrapped by ``translate_storage_errors`` so any
database or ORM field-resolution error leaves this module as a single
``StorageFailure``.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import structlog
from django.core.exceptions import FieldDoesNotExist
from django.db import transaction

from modules.core.exceptions import translate_storage_errors
from modules.products.models import Product, ProductTag, Tag
from modules.products.repositories.interfaces import (
    IProductRepository,
    IProductTagRepository,
    ITagRepository,
)

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    @translate_storage_errors
    def get_by_barcode(self, barcode: str) -> Optional[Product]:
        return Product.objects.filter(barcode=barcode).first()

    @translate_storage_errors
    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product.  The id is assigned on first save."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=entity.id,
            barcode=entity.barcode,
        )
        return entity

    @translate_storage_errors
    @transaction.atomic
    def delete(self, product: Product) -> None:
        product_id = product.id
        product.delete()
        logger.info("product.row_deleted", product_id=product_id)

    @translate_storage_errors
    def list_sorted(self, sort_field: str = "id") -> List[Product]:
        """List products ascending by a concrete Product column.

        Relations and unknown names raise ``FieldDoesNotExist`` (translated to
        ``StorageFailure``); a leading ``-`` is not a field name either.
        """
        field = Product._meta.get_field(sort_field)
        if not field.concrete or field.is_relation:
            raise FieldDoesNotExist(f"Product has no sortable field '{sort_field}'")
        return list(Product.objects.order_by(field.attname))

    @translate_storage_errors
    def get_tags_by_product_id(self, product_id: int) -> List[Tag]:
        rows = (
            ProductTag.objects.filter(product_id=product_id)
            .select_related("tag")
            .order_by("id")
        )
        return [row.tag for row in rows]


class TagDjangoRepository(ITagRepository):
    """Concrete Tag repository backed by Django ORM."""

    @translate_storage_errors
    def get_by_name(self, tag_name: str) -> Optional[Tag]:
        return Tag.objects.filter(tag_name=tag_name).first()

    @translate_storage_errors
    @transaction.atomic
    def save(self, entity: Tag) -> Tag:
        entity.save()
        logger.info("tag.saved", tag_id=entity.id, tag_name=entity.tag_name)
        return entity


class ProductTagDjangoRepository(IProductTagRepository):
    """Concrete ProductTag repository backed by Django ORM."""

    @translate_storage_errors
    def list_by_product_id(self, product_id: int) -> List[ProductTag]:
        return list(ProductTag.objects.filter(product_id=product_id))

    @translate_storage_errors
    @transaction.atomic
    def delete_all(self, rows: Iterable[ProductTag]) -> None:
        ids = [row.id for row in rows]
        if ids:
            ProductTag.objects.filter(id__in=ids).delete()

    @translate_storage_errors
    @transaction.atomic
    def save(self, entity: ProductTag) -> ProductTag:
        entity.save()
        return entity

    def add(self, product_id: int, tag_id: int) -> ProductTag:
        return self.save(ProductTag(product_id=product_id, tag_id=tag_id))
