"""Product catalog models.

- ``Product``: a catalog entry, publicly identified by its ``barcode``.
- ``Tag``: a shared dictionary entry, one row per distinct tag name.
  Tags are never deleted, even when no product references them any more.
- ``ProductTag``: "this product currently carries this tag".  Rows are
  cleared and re-inserted wholesale by ``TagReconciler``.

The numeric primary keys are internal; nothing outside the persistence
layer keys on them.  Field contents (digits-only barcode, image URL) are
checked by ``modules.products.validators`` before any row is written.
"""

from __future__ import annotations

from django.db import models


class Product(models.Model):
    """Catalog entry.

    ``barcode`` has ``unique=True``, so the database rejects a second row
    with the same value even when the service layer does not check first
    (update path).
    """

    id = models.BigAutoField(primary_key=True)
    barcode = models.CharField(max_length=255, unique=True)
    name = models.CharField(max_length=255)
    image = models.CharField(max_length=2048, null=True, blank=True)  # noqa: DJ01
    rating = models.FloatField(null=True, blank=True)
    price = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = "products"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.barcode} - {self.name}"


class Tag(models.Model):
    """Shared tag dictionary entry, unique by ``tag_name``."""

    id = models.BigAutoField(primary_key=True)
    tag_name = models.CharField(max_length=255, unique=True)

    class Meta:
        db_table = "tags"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.tag_name


class ProductTag(models.Model):
    """Association row between a product and a tag.

    No uniqueness on ``(product, tag)``: a request listing the same tag twice
    yields two rows.
    """

    id = models.BigAutoField(primary_key=True)
    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name="product_tags",
    )
    tag = models.ForeignKey(
        Tag,
        on_delete=models.PROTECT,
        related_name="product_tags",
    )

    class Meta:
        db_table = "product_tags"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.product_id} -> {self.tag_id}"
