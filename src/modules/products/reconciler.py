"""Tag reconciliation for products.

Makes a product's association rows match a target list of tag names
exactly.  Existing rows are cleared wholesale and the target list is
re-inserted in order; no name-level diff is computed, so every
reconciliation produces fresh association ids.  Tag dictionary rows are
created on first use and never removed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

import structlog

from modules.products.models import Tag

if TYPE_CHECKING:
    from modules.products.repositories.interfaces import (
        IProductTagRepository,
        ITagRepository,
    )

logger = structlog.get_logger(__name__)


class ITagReconciler(ABC):
    """Contract the product service relies on for tag bookkeeping."""

    @abstractmethod
    def reconcile(
        self,
        product_id: int,
        tag_names: Sequence[str],
        is_existing_product: bool,
    ) -> None:
        """Make the product's association rows match ``tag_names`` exactly."""


class TagReconciler(ITagReconciler):
    """Synchronises ``ProductTag`` rows with a requested tag list.

    Raises nothing of its own: storage errors arrive from the repositories
    as ``StorageFailure`` and propagate unchanged.
    """

    def __init__(
        self,
        tag_repository: ITagRepository,
        product_tag_repository: IProductTagRepository,
    ) -> None:
        self._tags = tag_repository
        self._product_tags = product_tag_repository

    def reconcile(
        self,
        product_id: int,
        tag_names: Sequence[str],
        is_existing_product: bool,
    ) -> None:
        """Replace the product's tag associations with ``tag_names``.

        Duplicates in ``tag_names`` are kept and yield duplicate rows.  A brand
        new product has nothing to clear, so deletion is skipped when
        ``is_existing_product`` is false.
        """
        current = self._product_tags.list_by_product_id(product_id)
        if is_existing_product:
            self._product_tags.delete_all(current)

        created = 0
        for tag_name in tag_names:
            tag = self._tags.get_by_name(tag_name)
            if tag is None:
                tag = self._tags.save(Tag(tag_name=tag_name))
                created += 1
            self._product_tags.add(product_id, tag.id)

        logger.info(
            "product.tags_reconciled",
            product_id=product_id,
            cleared=len(current) if is_existing_product else 0,
            inserted=len(tag_names),
            new_tags=created,
        )
