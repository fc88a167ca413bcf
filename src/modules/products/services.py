"""Product service layer (Use Cases).

Orchestrates the product catalog, delegating persistence to the injected
``IProductRepository`` and tag bookkeeping to the injected
``ITagReconciler``.

Each command runs in one ``transaction.atomic`` block: the product write,
association deletes, association inserts and new tag rows commit together
or not at all.  Domain errors are raised where they are detected and never
caught here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.products.dtos import ProductOutputDTO
from modules.products.exceptions import BarcodeAlreadyExists, ProductNotFound
from modules.products.models import Product
from modules.products.reconciler import ITagReconciler, TagReconciler
from modules.products.repositories.django_repository import (
    ProductDjangoRepository,
    ProductTagDjangoRepository,
    TagDjangoRepository,
)

if TYPE_CHECKING:
    from modules.products.dtos import ProductRequestDTO
    from modules.products.repositories.interfaces import (
        IProductRepository,
        IProductTagRepository,
    )

logger = structlog.get_logger(__name__)

DEFAULT_SORT_FIELD = "id"

UPDATABLE_FIELDS = ("barcode", "name", "image", "rating", "price")


class ProductService:
    """Application service for product catalog use-cases.

    Collaborators are supplied once through the constructor (DIP); the
    service holds no other state.
    """

    def __init__(
        self,
        repository: IProductRepository,
        reconciler: ITagReconciler,
        product_tag_repository: IProductTagRepository,
    ) -> None:
        self._repo = repository
        self._reconciler = reconciler
        self._product_tags = product_tag_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: ProductRequestDTO) -> ProductOutputDTO:
        """Create a product and attach its requested tags.

        Raises:
            BarcodeAlreadyExists: if the barcode is already taken.
        """
        log = logger.bind(barcode=dto.barcode)

        if self._repo.get_by_barcode(dto.barcode) is not None:
            log.warning("product.duplicate_barcode")
            raise BarcodeAlreadyExists(dto.barcode)

        product = Product(
            barcode=dto.barcode,
            name=dto.name,
            image=dto.image,
            rating=dto.rating,
            price=dto.price,
        )
        product = self._repo.save(product)
        self._reconciler.reconcile(product.id, dto.tags or [], False)

        log.info("product.created", product_id=product.id)
        return self._to_output(product)

    @transaction.atomic
    def update_product(self, barcode: str, dto: ProductRequestDTO) -> ProductOutputDTO:
        """Overwrite every non-null field of ``dto`` onto the product.

        The barcode itself may change; uniqueness is left to the database
        constraint, which surfaces a collision as ``StorageFailure``.  Tags are
        replaced only when ``dto.tags`` is not ``None``.

        Raises:
            ProductNotFound: if no product has ``barcode``.
        """
        product = self._get_or_raise(barcode)
        log = logger.bind(barcode=barcode, product_id=product.id)

        changed = []
        for field in UPDATABLE_FIELDS:
            value = getattr(dto, field)
            if value is not None:
                setattr(product, field, value)
                changed.append(field)

        if dto.tags is not None:
            self._reconciler.reconcile(product.id, dto.tags, True)
            changed.append("tags")

        product = self._repo.save(product)
        log.info("product.updated", fields=changed)
        return self._to_output(product)

    @transaction.atomic
    def delete_product(self, barcode: str) -> None:
        """Delete the product and its tag associations; tags themselves stay.

        Raises:
            ProductNotFound: if no product has ``barcode``.
        """
        product = self._get_or_raise(barcode)
        product_id = product.id

        self._product_tags.delete_all(self._product_tags.list_by_product_id(product_id))
        self._repo.delete(product)
        logger.info("product.deleted", barcode=barcode, product_id=product_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, barcode: str) -> ProductOutputDTO:
        """Retrieve a single product by barcode.

        Raises:
            ProductNotFound: if no product has ``barcode``.
        """
        product = self._get_or_raise(barcode)
        logger.info("product.retrieved", barcode=barcode)
        return self._to_output(product)

    def list_products(self, sort_by: Optional[str] = None) -> List[ProductOutputDTO]:
        """Return every product ascending by ``sort_by`` (default: ``id``)."""
        products = self._repo.list_sorted(sort_by or DEFAULT_SORT_FIELD)
        return [self._to_output(product) for product in products]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, barcode: str) -> Product:
        product = self._repo.get_by_barcode(barcode)
        if product is None:
            raise ProductNotFound(barcode)
        return product

    def _to_output(self, product: Product) -> ProductOutputDTO:
        return ProductOutputDTO.from_entity(
            product, self._repo.get_tags_by_product_id(product.id)
        )


def build_product_service() -> ProductService:
    """Wire ``ProductService`` with the Django ORM repositories."""
    product_tags = ProductTagDjangoRepository()
    return ProductService(
        repository=ProductDjangoRepository(),
        reconciler=TagReconciler(TagDjangoRepository(), product_tags),
        product_tag_repository=product_tags,
    )
