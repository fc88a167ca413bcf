"""Product catalog repositories package."""

from modules.products.repositories.django_repository import (
    ProductDjangoRepository,
    ProductTagDjangoRepository,
    TagDjangoRepository,
)
from modules.products.repositories.interfaces import (
    IProductRepository,
    IProductTagRepository,
    ITagRepository,
)

__all__ = [
    "IProductRepository",
    "IProductTagRepository",
    "ITagRepository",
    "ProductDjangoRepository",
    "ProductTagDjangoRepository",
    "TagDjangoRepository",
]
