from __future__ import annotations

import random

from django.core.management.base import BaseCommand

from modules.products.dtos import ProductRequestDTO
from modules.products.services import ProductService, build_product_service

CATALOG = [
    ("7891000100103", "Monitor 27\"", ["electronics", "display"], 1299.90),
    ("7891000100110", "Mechanical Keyboard", ["electronics", "peripherals"], 399.90),
    ("7891000100127", "Gaming Mouse", ["electronics", "peripherals"], 249.90),
    ("7891000100134", "Notebook 14\"", ["electronics"], 3999.00),
    ("7891000100141", "Headset", ["electronics", "audio"], 299.90),
    ("7891000200100", "Office Desk", ["furniture"], 899.00),
    ("7891000200117", "Ergonomic Chair", ["furniture", "ergonomics"], 1499.00),
    ("7891000200124", "Bookshelf", ["furniture"], 699.00),
    ("7891000300107", "A4 Paper", ["office", "paper"], 29.90),
    ("7891000300114", "Blue Pen", ["office"], 4.90),
    ("7891000300121", "Notebook (paper)", ["office", "paper"], 19.90),
    ("7891000300138", "Stapler", ["office"], 39.90),
    ("7891000300145", "Sticky Notes", ["office", "paper"], 12.90),
    ("7891000300152", "Calculator", ["office", "electronics"], 89.90),
    ("7891000300169", "Laptop Stand", ["office", "ergonomics"], 149.90),
]


class Command(BaseCommand):
    help = "Seed the catalog with development products and tags."

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--seed",
            type=int,
            default=42,
            help="Random seed used for generated ratings.",
        )

    def handle(self, *args, **options):
        random.seed(options["seed"])
        self.stdout.write("Seeding development catalog...")

        created = self._seed_products(build_product_service())

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created}, skipped={len(CATALOG) - created}"
            )
        )

    def _seed_products(self, service: ProductService) -> int:
        created = 0
        existing = {product.barcode for product in service.list_products()}
        for barcode, name, tags, price in CATALOG:
            if barcode in existing:
                continue
            service.create_product(
                ProductRequestDTO(
                    barcode=barcode,
                    name=name,
                    rating=round(random.uniform(3.0, 5.0), 1),
                    price=price,
                    tags=tags,
                )
            )
            created += 1
        return created
