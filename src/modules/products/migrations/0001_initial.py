import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("barcode", models.CharField(max_length=255, unique=True)),
                ("name", models.CharField(max_length=255)),
                ("image", models.CharField(blank=True, max_length=2048, null=True)),
                ("rating", models.FloatField(blank=True, null=True)),
                ("price", models.FloatField(blank=True, null=True)),
            ],
            options={
                "db_table": "products",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Tag",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("tag_name", models.CharField(max_length=255, unique=True)),
            ],
            options={
                "db_table": "tags",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="ProductTag",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="product_tags",
                        to="products.product",
                    ),
                ),
                (
                    "tag",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="product_tags",
                        to="products.tag",
                    ),
                ),
            ],
            options={
                "db_table": "product_tags",
                "ordering": ["id"],
            },
        ),
    ]
