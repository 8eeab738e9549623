import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("beers", "0001_initial"),
        ("customers", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="BeerOrder",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("version", models.PositiveIntegerField(default=0, editable=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "order_status",
                    models.CharField(
                        choices=[
                            ("NEW", "New"),
                            ("PENDING", "Pending"),
                            ("PROCESSING", "Processing"),
                            ("COMPLETED", "Completed"),
                            ("CANCELLED", "Cancelled"),
                            ("DELIVERY_EXCEPTION", "Delivery exception"),
                        ],
                        default="NEW",
                        max_length=20,
                    ),
                ),
                (
                    "order_status_callback_url",
                    models.URLField(blank=True, max_length=500, null=True),
                ),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="beer_orders",
                        to="customers.customer",
                    ),
                ),
            ],
            options={
                "db_table": "beer_orders",
                "ordering": ["id"],
                "indexes": [
                    models.Index(
                        fields=["order_status"], name="beer_orders_status_idx"
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="BeerOrderLine",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("version", models.PositiveIntegerField(default=0, editable=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "order_quantity",
                    models.PositiveIntegerField(
                        validators=[django.core.validators.MinValueValidator(1)]
                    ),
                ),
                (
                    "beer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="order_lines",
                        to="beers.beer",
                    ),
                ),
                (
                    "beer_order",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="beer_order_lines",
                        to="orders.beerorder",
                    ),
                ),
            ],
            options={
                "db_table": "beer_order_lines",
                "ordering": ["id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("order_quantity__gte", 1)),
                        name="beer_order_lines_quantity_positive",
                    )
                ],
            },
        ),
    ]
