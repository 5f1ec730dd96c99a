from decimal import Decimal

import django.core.validators
import django.utils.timezone
from django.db import migrations, models

ROOM_TYPE_CHOICES = [
    ("STANDARD", "Standard"),
    ("SUPERIOR", "Superior"),
    ("DELUXE", "Deluxe"),
    ("FAMILY", "Family"),
    ("HOP_IN", "Hop in"),
    ("ZENITH", "Zenith"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PricingHistory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("room_type", models.CharField(choices=ROOM_TYPE_CHOICES, max_length=20)),
                ("old_base_price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("new_base_price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("old_breakfast_price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("new_breakfast_price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("reason", models.TextField(blank=True)),
                ("changed_by", models.CharField(default="system", max_length=150)),
                ("changed_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "verbose_name": "Pricing history entry",
                "verbose_name_plural": "Pricing history",
                "ordering": ["-changed_at", "-id"],
                "indexes": [
                    models.Index(fields=["room_type", "-changed_at"], name="pricing_history_type_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="RoomTypePricing",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("room_type", models.CharField(choices=ROOM_TYPE_CHOICES, max_length=20)),
                (
                    "base_price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "breakfast_price",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("250.00"),
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "seasonal_multiplier",
                    models.DecimalField(
                        decimal_places=4,
                        default=Decimal("1.0000"),
                        max_digits=6,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.0000"))],
                    ),
                ),
                ("is_active", models.BooleanField(default=True)),
                ("effective_from", models.DateTimeField(default=django.utils.timezone.now)),
                ("effective_until", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Room type price",
                "verbose_name_plural": "Room type prices",
                "ordering": ["room_type", "-effective_from"],
                "indexes": [
                    models.Index(fields=["room_type", "is_active"], name="pricing_type_active_idx"),
                    models.Index(fields=["effective_from", "effective_until"], name="pricing_effective_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        condition=models.Q(("is_active", True)),
                        fields=("room_type",),
                        name="pricing_one_active_per_room_type",
                    ),
                ],
            },
        ),
    ]
