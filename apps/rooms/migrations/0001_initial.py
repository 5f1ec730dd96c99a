from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Room",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("room_number", models.CharField(max_length=10, unique=True)),
                (
                    "room_type",
                    models.CharField(
                        choices=[
                            ("STANDARD", "Standard"),
                            ("SUPERIOR", "Superior"),
                            ("DELUXE", "Deluxe"),
                            ("FAMILY", "Family"),
                            ("HOP_IN", "Hop in"),
                            ("ZENITH", "Zenith"),
                        ],
                        max_length=20,
                    ),
                ),
                ("floor", models.PositiveSmallIntegerField()),
                ("max_occupancy", models.PositiveSmallIntegerField(default=2)),
                (
                    "features",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text='Bed type and amenities, e.g. {"bedType": "king", "wifi": true}.',
                    ),
                ),
                (
                    "base_price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Nightly price charged for walk-in bookings of this room.",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("CLEAN", "Clean"), ("OCCUPIED", "Occupied"), ("MAINTENANCE", "Maintenance")],
                        default="CLEAN",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Room",
                "verbose_name_plural": "Rooms",
                "ordering": ["floor", "room_number"],
                "indexes": [
                    models.Index(fields=["status"], name="room_status_idx"),
                    models.Index(fields=["room_type", "status"], name="room_type_status_idx"),
                ],
            },
        ),
    ]
