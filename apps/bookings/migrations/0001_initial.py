from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models

import shared.infrastructure.fields


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("rooms", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="WalkInBooking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("booking_reference", models.CharField(editable=False, max_length=12, unique=True)),
                ("guest_first_name", models.CharField(max_length=100)),
                ("guest_last_name", models.CharField(max_length=100)),
                ("guest_phone", models.CharField(max_length=32)),
                (
                    "guest_id_type",
                    models.CharField(
                        choices=[
                            ("PASSPORT", "Passport"),
                            ("NATIONAL_ID", "National ID"),
                            ("DRIVERS_LICENSE", "Driver's license"),
                        ],
                        max_length=20,
                    ),
                ),
                ("guest_id_number", shared.infrastructure.fields.EncryptedCharField(help_text="Stored encrypted.")),
                ("check_in_date", models.DateTimeField()),
                ("check_out_date", models.DateTimeField()),
                (
                    "room_price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Nightly room price at the moment of booking.",
                        max_digits=10,
                    ),
                ),
                ("breakfast_included", models.BooleanField(default=False)),
                ("total_amount", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("CHECKED_IN", "Checked in"),
                            ("CHECKED_OUT", "Checked out"),
                            ("CANCELLED", "Cancelled"),
                        ],
                        default="CHECKED_IN",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "room",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="walk_in_bookings",
                        to="rooms.room",
                    ),
                ),
            ],
            options={
                "verbose_name": "Walk-in booking",
                "verbose_name_plural": "Walk-in bookings",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["status"], name="walkin_status_idx"),
                    models.Index(fields=["room", "status"], name="walkin_room_status_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("check_out_date__gt", models.F("check_in_date"))),
                        name="walkin_checkout_after_checkin",
                    ),
                ],
            },
        ),
    ]
