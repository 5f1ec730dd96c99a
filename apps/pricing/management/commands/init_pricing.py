from __future__ import annotations

from django.core.management.base import BaseCommand  # type: ignore

from apps.pricing.services import pricing_service


class Command(BaseCommand):
    help = "Seeds default prices for room types that have no current price"

    def handle(self, *args, **options):  # type: ignore
        created = pricing_service.initialize_defaults()

        for info in created:
            self.stdout.write(f"{info.room_type}: base {info.base_price}, breakfast {info.breakfast_price}")

        if not created:
            self.stdout.write(self.style.WARNING("Every room type already has a current price"))
            return
        self.stdout.write(self.style.SUCCESS(f"Initialized pricing for {len(created)} room types"))
