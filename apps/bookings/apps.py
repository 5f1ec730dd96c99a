from __future__ import annotations

from django.apps import AppConfig  # type: ignore


class BookingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.bookings"
    label = "bookings"
    verbose_name = "Walk-in bookings"

    def ready(self) -> None:
        from . import handlers

        handlers.register()
