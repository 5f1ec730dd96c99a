from __future__ import annotations

from django.apps import AppConfig  # type: ignore


class PricingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.pricing"
    label = "pricing"
    verbose_name = "Pricing"

    def ready(self) -> None:
        from . import handlers

        handlers.register()
