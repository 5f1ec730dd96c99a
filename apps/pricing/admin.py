"""Admin registration for the rate card.

Both tables are append-only, so the admin is read-only; prices change
through the pricing API which keeps history and versioning consistent.
"""

from __future__ import annotations

from django.contrib import admin

from .models import PricingHistory, RoomTypePricing


class ReadOnlyAdmin(admin.ModelAdmin):
    def has_add_permission(self, request):  # type: ignore
        return False

    def has_change_permission(self, request, obj=None):  # type: ignore
        return False

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False


@admin.register(RoomTypePricing)
class RoomTypePricingAdmin(ReadOnlyAdmin):
    list_display = (
        "room_type",
        "base_price",
        "breakfast_price",
        "seasonal_multiplier",
        "is_active",
        "effective_from",
        "effective_until",
    )
    list_filter = ("room_type", "is_active")
    date_hierarchy = "effective_from"


@admin.register(PricingHistory)
class PricingHistoryAdmin(ReadOnlyAdmin):
    list_display = (
        "room_type",
        "old_base_price",
        "new_base_price",
        "old_breakfast_price",
        "new_breakfast_price",
        "changed_by",
        "changed_at",
    )
    list_filter = ("room_type", "changed_by")
    search_fields = ("reason", "changed_by")
