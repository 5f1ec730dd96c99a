"""Admin registration for rooms."""

from __future__ import annotations

from django.contrib import admin

from .models import Room


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = (
        "room_number",
        "room_type",
        "floor",
        "max_occupancy",
        "base_price",
        "status",
        "updated_at",
    )
    list_filter = ("status", "room_type", "floor")
    search_fields = ("room_number",)
    # Housekeeping flips OCCUPIED/MAINTENANCE rooms back to CLEAN from here
    list_editable = ("status",)
    readonly_fields = ("created_at", "updated_at")
