"""Admin registration for walk-in bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import WalkInBooking


@admin.register(WalkInBooking)
class WalkInBookingAdmin(admin.ModelAdmin):
    list_display = (
        "booking_reference",
        "guest_first_name",
        "guest_last_name",
        "room",
        "status",
        "check_in_date",
        "check_out_date",
        "total_amount",
    )
    list_filter = ("status", "breakfast_included", "room__room_type")
    search_fields = ("booking_reference", "guest_last_name", "guest_phone", "room__room_number")
    list_select_related = ("room",)
    readonly_fields = (
        "booking_reference",
        "room",
        "check_in_date",
        "check_out_date",
        "room_price",
        "breakfast_included",
        "total_amount",
        "created_at",
        "updated_at",
    )

    def has_add_permission(self, request):  # type: ignore
        return False
