"""URL routing for walk-in check-in."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import WalkInBookingViewSet, WalkInCheckInView

router = DefaultRouter()
router.register(r"bookings", WalkInBookingViewSet, basename="walkin-booking")

urlpatterns = [
    path("checkin/", WalkInCheckInView.as_view(), name="walkin-checkin"),
    path("", include(router.urls)),
]
