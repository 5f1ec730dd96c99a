"""API views for walk-in check-in."""

from __future__ import annotations

from rest_framework import generics, permissions, status, viewsets  # type: ignore
from rest_framework.exceptions import NotFound  # type: ignore
from rest_framework.response import Response  # type: ignore

from .filters import WalkInBookingFilterSet
from .serializers import (
    BookingConfirmationSerializer,
    WalkInBookingDetailSerializer,
    WalkInBookingSerializer,
    WalkInCheckInSerializer,
)
from .services import BookingNotFoundError, booking_service


class WalkInCheckInView(generics.GenericAPIView):
    """Checks a walk-in guest into a clean room."""

    permission_classes = [permissions.IsAuthenticated]
    serializer_class = WalkInCheckInSerializer

    def post(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = serializer.save()
        return Response(BookingConfirmationSerializer(result).data, status=status.HTTP_201_CREATED)


class WalkInBookingViewSet(viewsets.ReadOnlyModelViewSet):
    """Walk-in bookings, newest first. Guest details are staff-only."""

    permission_classes = [permissions.IsAuthenticated]
    filterset_class = WalkInBookingFilterSet
    lookup_field = "booking_reference"
    lookup_url_kwarg = "reference"
    lookup_value_regex = "[A-Za-z0-9]+"

    def get_queryset(self):  # type: ignore
        return booking_service.get_all_bookings()

    def get_serializer_class(self):  # type: ignore
        if self.action == "retrieve":
            return WalkInBookingDetailSerializer
        return WalkInBookingSerializer

    def get_object(self):  # type: ignore
        try:
            booking = booking_service.get_booking_by_reference(self.kwargs[self.lookup_url_kwarg])
        except BookingNotFoundError as exc:
            raise NotFound(str(exc))
        self.check_object_permissions(self.request, booking)
        return booking
