"""API views for the room inventory."""

from __future__ import annotations

from django.utils import timezone  # type: ignore
from rest_framework import mixins, permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .filters import RoomFilterSet
from .models import Room
from .serializers import (
    RoomAvailabilitySerializer,
    RoomSerializer,
    RoomStatisticsSerializer,
)
from .services import room_service


class RoomViewSet(mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """Read-only access to rooms for the front desk."""

    queryset = Room.objects.all()
    serializer_class = RoomSerializer
    permission_classes = [permissions.AllowAny]
    filterset_class = RoomFilterSet

    @action(detail=False, methods=["get"], url_path="available-now")
    def available_now(self, request):  # type: ignore
        availability = room_service.get_available_rooms()
        serializer = RoomAvailabilitySerializer(availability)
        return Response({**serializer.data, "timestamp": timezone.now().isoformat()})

    @action(detail=False, methods=["get"])
    def statistics(self, request):  # type: ignore
        serializer = RoomStatisticsSerializer(room_service.get_room_statistics())
        return Response({**serializer.data, "timestamp": timezone.now().isoformat()})

    @action(detail=False, methods=["get"], url_path="all")
    def all_rooms(self, request):  # type: ignore
        queryset = self.filter_queryset(room_service.get_all_rooms())
        serializer = RoomSerializer(queryset, many=True)
        return Response(serializer.data)
