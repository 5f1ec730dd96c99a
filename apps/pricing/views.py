"""API views for the room-type rate card."""

from __future__ import annotations

import structlog
from django.utils import timezone  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .serializers import (
    PriceCalculationQuerySerializer,
    PriceInfoSerializer,
    PriceQuoteSerializer,
    PriceUpdateSerializer,
    PricingHistoryQuerySerializer,
    PricingHistorySerializer,
)
from .services import (
    PriceNotFoundError,
    PricingConflictError,
    PricingError,
    pricing_service,
)

logger = structlog.get_logger(__name__)


def pricing_error_response(exc: PricingError) -> Response:
    if isinstance(exc, PriceNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, PricingConflictError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_400_BAD_REQUEST
    return Response({"detail": str(exc)}, status=code)


class PricingViewSet(viewsets.ViewSet):
    """Current prices, quotes, price changes and change history per room type."""

    permission_classes = [permissions.IsAuthenticatedOrReadOnly]
    lookup_field = "room_type"
    lookup_value_regex = "[A-Za-z_]+"
    serializer_class = PriceInfoSerializer

    def list(self, request):  # type: ignore
        prices = pricing_service.get_all_current_prices()
        return Response(
            {
                "prices": PriceInfoSerializer(prices, many=True).data,
                "last_updated": timezone.now().isoformat(),
            }
        )

    def retrieve(self, request, room_type=None):  # type: ignore
        try:
            price = pricing_service.get_current_price(room_type.upper())
        except PricingError as exc:
            return pricing_error_response(exc)
        return Response(PriceInfoSerializer(price).data)

    def update(self, request, room_type=None):  # type: ignore
        room_type = room_type.upper()
        serializer = PriceUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        changed_by = request.user.get_username()
        try:
            price = pricing_service.update_price(
                room_type,
                base_price=serializer.validated_data.get("base_price"),
                breakfast_price=serializer.validated_data.get("breakfast_price"),
                seasonal_multiplier=serializer.validated_data.get("seasonal_multiplier"),
                reason=serializer.validated_data["reason"],
                changed_by=changed_by,
            )
        except PricingError as exc:
            logger.warning("pricing.update_rejected", room_type=room_type, changed_by=changed_by, error=str(exc))
            return pricing_error_response(exc)
        return Response(PriceInfoSerializer(price).data)

    @action(detail=False, methods=["get"])
    def calculate(self, request):  # type: ignore
        params = PriceCalculationQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        try:
            quote = pricing_service.calculate_price(
                params.validated_data["room_type"],
                include_breakfast=params.validated_data["include_breakfast"],
                nights=params.validated_data["nights"],
            )
        except PricingError as exc:
            return pricing_error_response(exc)
        return Response(PriceQuoteSerializer(quote).data)

    @action(detail=True, methods=["get"])
    def history(self, request, room_type=None):  # type: ignore
        params = PricingHistoryQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        try:
            records = pricing_service.get_history(room_type.upper(), limit=params.validated_data["limit"])
        except PricingError as exc:
            return pricing_error_response(exc)
        return Response(PricingHistorySerializer(records, many=True).data)
