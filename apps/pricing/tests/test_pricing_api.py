"""Integration tests for the pricing API."""

from __future__ import annotations

from decimal import Decimal
from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.pricing.models import PricingHistory, RoomTypePricing
from apps.pricing.services import pricing_service


class PricingReadAPITests(APITestCase):
    def setUp(self) -> None:
        pricing_service.initialize_defaults()

    def test_list_returns_every_price_with_aliases(self) -> None:
        response = self.client.get(reverse("pricing-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        prices = response.data["prices"]
        self.assertEqual(len(prices), 6)
        hop_in = next(p for p in prices if p["room_type"] == "HOP_IN")
        self.assertEqual(hop_in["room_type_name"], "Hop in")
        self.assertEqual(hop_in["no_breakfast"], Decimal("800.00"))
        self.assertEqual(hop_in["with_breakfast"], Decimal("1050.00"))
        self.assertIn("last_updated", response.data)

    def test_retrieve_single_room_type(self) -> None:
        response = self.client.get(reverse("pricing-detail", args=["DELUXE"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["base_price"], Decimal("2400.00"))
        self.assertEqual(response.data["seasonal_multiplier"], Decimal("1.0000"))
        self.assertIsNone(response.data["effective_until"])

    def test_retrieve_uninitialized_type_is_404(self) -> None:
        RoomTypePricing.objects.filter(room_type="ZENITH").delete()

        response = self.client.get(reverse("pricing-detail", args=["ZENITH"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)

    def test_retrieve_unknown_type_is_400(self) -> None:
        response = self.client.get(reverse("pricing-detail", args=["PENTHOUSE"]))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("Unknown room type", response.data["detail"])

    def test_calculate(self) -> None:
        response = self.client.get(
            reverse("pricing-calculate"),
            {"room_type": "STANDARD", "include_breakfast": "true", "nights": 3},
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["nights"], 3)
        self.assertTrue(response.data["include_breakfast"])
        self.assertEqual(
            response.data["calculation"],
            {
                "base_amount": Decimal("3600.00"),
                "breakfast_amount": Decimal("750.00"),
                "total": Decimal("4350.00"),
            },
        )

    def test_calculate_defaults_to_one_night_without_breakfast(self) -> None:
        response = self.client.get(reverse("pricing-calculate"), {"room_type": "FAMILY"})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["nights"], 1)
        self.assertEqual(response.data["calculation"]["total"], Decimal("3200.00"))

    def test_calculate_validates_query(self) -> None:
        response = self.client.get(reverse("pricing-calculate"), {"room_type": "STANDARD", "nights": 0})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("nights", response.data)

        response = self.client.get(reverse("pricing-calculate"), {"room_type": "PENTHOUSE"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("room_type", response.data)


class PricingUpdateAPITests(APITestCase):
    def setUp(self) -> None:
        pricing_service.initialize_defaults()
        self.manager = get_user_model().objects.create_user(username="manager", password="ManagerPass123")
        self.url = reverse("pricing-detail", args=["STANDARD"])

    def test_anonymous_update_is_rejected(self) -> None:
        response = self.client.put(self.url, {"base_price": 1300}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(PricingHistory.objects.exists())

    def test_authenticated_update_records_actor(self) -> None:
        self.client.force_authenticate(self.manager)

        response = self.client.put(
            self.url,
            {"base_price": 1300, "breakfast_price": 300, "reason": "Festival week"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["base_price"], Decimal("1300.00"))
        self.assertEqual(response.data["with_breakfast"], Decimal("1600.00"))
        history = PricingHistory.objects.get()
        self.assertEqual(history.changed_by, "manager")
        self.assertEqual(history.reason, "Festival week")

    def test_out_of_range_prices_are_rejected(self) -> None:
        self.client.force_authenticate(self.manager)

        response = self.client.put(self.url, {"base_price": 100001}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("base_price", response.data)

        response = self.client.put(self.url, {"breakfast_price": -1}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("breakfast_price", response.data)

        response = self.client.put(self.url, {"seasonal_multiplier": "0"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("seasonal_multiplier", response.data)

        self.assertEqual(RoomTypePricing.objects.filter(room_type="STANDARD").count(), 1)

    def test_lowercase_room_type_in_path(self) -> None:
        self.client.force_authenticate(self.manager)

        response = self.client.put(
            reverse("pricing-detail", args=["hop_in"]),
            {"seasonal_multiplier": "1.2"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["room_type"], "HOP_IN")
        self.assertEqual(response.data["seasonal_multiplier"], Decimal("1.2000"))

    def test_history_endpoint(self) -> None:
        self.client.force_authenticate(self.manager)
        for price in (1250, 1300, 1350):
            self.client.put(self.url, {"base_price": price}, format="json")

        response = self.client.get(reverse("pricing-history", args=["STANDARD"]), {"limit": 2})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(len(response.data), 2)
        self.assertEqual(response.data[0]["new_base_price"], Decimal("1350.00"))
        self.assertEqual(response.data[0]["changed_by"], "manager")

    def test_history_for_unknown_type_is_400(self) -> None:
        response = self.client.get(reverse("pricing-history", args=["PENTHOUSE"]))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)


class InitPricingCommandTests(APITestCase):
    def test_command_seeds_once(self) -> None:
        out = StringIO()
        call_command("init_pricing", stdout=out)
        call_command("init_pricing", stdout=out)

        self.assertEqual(RoomTypePricing.objects.filter(is_active=True).count(), 6)
        self.assertIn("Initialized pricing for 6 room types", out.getvalue())
        self.assertIn("already has a current price", out.getvalue())
