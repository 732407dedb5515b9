"""Tests for the JSON API in bins/views.py and bins/middleware.py."""

from __future__ import annotations

from decimal import Decimal
from unittest import mock

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError
from django.urls import reverse

from bins.exceptions import StoreError
from bins.middleware import HealthCheckMiddleware
from bins.models import Bin, PickupLog

JSON = "application/json"


class TestBinsEndpoint:
    """Tests for GET/POST /api/bins."""

    @pytest.mark.django_db
    def test_list_bins(self, client, empty_bin, full_bin):
        """Bins are returned newest first with derived status."""
        response = client.get("/api/bins")

        assert response.status_code == 200
        data = response.json()
        assert [row["id"] for row in data] == [full_bin.id, empty_bin.id]
        assert data[0]["location"] == "Harbour Rd"
        assert data[0]["type"] == "recyclable"
        assert data[0]["fill_level"] == 80
        assert data[0]["status"] == "Full"
        assert data[1]["status"] == "Empty"
        assert "created_at" in data[0]
        assert "updated_at" in data[0]

    @pytest.mark.django_db
    def test_create_bin(self, client):
        """A valid body creates an empty bin and returns its id."""
        response = client.post("/api/bins", {"location": "Main St", "type": "general"}, content_type=JSON)

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Bin added successfully"
        created = Bin.objects.get(pk=data["id"])
        assert created.location == "Main St"
        assert created.fill_level == 0

    @pytest.mark.django_db
    @pytest.mark.parametrize(
        "body",
        [
            {"type": "general"},
            {"location": "Main St"},
            {"location": "", "type": "general"},
            {},
        ],
    )
    def test_create_bin_missing_field(self, client, body):
        """Missing fields give 400 and create nothing."""
        response = client.post("/api/bins", body, content_type=JSON)

        assert response.status_code == 400
        assert response.json() == {"message": "Location and type are required"}
        assert not Bin.objects.exists()

    @pytest.mark.django_db
    def test_create_bin_malformed_json(self, client):
        """A body that is not JSON gives 400."""
        response = client.post("/api/bins", "{not json", content_type=JSON)

        assert response.status_code == 400
        assert "valid JSON" in response.json()["message"]

    @pytest.mark.django_db
    def test_create_bin_non_object_body(self, client):
        """A JSON array body gives 400."""
        response = client.post("/api/bins", ["Main St", "general"], content_type=JSON)

        assert response.status_code == 400
        assert "JSON object" in response.json()["message"]

    @pytest.mark.django_db
    def test_list_bins_store_error(self, client):
        """Store failures give a generic 500."""
        with mock.patch("bins.views.registry.list_bins", side_effect=StoreError("Failed to fetch bins")):
            response = client.get("/api/bins")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch bins"}

    @pytest.mark.django_db
    def test_wrong_method(self, client):
        """Unsupported methods give a JSON 405."""
        response = client.patch("/api/bins", {}, content_type=JSON)

        assert response.status_code == 405
        assert response["Allow"] == "GET, POST"
        assert "not allowed" in response.json()["message"]


class TestFillEndpoint:
    """Tests for PUT /api/bins/<id>/fill."""

    @pytest.mark.django_db
    def test_update_fill_level(self, client, empty_bin):
        """A valid level is stored."""
        url = reverse("bin_fill", args=(empty_bin.id,))
        response = client.put(url, {"fillLevel": 80}, content_type=JSON)

        assert response.status_code == 200
        assert response.json() == {"message": "Fill level updated successfully"}
        empty_bin.refresh_from_db()
        assert empty_bin.fill_level == 80

    @pytest.mark.django_db
    @pytest.mark.parametrize("fill_level", [-1, 101])
    def test_out_of_range(self, client, half_full_bin, fill_level):
        """Out-of-range levels give 400 and leave the bin alone."""
        url = reverse("bin_fill", args=(half_full_bin.id,))
        response = client.put(url, {"fillLevel": fill_level}, content_type=JSON)

        assert response.status_code == 400
        assert response.json() == {"message": "Fill level must be between 0 and 100"}
        half_full_bin.refresh_from_db()
        assert half_full_bin.fill_level == 50

    @pytest.mark.django_db
    @pytest.mark.parametrize(
        "body",
        [{}, {"fillLevel": "lots"}, {"fillLevel": 50.5}, {"fillLevel": True}, {"fillLevel": False}],
    )
    def test_invalid_body(self, client, half_full_bin, body):
        """Missing, boolean or non-integer levels give 400 and leave the bin alone."""
        url = reverse("bin_fill", args=(half_full_bin.id,))
        response = client.put(url, body, content_type=JSON)

        assert response.status_code == 400
        half_full_bin.refresh_from_db()
        assert half_full_bin.fill_level == 50

    @pytest.mark.django_db
    def test_numeric_string_is_coerced(self, client, empty_bin):
        """A numeric string still parses as an integer level."""
        url = reverse("bin_fill", args=(empty_bin.id,))
        response = client.put(url, {"fillLevel": "80"}, content_type=JSON)

        assert response.status_code == 200
        empty_bin.refresh_from_db()
        assert empty_bin.fill_level == 80

    @pytest.mark.django_db
    def test_unknown_bin(self, client):
        """An unknown id gives 404."""
        response = client.put("/api/bins/9999/fill", {"fillLevel": 10}, content_type=JSON)

        assert response.status_code == 404
        assert response.json() == {"message": "Bin not found"}


class TestPickupEndpoint:
    """Tests for POST /api/bins/<id>/pickup."""

    @pytest.mark.django_db
    def test_record_pickup(self, client, full_bin):
        """A pickup logs the weight and empties the bin."""
        url = reverse("bin_pickup", args=(full_bin.id,))
        response = client.post(url, {"collectedWeight": 12.5}, content_type=JSON)

        assert response.status_code == 200
        assert response.json() == {"message": "Pickup recorded and bin reset successfully"}
        full_bin.refresh_from_db()
        assert full_bin.fill_level == 0
        log = PickupLog.objects.get()
        assert log.bin_id == full_bin.id
        assert log.collected_kg == Decimal("12.5")

    @pytest.mark.django_db
    @pytest.mark.parametrize(
        ("weight", "stored"),
        [(12.346, Decimal("12.35")), (0.30000000000000004, Decimal("0.30")), ("12.345", Decimal("12.35"))],
    )
    def test_extra_precision_is_rounded(self, client, full_bin, weight, stored):
        """Weights with more than two decimals are rounded, not rejected."""
        url = reverse("bin_pickup", args=(full_bin.id,))
        response = client.post(url, {"collectedWeight": weight}, content_type=JSON)

        assert response.status_code == 200
        assert PickupLog.objects.get().collected_kg == stored
        full_bin.refresh_from_db()
        assert full_bin.fill_level == 0

    @pytest.mark.django_db
    def test_negative_weight(self, client, full_bin):
        """A negative weight gives 400 and writes nothing."""
        url = reverse("bin_pickup", args=(full_bin.id,))
        response = client.post(url, {"collectedWeight": -1}, content_type=JSON)

        assert response.status_code == 400
        assert response.json() == {"message": "Weight must be a positive number"}
        full_bin.refresh_from_db()
        assert full_bin.fill_level == 80
        assert not PickupLog.objects.exists()

    @pytest.mark.django_db
    @pytest.mark.parametrize("body", [{}, {"collectedWeight": "heavy"}])
    def test_invalid_weight(self, client, full_bin, body):
        """Missing or non-numeric weights give 400."""
        url = reverse("bin_pickup", args=(full_bin.id,))
        response = client.post(url, body, content_type=JSON)

        assert response.status_code == 400
        assert not PickupLog.objects.exists()

    @pytest.mark.django_db
    def test_unknown_bin(self, client):
        """An unknown id gives 404 and leaves no orphan log."""
        response = client.post("/api/bins/9999/pickup", {"collectedWeight": 3}, content_type=JSON)

        assert response.status_code == 404
        assert response.json() == {"message": "Bin not found"}
        assert not PickupLog.objects.exists()

    @pytest.mark.django_db
    def test_store_error_hides_detail(self, client, full_bin):
        """A failed insert gives the fixed 500 message and rolls the reset back."""
        url = reverse("bin_pickup", args=(full_bin.id,))
        with mock.patch.object(PickupLog.objects, "create", side_effect=DatabaseError("disk full")):
            response = client.post(url, {"collectedWeight": 3}, content_type=JSON)

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to record pickup"}
        full_bin.refresh_from_db()
        assert full_bin.fill_level == 80


class TestDeleteEndpoint:
    """Tests for DELETE /api/bins/<id>."""

    @pytest.mark.django_db
    def test_delete_bin(self, client, full_bin, pickup):
        """Deleting a bin removes it and its logs."""
        response = client.delete(reverse("bin_detail", args=(full_bin.id,)))

        assert response.status_code == 200
        assert response.json() == {"message": "Bin deleted successfully"}
        assert client.get("/api/bins").json() == []
        assert client.get("/api/pickups").json() == []

    @pytest.mark.django_db
    def test_unknown_bin(self, client):
        """An unknown id gives 404."""
        response = client.delete("/api/bins/9999")

        assert response.status_code == 404
        assert response.json() == {"message": "Bin not found"}


class TestPickupsEndpoint:
    """Tests for GET /api/pickups."""

    @pytest.mark.django_db
    def test_list_pickups(self, client, full_bin):
        """Logs come joined with bin location and type, newest first."""
        client.post(reverse("bin_pickup", args=(full_bin.id,)), {"collectedWeight": 4}, content_type=JSON)
        client.post(reverse("bin_pickup", args=(full_bin.id,)), {"collectedWeight": 6.25}, content_type=JSON)

        response = client.get("/api/pickups")

        assert response.status_code == 200
        data = response.json()
        assert [row["collected_kg"] for row in data] == [6.25, 4.0]
        assert data[0]["bin_id"] == full_bin.id
        assert data[0]["location"] == "Harbour Rd"
        assert data[0]["type"] == "recyclable"
        assert "pickup_time" in data[0]

    @pytest.mark.django_db
    def test_store_error(self, client):
        """Store failures give a generic 500."""
        with mock.patch("bins.views.ledger.list_pickups", side_effect=StoreError("x")):
            response = client.get("/api/pickups")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch pickup logs"}


class TestStatsEndpoint:
    """Tests for GET /api/stats."""

    @pytest.mark.django_db
    def test_stats(self, client, empty_bin, full_bin, half_full_bin):
        """Counters use camelCase keys and a numeric weight."""
        client.post(reverse("bin_pickup", args=(half_full_bin.id,)), {"collectedWeight": 12.5}, content_type=JSON)

        response = client.get("/api/stats")

        assert response.status_code == 200
        assert response.json() == {
            "totalBins": 3,
            "fullBins": 1,
            "emptyBins": 2,
            "totalPickups": 1,
            "totalWeightCollected": 12.5,
        }

    @pytest.mark.django_db
    def test_stats_without_pickups(self, client):
        """The weight total is 0, never null."""
        assert client.get("/api/stats").json()["totalWeightCollected"] == 0

    @pytest.mark.django_db
    def test_store_error(self, client):
        """Store failures give a generic 500."""
        with mock.patch("bins.views.stats.compute_stats", side_effect=StoreError("x")):
            response = client.get("/api/stats")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch statistics"}


class TestMiddleware:
    """Tests for HealthCheckMiddleware and ApiExceptionMiddleware."""

    def test_healthcheck(self, client):
        """The health check answers without touching the database."""
        response = client.get("/healthz/")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    @pytest.mark.django_db
    def test_unexpected_error_becomes_generic_500(self, client):
        """Unhandled exceptions under /api/ become a JSON 500 without detail."""
        with mock.patch("bins.views.registry.list_bins", side_effect=RuntimeError("secret detail")):
            response = client.get("/api/bins")

        assert response.status_code == 500
        assert response.json() == {"message": "Something went wrong!"}

    def test_healthcheck_is_json_like_the_api(self, client):
        """The health body is a JSON object, the same shape clients parse elsewhere."""
        response = client.get("/healthz/")

        assert response["Content-Type"] == JSON

    @pytest.mark.parametrize("path", [None, ""])
    def test_healthcheck_requires_path_setting(self, settings, path):
        """A missing or empty HEALTH_CHECK_PATH fails at startup."""
        if path is None:
            del settings.HEALTH_CHECK_PATH
        else:
            settings.HEALTH_CHECK_PATH = path

        with pytest.raises(ImproperlyConfigured, match="HEALTH_CHECK_PATH"):
            HealthCheckMiddleware(lambda request: None)
