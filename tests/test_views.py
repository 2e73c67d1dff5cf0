"""
API tests for the offices and check-in confirmation endpoints.

The FHIR client is patched at the view module so no network is used.
"""

from unittest.mock import patch

import pytest
import requests
from rest_framework.test import APIClient

from fhir_api.fhir_client import FhirConfigError, MalformedResourceError
from fhir_api.models import Location
from tests.utils import location_resource


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture
def locations():
    return [
        Location.model_validate(location_resource(
            location_id="sv",
            name="Spring Valley",
            schedule={"scheduleOverrides": {"01/01/2099": {"open": 9, "close": 17}}},
        )),
        Location.model_validate(location_resource(location_id="oh", name="Oak Hill")),
    ]


class TestOfficesEndpoint:
    """Test GET /api/offices/."""

    @patch("offices.views.search_locations")
    def test_lists_offices(self, mock_search, client, locations):
        mock_search.return_value = locations

        resp = client.get("/api/offices/")

        assert resp.status_code == 200
        data = resp.json()
        assert data["count"] == 2
        assert data["rows_per_page"] == 5
        assert [row["id"] for row in data["rows"]] == ["oh", "sv"]

    @patch("offices.views.search_locations")
    def test_search_filters_by_name(self, mock_search, client, locations):
        mock_search.return_value = locations

        resp = client.get("/api/offices/", {"search": "SPRING"})

        rows = resp.json()["rows"]
        assert [row["label"] for row in rows] == ["TX - Spring Valley"]
        assert rows[0]["upcoming_changes"] == "Jan 1"
        assert rows[0]["link"] == "/office/sv"

    @patch("offices.views.search_locations")
    def test_pagination_params(self, mock_search, client, locations):
        mock_search.return_value = locations

        resp = client.get("/api/offices/", {"page": 1, "rows_per_page": 1})

        data = resp.json()
        assert data["page"] == 1
        assert data["rows_per_page"] == 1
        assert [row["id"] for row in data["rows"]] == ["sv"]

    @pytest.mark.parametrize("params", [{"rows_per_page": 3}, {"page": -1}, {"page": "abc"}])
    @patch("offices.views.search_locations")
    def test_invalid_query_params(self, mock_search, params, client):
        resp = client.get("/api/offices/", params)

        assert resp.status_code == 400
        mock_search.assert_not_called()

    @patch("offices.views.search_locations")
    def test_fetch_failure_yields_empty_table(self, mock_search, client):
        mock_search.side_effect = requests.ConnectionError("down")

        resp = client.get("/api/offices/")

        assert resp.status_code == 200
        assert resp.json() == {"count": 0, "page": 0, "rows_per_page": 5, "rows": []}

    @patch("offices.views.search_locations")
    def test_missing_config_is_server_error(self, mock_search, client):
        mock_search.side_effect = FhirConfigError("FHIR_API_URL missing")

        resp = client.get("/api/offices/")

        assert resp.status_code == 500


class TestOfficeDetailEndpoint:
    """Test GET /api/offices/<id>/."""

    @patch("offices.views.get_location")
    def test_returns_detail(self, mock_get, client, locations):
        mock_get.return_value = locations[0]

        resp = client.get("/api/offices/sv/")

        assert resp.status_code == 200
        data = resp.json()
        assert data["name"] == "Spring Valley"
        assert data["schedule_changes"] == ["Jan 1"]
        assert data["weekly_hours"][2] == {
            "days_of_week": ["wed"],
            "opening_time": "09:00:00",
            "closing_time": "17:00:00",
        }
        mock_get.assert_called_once_with("sv")

    @patch("offices.views.get_location")
    def test_missing_location(self, mock_get, client):
        mock_get.return_value = None

        assert client.get("/api/offices/nope/").status_code == 404

    @patch("offices.views.get_location")
    def test_fhir_failure(self, mock_get, client):
        mock_get.side_effect = requests.Timeout("slow")

        assert client.get("/api/offices/sv/").status_code == 502

    @patch("offices.views.get_location")
    def test_malformed_location_is_bad_gateway(self, mock_get, client):
        mock_get.side_effect = MalformedResourceError("Location/sv failed validation")

        resp = client.get("/api/offices/sv/")

        assert resp.status_code == 502
        assert resp.json()["detail"] == "FHIR Location 형식 오류"


class TestCheckInConfirmationEndpoint:
    """Test GET /api/appointments/confirmation/."""

    def test_formats_selected_slot(self, client):
        resp = client.get("/api/appointments/confirmation/", {"slot": "2024-01-05T09:30:00"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["check_in_time"] == "January 5, 9:30 AM"
        assert data["title"] == "Thank you for choosing Ottehr Telemedicine"
        assert data["can_cancel"] is True

    def test_without_slot(self, client):
        data = client.get("/api/appointments/confirmation/").json()

        assert data["check_in_time"] == ""
        assert data["can_cancel"] is False
