"""
Tests for the widget HTTP surface.
The geocoder and forecaster are fully mocked so no live Nominatim or
Open-Meteo connection is needed.
"""
from datetime import date
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from conftest import SAMPLE_FORECAST_PAYLOAD, SAMPLE_GEO
from weather_widget.controller import build_widget
from weather_widget.models import Location


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

ACCRA = Location(lat=SAMPLE_GEO[0]["lat"], lon=SAMPLE_GEO[0]["lon"], display_name=SAMPLE_GEO[0]["display_name"])


def _make_widget(location=ACCRA, payload=SAMPLE_FORECAST_PAYLOAD):
    geocoder = MagicMock()
    geocoder.lookup = AsyncMock(return_value=location)
    geocoder.search = AsyncMock(return_value=SAMPLE_GEO)
    forecaster = MagicMock()
    forecaster.get_forecast = AsyncMock(return_value=payload)
    return build_widget(geocoder, forecaster, today=lambda: date(2025, 8, 29))


@pytest.fixture()
def client():
    """TestClient over a fresh widget with mocked providers."""
    with patch("weather_widget.main.widget", _make_widget()):
        from weather_widget.main import app
        with TestClient(app) as c:
            yield c


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "docs" in resp.json()


# ---------------------------------------------------------------------------
# /v1/search
# ---------------------------------------------------------------------------

def test_search_happy_path(client):
    resp = client.post("/v1/search", json={"location": "accra,ghana"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["updated"] is True
    assert data["units"] == {"temperature": "celsius", "wind": "kmh", "precipitation": "mm"}
    assert data["view"]["current"]["location"] == "Accra, Ghana"
    assert data["view"]["current"]["temperature"] == "20°"
    assert len(data["view"]["hourly"]) == 24


def test_search_not_found_changes_nothing():
    with patch("weather_widget.main.widget", _make_widget(location=None)):
        from weather_widget.main import app
        with TestClient(app) as c:
            resp = c.post("/v1/search", json={"location": "zzzxyqq123"})
    assert resp.status_code == 200
    assert resp.json()["updated"] is False
    assert resp.json()["view"] is None


def test_search_empty_location(client):
    resp = client.post("/v1/search", json={"location": ""})
    assert resp.status_code == 422


# ---------------------------------------------------------------------------
# /v1/suggestions
# ---------------------------------------------------------------------------

def test_suggestions(client):
    resp = client.get("/v1/suggestions?q=Accra")
    assert resp.status_code == 200
    assert resp.json() == [
        {"display": "Accra, Ghana", "location": "Accra, Accra Metropolitan, Greater Accra Region, Ghana"}
    ]


def test_suggestions_short_query(client):
    resp = client.get("/v1/suggestions?q=Ac")
    assert resp.status_code == 200
    assert resp.json() == []


# ---------------------------------------------------------------------------
# /v1/units, /v1/units/toggle, /v1/day
# ---------------------------------------------------------------------------

def test_units_before_search_is_noop(client):
    resp = client.post("/v1/units", json={"temperature": "fahrenheit", "wind": "mph", "precipitation": "in"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["updated"] is False
    assert data["units"]["temperature"] == "celsius"


def test_units_change_after_search(client):
    client.post("/v1/search", json={"location": "accra"})
    resp = client.post("/v1/units", json={"temperature": "fahrenheit", "wind": "mph", "precipitation": "mm"})
    data = resp.json()
    assert data["updated"] is True
    assert data["view"]["current"]["temperature"] == "68°"
    assert data["view"]["current"]["wind_speed"] == "6 mph"
    assert data["view"]["current"]["precipitation"] == "2.5 mm"


def test_invalid_units(client):
    resp = client.post("/v1/units", json={"temperature": "kelvin"})
    assert resp.status_code == 422


def test_toggle_round_trip(client):
    client.post("/v1/search", json={"location": "accra"})
    resp = client.post("/v1/units/toggle")
    assert resp.json()["units"] == {"temperature": "fahrenheit", "wind": "mph", "precipitation": "in"}
    assert resp.json()["view"]["toggle_label"] == "Switch to Metric"

    resp = client.post("/v1/units/toggle")
    assert resp.json()["units"] == {"temperature": "celsius", "wind": "kmh", "precipitation": "mm"}


def test_day_change(client):
    client.post("/v1/search", json={"location": "accra"})
    resp = client.post("/v1/day", json={"date": "2025-08-30"})
    data = resp.json()
    assert data["updated"] is True
    assert data["view"]["selected_day"] == "2025-08-30"
    assert data["view"]["hourly"][0]["time"] == "2025-08-30T00:00"


def test_day_change_outside_forecast(client):
    client.post("/v1/search", json={"location": "accra"})
    resp = client.post("/v1/day", json={"date": "2030-01-01"})
    data = resp.json()
    assert resp.status_code == 200
    assert data["updated"] is False
    assert data["view"]["selected_day"] == "2025-08-29"


def test_day_change_malformed_date(client):
    resp = client.post("/v1/day", json={"date": "tomorrow"})
    assert resp.status_code == 422


def test_view_reflects_last_render(client):
    assert client.get("/v1/view").json()["view"] is None
    client.post("/v1/search", json={"location": "accra"})
    data = client.get("/v1/view").json()
    assert data["updated"] is False
    assert data["view"]["current"]["location"] == "Accra, Ghana"
