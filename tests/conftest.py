"""Shared sample payloads shaped like the Nominatim and Open-Meteo responses."""
import copy

import pytest

from weather_widget.models import Forecast

DAYS = ["2025-08-29", "2025-08-30"]

SAMPLE_FORECAST_PAYLOAD = {
    "latitude": 5.56,
    "longitude": -0.2,
    "current": {
        "time": "2025-08-29T12:00",
        "temperature_2m": 20.0,
        "apparent_temperature": 21.4,
        "relative_humidity_2m": 60,
        "wind_speed_10m": 10.0,
        "precipitation": 2.54,
        "weather_code": 3,
    },
    "daily": {
        "time": DAYS,
        "weather_code": [0, 61],
        "temperature_2m_min": [12.0, 10.0],
        "temperature_2m_max": [25.0, 22.0],
    },
    "hourly": {
        "time": [f"{day}T{h:02d}:00" for day in DAYS for h in range(24)],
        "temperature_2m": [10.0 + h / 2 for _ in DAYS for h in range(24)],
        "weather_code": [0] * 24 + [95] * 24,
    },
}

SAMPLE_GEO = [
    {
        "lat": "5.5571096",
        "lon": "-0.2012376",
        "display_name": "Accra, Accra Metropolitan, Greater Accra Region, Ghana",
        "addresstype": "city",
        "type": "city",
        "class": "place",
    }
]


@pytest.fixture()
def forecast_payload():
    return copy.deepcopy(SAMPLE_FORECAST_PAYLOAD)


@pytest.fixture()
def raw_forecast(forecast_payload):
    return Forecast.from_open_meteo(forecast_payload, location_name="Accra, Ghana")
