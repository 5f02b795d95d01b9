import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

CURRENT_FIELDS = (
    "temperature_2m",
    "precipitation",
    "relative_humidity_2m",
    "apparent_temperature",
    "weather_code",
    "wind_speed_10m",
)
DAILY_FIELDS = ("weather_code", "temperature_2m_min", "temperature_2m_max")
HOURLY_FIELDS = ("temperature_2m", "weather_code")


class OpenMeteoClient:
    def __init__(
        self,
        base_url: str = "https://api.open-meteo.com/v1",
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout_seconds
        self.transport = transport

    async def get_forecast(self, lat: float, lon: float) -> Optional[Dict[str, Any]]:
        """Current, daily and hourly forecast in metric units; None on failure."""
        url = f"{self.base_url}/forecast"
        params = {
            "latitude": lat,
            "longitude": lon,
            "daily": ",".join(DAILY_FIELDS),
            "hourly": ",".join(HOURLY_FIELDS),
            "current": ",".join(CURRENT_FIELDS),
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                r = await client.get(url, params=params)
                r.raise_for_status()
                data = r.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Forecast request failed for (%s, %s): %s", lat, lon, exc)
            return None

        logger.debug("Raw forecast payload: %s", data)
        return data
