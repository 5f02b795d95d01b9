import logging
from typing import Any, Dict, List, Optional

import httpx

from weather_widget.models import Location
from weather_widget.services.cache import RedisCache

logger = logging.getLogger(__name__)


class NominatimClient:
    def __init__(
        self,
        base_url: str = "https://nominatim.openstreetmap.org",
        user_agent: str = "weather-widget/0.1",
        timeout_seconds: float = 10.0,
        cache: Optional[RedisCache] = None,
        cache_ttl_seconds: int = 86_400,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = {"User-Agent": user_agent}
        self.timeout = timeout_seconds
        self.cache = cache
        self.cache_ttl = cache_ttl_seconds
        self.transport = transport

    async def search(self, query: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Return raw candidates for a free-text place name; ``[]`` on any failure."""
        key = f"geocode:{limit or 0}:{query.strip().lower()}"
        if self.cache is not None:
            cached = self.cache.get_json(key)
            if cached.hit and cached.value is not None:
                return cached.value

        url = f"{self.base_url}/search"
        params: Dict[str, Any] = {"q": query, "format": "jsonv2"}
        if limit:
            params["limit"] = limit
        try:
            async with httpx.AsyncClient(timeout=self.timeout, headers=self.headers, transport=self.transport) as client:
                r = await client.get(url, params=params)
                r.raise_for_status()
                results = r.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Geocoding request failed for %r: %s", query, exc)
            return []

        if not isinstance(results, list):
            logger.error("Geocoding returned unexpected payload for %r", query)
            return []

        if self.cache is not None and results:
            self.cache.set_json(key, results, ttl_seconds=self.cache_ttl)
        return results

    async def lookup(self, query: str) -> Optional[Location]:
        """Resolve a place name to its best candidate, or None when nothing matched."""
        results = await self.search(query)
        if not results:
            logger.info("No geocoding results for %r", query)
            return None

        top = results[0]
        try:
            return Location(lat=top["lat"], lon=top["lon"], display_name=top["display_name"])
        except (KeyError, ValueError) as exc:
            logger.error("Malformed geocoding candidate for %r: %s", query, exc)
            return None
