import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

import redis

logger = logging.getLogger(__name__)


@dataclass
class CacheResult:
    value: Optional[Any]
    hit: bool
    age_seconds: Optional[int]


class RedisCache:
    """
    Stores JSON payload + metadata:
      key -> {"stored_at": <unix>, "payload": [...]}
    """

    def __init__(self, redis_url: str):
        self.client = redis.from_url(redis_url, decode_responses=True)

    def get_json(self, key: str) -> CacheResult:
        try:
            raw = self.client.get(key)
        except redis.RedisError as exc:
            logger.warning("Cache read failed for %s: %s", key, exc)
            return CacheResult(value=None, hit=False, age_seconds=None)
        if not raw:
            return CacheResult(value=None, hit=False, age_seconds=None)

        try:
            obj = json.loads(raw)
            stored_at = int(obj.get("stored_at", 0))
            payload = obj.get("payload")
        except (ValueError, AttributeError) as exc:
            logger.warning("Discarding unreadable cache entry %s: %s", key, exc)
            return CacheResult(value=None, hit=False, age_seconds=None)
        age = max(0, int(time.time()) - stored_at)
        return CacheResult(value=payload, hit=True, age_seconds=age)

    def set_json(self, key: str, payload: Any, ttl_seconds: int) -> None:
        obj = {"stored_at": int(time.time()), "payload": payload}
        try:
            self.client.setex(key, ttl_seconds, json.dumps(obj))
        except redis.RedisError as exc:
            logger.warning("Cache write failed for %s: %s", key, exc)
