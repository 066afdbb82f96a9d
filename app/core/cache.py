# ============================================================================
# FILE: app/core/cache.py
# ============================================================================
import redis
import json
from typing import Dict, List, Optional
from app.config import settings
import logging

logger = logging.getLogger(__name__)

CATALOG_KEY = "instruments:catalog"

class CatalogCache:
    """
    Redis copy of the instrument catalog as a list of {"id", "name"} dicts.
    Without a reachable Redis every call does nothing and reads miss.
    """

    def __init__(self, url: str = settings.REDIS_URL, enabled: bool = settings.CACHE_ENABLED,
                 expire: int = settings.CACHE_EXPIRE_SECONDS):
        self.expire = expire
        self.client: Optional[redis.Redis] = None
        if not enabled:
            logger.info("Catalog cache disabled by configuration")
            return
        try:
            client = redis.from_url(url, decode_responses=True, socket_connect_timeout=1)
            client.ping()
            self.client = client
            logger.info("Redis connection established")
        except redis.RedisError as e:
            logger.warning(f"Redis unreachable ({e}); catalog will be read from the database")

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def get_catalog(self) -> Optional[List[Dict]]:
        """Cached catalog, or None on a miss"""
        if not self.client:
            return None
        try:
            raw = self.client.get(CATALOG_KEY)
        except redis.RedisError as e:
            logger.error(f"Catalog cache read failed: {e}")
            return None
        if not raw:
            return None
        try:
            items = json.loads(raw)
        except ValueError:
            logger.warning("Discarding unreadable catalog cache entry")
            self.clear_catalog()
            return None
        return items if isinstance(items, list) else None

    def set_catalog(self, items: List[Dict]) -> bool:
        if not self.client:
            return False
        try:
            self.client.setex(CATALOG_KEY, self.expire, json.dumps(items))
            return True
        except redis.RedisError as e:
            logger.error(f"Catalog cache write failed: {e}")
            return False

    def clear_catalog(self) -> bool:
        if not self.client:
            return False
        try:
            self.client.delete(CATALOG_KEY)
            return True
        except redis.RedisError as e:
            logger.error(f"Catalog cache delete failed: {e}")
            return False

# Singleton instance
catalog_cache = CatalogCache()
