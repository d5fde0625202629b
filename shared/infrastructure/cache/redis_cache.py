"""
Redis cache implementation.
"""
import json
import logging
from typing import Any, Callable, Optional

from django.core.cache import cache
from django.core.serializers.json import DjangoJSONEncoder

logger = logging.getLogger(__name__)


class RedisCache:
    """
    JSON cache wrapper over Django's cache framework.

    Backed by Redis when REDIS_URL is configured, local memory otherwise.
    Decimals, datetimes and UUIDs are stored as strings.
    """

    def __init__(self, prefix: str = "", default_timeout: int = 300):
        self.prefix = prefix
        self.default_timeout = default_timeout

    def _make_key(self, key: str) -> str:
        """Create a cache key with prefix."""
        if self.prefix:
            return f"{self.prefix}:{key}"
        return key

    def get(self, key: str) -> Optional[Any]:
        """Get a value from cache."""
        value = cache.get(self._make_key(key))
        if value is not None and isinstance(value, str):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                return value
        return value

    def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        """Set a value in cache."""
        if isinstance(value, (dict, list)):
            value = json.dumps(value, cls=DjangoJSONEncoder)
        cache.set(self._make_key(key), value, self.default_timeout if timeout is None else timeout)

    def delete(self, key: str) -> None:
        """Delete a value from cache."""
        cache.delete(self._make_key(key))

    def get_or_set(self, key: str, default_func: Callable[[], Any], timeout: Optional[int] = None) -> Any:
        """Get from cache or set using default function."""
        value = self.get(key)
        if value is None:
            logger.debug("Cache miss for %s", self._make_key(key))
            value = default_func()
            self.set(key, value, timeout)
            if isinstance(value, (dict, list)):
                # Same shape as a cache hit
                return json.loads(json.dumps(value, cls=DjangoJSONEncoder))
            return value
        return value
