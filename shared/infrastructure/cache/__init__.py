# Shared cache module
from .redis_cache import RedisCache

__all__ = ['RedisCache']
