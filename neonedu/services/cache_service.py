"""
Cache Service using Redis for the public display model
"""
import json
from typing import Optional, Any
import redis


class CacheService:
    """Redis-based cache; every call is a no-op when Redis is unavailable"""

    _instance = None
    _redis_client = None

    def __new__(cls):
        """Singleton pattern"""
        if cls._instance is None:
            cls._instance = super(CacheService, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        self.redis = self._redis_client

    def init_app(self, app):
        """Connect to Redis using the application config"""
        if not app.config.get('CACHE_ENABLED', False):
            CacheService._redis_client = None
            self.redis = None
            return

        redis_host = app.config['REDIS_HOST']
        redis_port = app.config['REDIS_PORT']

        try:
            client = redis.Redis(
                host=redis_host,
                port=redis_port,
                db=app.config['REDIS_DB'],
                decode_responses=True,
                socket_connect_timeout=2,
                socket_timeout=2
            )
            client.ping()
            CacheService._redis_client = client
            print(f"[CacheService] Connected to Redis at {redis_host}:{redis_port}", flush=True)
        except (redis.ConnectionError, redis.TimeoutError) as e:
            print(f"[CacheService] Warning: Redis not available ({e}). Caching disabled.", flush=True)
            CacheService._redis_client = None

        self.redis = CacheService._redis_client

    def is_available(self) -> bool:
        """Check if Redis is available"""
        return self.redis is not None

    def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found
        """
        if not self.is_available():
            return None

        try:
            value = self.redis.get(key)
            if value:
                return json.loads(value)
        except (redis.RedisError, ValueError) as e:
            print(f"[CacheService] Error getting key {key}: {e}", flush=True)

        return None

    def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """
        Set value in cache with TTL

        Args:
            key: Cache key
            value: Value to cache (must be JSON-serializable)
            ttl: Time to live in seconds

        Returns:
            True if successful, False otherwise
        """
        if not self.is_available():
            return False

        try:
            self.redis.setex(key, ttl, json.dumps(value))
            return True
        except (redis.RedisError, TypeError) as e:
            print(f"[CacheService] Error setting key {key}: {e}", flush=True)
            return False

    def delete(self, key: str) -> bool:
        """Delete key from cache"""
        if not self.is_available():
            return False

        try:
            self.redis.delete(key)
            return True
        except redis.RedisError as e:
            print(f"[CacheService] Error deleting key {key}: {e}", flush=True)
            return False


# Singleton instance
cache_service = CacheService()
