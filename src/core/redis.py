"""Redis connection and cache utilities.

Redis is optional: when ``REDIS_HOST`` is not configured the cache stays
disconnected and every operation degrades to a miss or a no-op.
"""

import redis.asyncio as redis
from typing import Optional, Any
import json
import logging
from src.core.config import settings

logger = logging.getLogger(__name__)


class RedisCache:
    """Thin JSON cache over a Redis connection pool."""

    def __init__(self, client: Optional[redis.Redis] = None):
        self.pool: Optional[redis.ConnectionPool] = None
        self.client: Optional[redis.Redis] = client

    async def init(self) -> None:
        """Initialize Redis connection pool."""
        if not settings.REDIS_HOST:
            logger.warning("Redis not configured, skipping Redis initialization")
            return

        try:
            # Handle empty string passwords properly
            redis_password = settings.REDIS_PASSWORD if settings.REDIS_PASSWORD else None

            self.pool = redis.ConnectionPool(
                host=settings.REDIS_HOST,
                port=settings.REDIS_PORT or 6379,
                password=redis_password,
                db=settings.REDIS_DB,
                decode_responses=True,
                max_connections=20,
                retry_on_timeout=True,
                socket_connect_timeout=5,
                socket_timeout=5
            )

            self.client = redis.Redis(connection_pool=self.pool)
            await self.client.ping()
            logger.info(f"Redis connected to {settings.REDIS_HOST}:{settings.REDIS_PORT}")

        except redis.AuthenticationError as e:
            logger.error(f"Redis authentication failed: {e}")
            self.pool = None
            self.client = None
        except redis.ConnectionError as e:
            logger.error(f"Redis connection failed: {e}")
            logger.error(f"Redis config: host={settings.REDIS_HOST}, port={settings.REDIS_PORT}, db={settings.REDIS_DB}")
            self.pool = None
            self.client = None

    async def close(self) -> None:
        """Close Redis connection."""
        if self.client:
            try:
                await self.client.aclose()
            except redis.RedisError as e:
                logger.error(f"Error closing Redis client: {e}")

        if self.pool:
            try:
                await self.pool.disconnect()
            except redis.RedisError as e:
                logger.error(f"Error disconnecting Redis pool: {e}")

        self.pool = None
        self.client = None

    async def get(self, key: str) -> Optional[Any]:
        """Get a JSON value from Redis, ``None`` on miss or failure."""
        if not self.client:
            return None

        try:
            value = await self.client.get(key)
            if value is None:
                return None
            return json.loads(value)
        except (redis.RedisError, json.JSONDecodeError) as e:
            logger.error(f"Redis GET error for key {key}: {e}")
            return None

    async def set(self, key: str, value: Any, expire: Optional[int] = None) -> bool:
        """Set a JSON value in Redis with optional expiration."""
        if not self.client:
            return False

        try:
            expire_time = expire or settings.REDIS_TTL
            await self.client.setex(key, expire_time, json.dumps(value, default=str))
            logger.debug(f"Redis SET successful for key: {key}")
            return True
        except (redis.RedisError, TypeError) as e:
            logger.error(f"Redis SET error for key {key}: {e}")
            return False

    async def delete(self, key: str) -> bool:
        """Delete a key from Redis."""
        if not self.client:
            return False

        try:
            result = await self.client.delete(key)
            return result > 0
        except redis.RedisError as e:
            logger.error(f"Redis DELETE error for key {key}: {e}")
            return False
