import json
import logging
from typing import Any, Optional
import redis.asyncio as redis
from .config import settings

logger = logging.getLogger(__name__)

class RedisClient:
    """
    Shared redis connection for cached vehicle documents.
    Values are stored as JSON. Read and write failures are logged and
    reported as a miss, so a broken cache never fails a request.
    """

    def __init__(self, url: str, password: Optional[str] = None):
        self.url = url
        self.password = password
        self._client: Optional[redis.Redis] = None

    def is_ready(self) -> bool:
        return self._client is not None

    async def initialize(self) -> None:
        """Connect and ping; on failure the client stays unset."""
        if self._client is not None:
            return
        client = redis.from_url(
            self.url,
            password=self.password,
            decode_responses=True,
            socket_timeout=5.0,
            socket_connect_timeout=5.0,
        )
        try:
            await client.ping()
        except Exception:
            await client.aclose()
            raise
        self._client = client
        logger.info(f"Redis connected to {self.url}")

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Redis connection closed")

    async def get(self, key: str) -> Optional[Any]:
        if self._client is None:
            return None
        try:
            value = await self._client.get(key)
            return None if value is None else json.loads(value)
        except Exception as e:
            logger.warning(f"Redis GET failed for key {key}: {e}")
            return None

    async def set(self, key: str, value: Any, ttl: int) -> bool:
        if self._client is None:
            return False
        try:
            await self._client.setex(key, ttl, json.dumps(value))
            return True
        except Exception as e:
            logger.warning(f"Redis SET failed for key {key}: {e}")
            return False

    async def delete(self, key: str) -> bool:
        if self._client is None:
            return False
        try:
            return await self._client.delete(key) > 0
        except Exception as e:
            logger.warning(f"Redis DELETE failed for key {key}: {e}")
            return False

redis_client = RedisClient(settings.REDIS_URL, password=settings.REDIS_PASSWORD or None)
