"""Key-value backend on Redis, via ``redis.asyncio``."""

import logging

import redis.asyncio as redis
from redis.asyncio import Redis

from sitecms.application.interfaces import KVBackend

logger = logging.getLogger(__name__)


class RedisKVBackend(KVBackend):
    """Implements the KVBackend port with plain GET/SET on a Redis server."""

    def __init__(self, client: Redis, prefix: str = ""):
        self._client = client
        self._prefix = prefix

    @classmethod
    def from_url(
        cls,
        url: str,
        prefix: str = "",
        socket_timeout: int = 5,
        socket_connect_timeout: int = 5,
    ) -> "RedisKVBackend":
        client = redis.from_url(
            url,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_connect_timeout,
            decode_responses=True,
            encoding="utf-8",
        )
        logger.info("Redis KV backend configured at %s", url.split("@")[-1])
        return cls(client, prefix=prefix)

    @property
    def name(self) -> str:
        return "redis"

    def _make_key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> str | None:
        value = await self._client.get(self._make_key(key))
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def put(self, key: str, value: str) -> None:
        await self._client.set(self._make_key(key), value)

    async def close(self) -> None:
        await self._client.aclose()
