"""Unit tests for the KV backends and URL-based backend selection."""

import pytest

from sitecms.infrastructure.database.session import get_async_url
from sitecms.infrastructure.kv import RedisKVBackend, SQLAlchemyKVBackend, build_kv_backend


class FakeRedis:
    """Subset of the redis.asyncio client used by RedisKVBackend."""

    def __init__(self, decode: bool = True):
        self.store: dict[str, str | bytes] = {}
        self.decode = decode
        self.closed = False

    async def get(self, key: str):
        return self.store.get(key)

    async def set(self, key: str, value: str):
        self.store[key] = value if self.decode else value.encode("utf-8")
        return True

    async def aclose(self):
        self.closed = True


# ── SQL ──


@pytest.mark.asyncio
async def test_sql_backend_round_trip(tmp_path):
    backend = SQLAlchemyKVBackend.from_url(f"sqlite:///{tmp_path / 'kv.db'}")
    try:
        await backend.create_tables()

        assert await backend.get("site-content") is None
        await backend.put("site-content", '{"a": 1}')
        assert await backend.get("site-content") == '{"a": 1}'

        await backend.put("site-content", '{"a": 2}')
        assert await backend.get("site-content") == '{"a": 2}'
        assert backend.name == "sql:sqlite"
    finally:
        await backend.close()


def test_async_url_conversion():
    assert get_async_url("sqlite:///./site.db") == "sqlite+aiosqlite:///./site.db"
    assert get_async_url("postgresql://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"
    assert get_async_url("sqlite+aiosqlite:///x.db") == "sqlite+aiosqlite:///x.db"


# ── Redis ──


@pytest.mark.asyncio
async def test_redis_backend_get_put_with_prefix():
    client = FakeRedis()
    backend = RedisKVBackend(client, prefix="cms:")

    await backend.put("site-content", "{}")

    assert client.store == {"cms:site-content": "{}"}
    assert await backend.get("site-content") == "{}"
    assert await backend.get("other") is None


@pytest.mark.asyncio
async def test_redis_backend_decodes_bytes():
    backend = RedisKVBackend(FakeRedis(decode=False))
    await backend.put("k", "Ñ")
    assert await backend.get("k") == "Ñ"


@pytest.mark.asyncio
async def test_redis_backend_close():
    client = FakeRedis()
    await RedisKVBackend(client).close()
    assert client.closed is True


# ── Selection ──


def test_build_kv_backend_empty_url_means_none():
    assert build_kv_backend("") is None
    assert build_kv_backend("   ") is None


def test_build_kv_backend_by_scheme(tmp_path):
    assert isinstance(build_kv_backend("redis://localhost:6379/0"), RedisKVBackend)
    assert isinstance(build_kv_backend(f"sqlite:///{tmp_path / 'x.db'}"), SQLAlchemyKVBackend)
    assert isinstance(
        build_kv_backend(f"sqlite+aiosqlite:///{tmp_path / 'y.db'}"), SQLAlchemyKVBackend
    )


def test_build_kv_backend_unknown_scheme():
    with pytest.raises(ValueError, match="memcached"):
        build_kv_backend("memcached://localhost")
