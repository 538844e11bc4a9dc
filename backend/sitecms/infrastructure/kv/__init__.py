"""Key-value backend adapters and URL-based selection."""

from sitecms.application.interfaces import KVBackend

from .redis_backend import RedisKVBackend
from .sql_backend import SQLAlchemyKVBackend

_REDIS_SCHEMES = ("redis://", "rediss://", "unix://")
_SQL_SCHEMES = ("sqlite", "postgresql")


def build_kv_backend(url: str, *, echo_sql: bool = False) -> KVBackend | None:
    """Select a backend from ``url``; an empty URL means no backend."""
    url = url.strip()
    if not url:
        return None
    if url.startswith(_REDIS_SCHEMES):
        return RedisKVBackend.from_url(url)
    if url.split(":", 1)[0].split("+", 1)[0] in _SQL_SCHEMES:
        return SQLAlchemyKVBackend.from_url(url, echo=echo_sql)
    raise ValueError(f"Unsupported KV backend URL scheme: {url.split(':', 1)[0]!r}")


__all__ = ["RedisKVBackend", "SQLAlchemyKVBackend", "build_kv_backend"]
