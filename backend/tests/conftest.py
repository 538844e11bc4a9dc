"""Shared in-memory fakes for the storage ports."""

import pytest

from sitecms.application.interfaces import KVBackend, MediaObject, MediaStore
from sitecms.config import Settings

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "s3cret-password"


class InMemoryKVBackend(KVBackend):
    """Dict-backed KV backend with switchable failures."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})
        self.gets = 0
        self.puts = 0
        self.fail_gets = False
        self.fail_puts = False
        self.closed = False

    @property
    def name(self) -> str:
        return "memory"

    async def get(self, key: str) -> str | None:
        self.gets += 1
        if self.fail_gets:
            raise ConnectionError("backend unreachable")
        return self.data.get(key)

    async def put(self, key: str, value: str) -> None:
        self.puts += 1
        if self.fail_puts:
            raise ConnectionError("backend unreachable")
        self.data[key] = value

    async def close(self) -> None:
        self.closed = True


class InMemoryMediaStore(MediaStore):
    """Media store keeping objects in a dict; upload times come from a counter."""

    def __init__(self):
        self.objects: dict[str, tuple[bytes, str | None, float]] = {}
        self._tick = 0.0

    async def put(self, key: str, content: bytes, content_type: str | None = None) -> str:
        self._tick += 1.0
        self.objects[key] = (content, content_type, self._tick)
        return f"/api/media/{key}"

    async def get(self, key: str) -> bytes | None:
        entry = self.objects.get(key)
        return entry[0] if entry else None

    async def list(self, prefix: str = "") -> list[MediaObject]:
        return [
            MediaObject(key=key, size=len(content), uploaded=uploaded)
            for key, (content, _, uploaded) in self.objects.items()
            if key.startswith(prefix)
        ]


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def kv_backend() -> InMemoryKVBackend:
    return InMemoryKVBackend()


@pytest.fixture
def media_store() -> InMemoryMediaStore:
    return InMemoryMediaStore()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        app_env="test",
        kv_backend_url="",
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        media_dir=str(tmp_path / "media"),
    )


@pytest.fixture
def admin_credentials() -> tuple[str, str]:
    return ADMIN_EMAIL, ADMIN_PASSWORD
