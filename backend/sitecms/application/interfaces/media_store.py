"""Abstract binary object store interface (port) for uploaded media."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class MediaObject:
    """Listing entry for a stored object."""

    key: str
    size: int
    uploaded: float


class MediaStore(ABC):
    """Port for media persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def put(self, key: str, content: bytes, content_type: str | None = None) -> str:
        """Store ``content`` under ``key`` and return its public URL."""
        ...

    @abstractmethod
    async def get(self, key: str) -> bytes | None:
        """Return the stored bytes, or None if the key does not exist."""
        ...

    @abstractmethod
    async def list(self, prefix: str = "") -> list[MediaObject]:
        """List objects whose key starts with ``prefix``."""
        ...
