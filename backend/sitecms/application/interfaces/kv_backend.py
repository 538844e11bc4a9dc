"""Abstract key-value backend interface (port) for the site document."""

from abc import ABC, abstractmethod


class KVBackend(ABC):
    """Port for raw string storage by key: implemented in the infrastructure layer."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short backend name used in logs and the health endpoint."""
        ...

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""
        ...

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, overwriting any previous value."""
        ...

    async def close(self) -> None:
        """Release connections. Optional for backends without resources."""
        return None
