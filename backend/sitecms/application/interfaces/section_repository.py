"""Abstract repository interface (port) for CRUD on one document section."""

from abc import ABC, abstractmethod

from sitecms.domain.entities import Item


class SectionRepository(ABC):
    """Port for section item persistence: implemented in the infrastructure layer."""

    @property
    @abstractmethod
    def section_key(self) -> str:
        """Name of the array-valued field inside the document."""
        ...

    @property
    @abstractmethod
    def persistent(self) -> bool:
        """Whether writes reach a durable backend."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Item]:
        """Return the section items in display order."""
        ...

    @abstractmethod
    async def get_by_id(self, item_id: str) -> Item | None:
        """Return the item with ``item_id``, or None."""
        ...

    @abstractmethod
    async def create(self, data: Item) -> Item:
        """Append a validated item under a unique id. Returns the created item."""
        ...

    @abstractmethod
    async def update(self, item_id: str, partial: Item) -> Item | None:
        """Shallow-merge ``partial`` onto the item. Returns None if not found."""
        ...

    @abstractmethod
    async def delete(self, item_id: str) -> bool:
        """Remove the item. Returns True if deleted, False if not found."""
        ...
