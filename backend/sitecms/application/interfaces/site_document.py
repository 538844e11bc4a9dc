"""Abstract whole-document access interface (port) for the site document."""

from abc import ABC, abstractmethod

from sitecms.domain.entities import Document


class SiteDocumentStore(ABC):
    """Port for reading and replacing the full site document."""

    @property
    @abstractmethod
    def available(self) -> bool:
        """Whether writes reach a storage backend."""
        ...

    @abstractmethod
    async def read(self) -> Document:
        """Return the current document (the bundled default when none is stored)."""
        ...

    @abstractmethod
    async def replace_document(self, document: Document) -> bool:
        """Overwrite the whole document. Returns False when it was not persisted."""
        ...
