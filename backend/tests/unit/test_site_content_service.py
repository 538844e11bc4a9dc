"""Unit tests for SiteContentService over the document port."""

import pytest

from sitecms.application.interfaces import SiteDocumentStore
from sitecms.application.services import NOT_PERSISTED_WARNING, SiteContentService
from sitecms.domain.entities import Document
from sitecms.domain.exceptions import ItemValidationError


class FakeSiteDocumentStore(SiteDocumentStore):
    """In-memory fake document store for unit testing."""

    def __init__(self, available: bool = True):
        self.document: Document = {"hero": {"title": "Hola"}}
        self._available = available

    @property
    def available(self) -> bool:
        return self._available

    async def read(self) -> Document:
        return dict(self.document)

    async def replace_document(self, document: Document) -> bool:
        if not self._available:
            return False
        self.document = document
        return True


@pytest.mark.asyncio
async def test_replace_content_stores_valid_document():
    store = FakeSiteDocumentStore()
    service = SiteContentService(store)
    document = {"featuredClients": {"title": "Clientes", "items": [{"id": "unal", "name": "UNAL"}]}}

    assert await service.replace_content(document) is None
    assert await service.get_content() == document


@pytest.mark.asyncio
async def test_replace_content_warns_without_backend():
    service = SiteContentService(FakeSiteDocumentStore(available=False))
    assert await service.replace_content({"hero": {}}) == NOT_PERSISTED_WARNING


@pytest.mark.asyncio
async def test_replace_content_rejects_items_without_ids():
    store = FakeSiteDocumentStore()
    service = SiteContentService(store)

    with pytest.raises(ItemValidationError, match="featuredProducts.items.1: missing 'id'"):
        await service.replace_content({"featuredProducts": {"items": [{"id": "a"}, {"id": "  "}]}})

    assert store.document == {"hero": {"title": "Hola"}}
