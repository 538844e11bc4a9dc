"""Unit tests for DocumentSectionRepository."""

import json

import pytest

from sitecms.domain.exceptions import ItemValidationError
from sitecms.infrastructure.document import DocumentCache, DocumentStore, DocumentStoreClient
from sitecms.infrastructure.repositories import DocumentSectionRepository, SectionRepositoryConfig


def make_store(backend, clock, default_doc: dict | None = None) -> DocumentStore:
    client = DocumentStoreClient(backend, default_doc or {}, key="site-content")
    return DocumentStore(client, DocumentCache(client.load_document, ttl_seconds=60, clock=clock))


def make_repo(store: DocumentStore, section_key: str = "featuredProducts", **config) -> DocumentSectionRepository:
    return DocumentSectionRepository(store, SectionRepositoryConfig(section_key=section_key, **config))


@pytest.fixture
def store(kv_backend, clock) -> DocumentStore:
    return make_store(kv_backend, clock)


# ── Reads ──


@pytest.mark.asyncio
async def test_get_all_returns_default_items_when_section_missing(store):
    repo = make_repo(store, default_items=[{"id": "d1", "title": "Default"}])
    assert await repo.get_all() == [{"id": "d1", "title": "Default"}]


@pytest.mark.asyncio
async def test_get_by_id_absent_returns_none(store):
    repo = make_repo(store)
    assert await repo.get_by_id("nope") is None


# ── Create ──


@pytest.mark.asyncio
async def test_create_then_get_round_trip(store):
    repo = make_repo(store)

    created = await repo.create({"title": "Microscopio X", "description": "d"})

    assert created["id"] == "microscopio-x"
    assert await repo.get_by_id("microscopio-x") == created
    assert created in await repo.get_all()


@pytest.mark.asyncio
async def test_create_keeps_explicit_id(store):
    repo = make_repo(store)
    created = await repo.create({"id": "custom", "title": "Whatever"})
    assert created["id"] == "custom"


@pytest.mark.asyncio
async def test_create_rejects_duplicate_explicit_id(store):
    repo = make_repo(store)
    await repo.create({"id": "dup", "title": "One"})

    with pytest.raises(ItemValidationError):
        await repo.create({"id": "dup", "title": "Two"})


@pytest.mark.asyncio
async def test_generated_ids_stay_unique(store):
    repo = make_repo(store)

    first = await repo.create({"title": "Same"})
    second = await repo.create({"title": "Same"})
    third = await repo.create({"title": "Same"})

    assert [first["id"], second["id"], third["id"]] == ["same", "same-2", "same-3"]


@pytest.mark.asyncio
async def test_empty_generated_id_falls_back_to_random(store):
    repo = make_repo(store)
    created = await repo.create({"title": "ñ"})
    assert created["id"].startswith("item-")
    assert len(created["id"]) == len("item-") + 8


@pytest.mark.asyncio
async def test_create_validator_rejects(store, kv_backend):
    repo = make_repo(store, validate_on_create=lambda data: (False, "title is required"))

    with pytest.raises(ItemValidationError, match="title is required"):
        await repo.create({})
    assert kv_backend.puts == 0


@pytest.mark.asyncio
async def test_custom_id_generator(store):
    repo = make_repo(store, id_generator=lambda data: f"sku-{data['sku']}")
    created = await repo.create({"sku": "42"})
    assert created["id"] == "sku-42"


# ── Update ──


@pytest.mark.asyncio
async def test_update_is_a_shallow_merge(store):
    repo = make_repo(store)
    await repo.create({"id": "p1", "title": "T", "description": "D", "features": ["a"]})

    updated = await repo.update("p1", {"features": ["4K"]})

    assert updated == {"id": "p1", "title": "T", "description": "D", "features": ["4K"]}
    assert await repo.get_by_id("p1") == updated


@pytest.mark.asyncio
async def test_update_cannot_change_id(store):
    repo = make_repo(store)
    await repo.create({"id": "p1", "title": "T"})

    updated = await repo.update("p1", {"id": "other", "title": "New"})

    assert updated["id"] == "p1"
    assert await repo.get_by_id("other") is None


@pytest.mark.asyncio
async def test_update_absent_returns_none_without_write(store, kv_backend):
    repo = make_repo(store)
    assert await repo.update("missing", {"title": "x"}) is None
    assert kv_backend.puts == 0


# ── Delete ──


@pytest.mark.asyncio
async def test_delete_absent_is_idempotent(store, kv_backend):
    repo = make_repo(store)
    await repo.create({"id": "keep", "title": "Keep"})
    writes = kv_backend.puts
    before = await repo.get_all()

    assert await repo.delete("never-existed") is False
    assert await repo.get_all() == before
    assert kv_backend.puts == writes


@pytest.mark.asyncio
async def test_delete_removes_item(store):
    repo = make_repo(store)
    await repo.create({"id": "gone", "title": "Gone"})

    assert await repo.delete("gone") is True
    assert await repo.get_by_id("gone") is None


# ── Isolation, caching and fallback ──


@pytest.mark.asyncio
async def test_sections_are_isolated(store, kv_backend):
    kv_backend.data["site-content"] = json.dumps(
        {"featuredBrands": {"title": "B", "items": [{"id": "b1", "name": "Brand"}]}}
    )
    products = make_repo(store, "featuredProducts")
    brands = make_repo(store, "featuredBrands")
    brands_before = await brands.get_all()

    await products.create({"title": "Product"})
    await products.update("product", {"title": "Renamed"})
    await products.delete("product")

    assert await brands.get_all() == brands_before
    saved = json.loads(kv_backend.data["site-content"])
    assert saved["featuredBrands"]["title"] == "B"


@pytest.mark.asyncio
async def test_write_visible_before_ttl(store, clock):
    repo = make_repo(store)
    await repo.get_all()

    await repo.create({"id": "fresh", "title": "Fresh"})
    clock.advance(1)

    assert await repo.get_by_id("fresh") is not None


@pytest.mark.asyncio
async def test_backend_absent_falls_back_and_accepts_writes(clock):
    store = make_store(None, clock, {"featuredProducts": {"items": [{"id": "d1"}]}})
    repo = make_repo(store)

    assert repo.persistent is False
    assert await repo.get_all() == [{"id": "d1"}]

    created = await repo.create({"title": "Not Stored"})
    assert created["id"] == "not-stored"
    assert await repo.get_all() == [{"id": "d1"}]
