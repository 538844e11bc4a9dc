"""End-to-end tests for the whole-document endpoints."""

import json

import pytest
from httpx import ASGITransport, AsyncClient

BASE_URL = "http://testserver"


@pytest.mark.asyncio
async def test_get_serves_bundled_default(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL) as client:
        response = await client.get("/api/site-content")

    assert response.status_code == 200
    assert response.headers["Cache-Control"].startswith("public, s-maxage=60")
    document = response.json()["data"]
    assert {"header", "hero", "featuredProducts", "footer"} <= set(document)


@pytest.mark.asyncio
async def test_put_replaces_document_and_section_reads_follow(app, admin_headers, kv_backend):
    document = {
        "hero": {"title": "Nuevo héroe"},
        "featuredProducts": {"title": "Destacados", "items": [{"id": "solo", "title": "Solo"}]},
    }

    async with AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL) as client:
        await client.get("/api/products")
        saved = await client.put("/api/site-content", json=document, headers=admin_headers)
        products = await client.get("/api/products")
        brands = await client.get("/api/brands")

    assert saved.json() == {"success": True}
    assert json.loads(kv_backend.data["site-content"]) == document
    assert [item["id"] for item in products.json()["data"]] == ["solo"]
    # Sections missing from the stored document fall back to the bundled defaults.
    assert [item["id"] for item in brands.json()["data"]] == ["labtech"]


@pytest.mark.asyncio
async def test_put_requires_admin_and_an_object(app, admin_headers):
    async with AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL) as client:
        anonymous = await client.put("/api/site-content", json={})
        not_object = await client.put("/api/site-content", json=["x"], headers=admin_headers)

    assert anonymous.status_code == 401
    assert not_object.status_code == 400
    assert not_object.json()["error"] == "Site content must be a JSON object"


@pytest.mark.asyncio
async def test_reads_are_cached_between_requests(app, kv_backend):
    async with AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL) as client:
        await client.get("/api/site-content")
        await client.get("/api/products")
        await client.get("/api/team")

    assert kv_backend.gets == 1


@pytest.mark.asyncio
async def test_corrupt_document_returns_500(app, kv_backend):
    kv_backend.data["site-content"] = "{not json"

    async with AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL) as client:
        response = await client.get("/api/site-content")

    assert response.status_code == 500
    assert response.json()["success"] is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "document, error",
    [
        ({"featuredProducts": {"items": [{"title": "no id"}, 3]}}, "featuredProducts.items.0: missing 'id'"),
        ({"featuredProducts": {"items": [{"id": "a"}, 3]}}, "featuredProducts.items.1: must be an object"),
        ({"featuredTeam": {"items": [{"id": "a"}, {"id": "a"}]}}, "featuredTeam.items.1: duplicate id 'a'"),
        ({"featuredBrands": ["x"]}, "featuredBrands: must be an object with an 'items' list"),
    ],
)
async def test_put_rejects_malformed_sections(app, admin_headers, kv_backend, document, error):
    async with AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL) as client:
        saved = await client.put("/api/site-content", json=document, headers=admin_headers)
        products = await client.get("/api/products")

    assert saved.status_code == 400
    assert saved.json() == {"success": False, "error": error}
    assert "site-content" not in kv_backend.data
    assert products.status_code == 200
