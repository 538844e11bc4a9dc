"""Fixtures building the app against in-memory storage."""

import base64

import pytest
from fastapi import FastAPI

from sitecms.main import create_app


@pytest.fixture
def app(settings, kv_backend, media_store) -> FastAPI:
    return create_app(settings, kv_backend=kv_backend, media_store=media_store)


@pytest.fixture
def admin_headers(admin_credentials) -> dict[str, str]:
    email, password = admin_credentials
    token = base64.b64encode(f"{email}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}
