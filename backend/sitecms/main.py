"""FastAPI application factory."""

import logging
import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sitecms.application.interfaces import KVBackend, MediaStore
from sitecms.config import Settings, get_settings
from sitecms.infrastructure.container import FROM_SETTINGS, Container, build_container
from sitecms.infrastructure.kv import SQLAlchemyKVBackend
from sitecms.infrastructure.logging.log_config import setup_logging
from sitecms.presentation.api.router import router as api_router
from sitecms.presentation.errors import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan. Prepares the KV backend and closes it on shutdown."""
    container: Container = app.state.container
    setup_logging(container.settings)

    # 1. Create the kv_entries table when the document lives in SQL
    if isinstance(container.kv_backend, SQLAlchemyKVBackend):
        await container.kv_backend.create_tables()

    logger.info(
        "Site content API started (env=%s, backend=%s)",
        container.settings.app_env,
        container.document_store.backend_name,
    )

    yield

    # Shutdown
    await container.close()


def create_app(
    settings: Settings | None = None,
    *,
    kv_backend: KVBackend | None | object = FROM_SETTINGS,
    media_store: MediaStore | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    ``kv_backend`` defaults to the backend selected by ``KV_BACKEND_URL``;
    pass ``None`` explicitly to run without one.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.container = build_container(
        settings, kv_backend=kv_backend, media_store=media_store, clock=clock
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sitecms.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
