"""Application container: builds the object graph once per app instance."""

import logging
import time
from dataclasses import dataclass, field

from sitecms.application.interfaces import KVBackend, MediaStore
from sitecms.application.sections import SECTIONS, SectionDefinition
from sitecms.application.services import (
    AdminAuthService,
    FormResponseService,
    SectionService,
    SiteContentService,
    UploadService,
)
from sitecms.config import Settings
from sitecms.infrastructure.document import (
    DocumentCache,
    DocumentStore,
    DocumentStoreClient,
    load_default_document,
)
from sitecms.infrastructure.kv import build_kv_backend
from sitecms.infrastructure.repositories import DocumentSectionRepository, SectionRepositoryConfig
from sitecms.infrastructure.storage.local_media_store import LocalMediaStore

logger = logging.getLogger(__name__)

# Marks "not passed" so that an explicit ``kv_backend=None`` means no backend.
FROM_SETTINGS = object()


@dataclass
class Container:
    """Everything the request handlers need, wired to one document store."""

    settings: Settings
    kv_backend: KVBackend | None
    document_store: DocumentStore
    media_store: MediaStore
    auth: AdminAuthService
    site_content: SiteContentService
    uploads: UploadService
    form_responses: FormResponseService
    sections: dict[str, SectionService] = field(default_factory=dict)

    def section_service(self, path: str) -> SectionService:
        return self.sections[path]

    async def close(self) -> None:
        if self.kv_backend is not None:
            await self.kv_backend.close()


def _section_service(
    definition: SectionDefinition, store: DocumentStore, default_document: dict
) -> SectionService:
    bundled = default_document.get(definition.section_key)
    default_items = bundled.get("items", []) if isinstance(bundled, dict) else []
    repository = DocumentSectionRepository(
        store,
        SectionRepositoryConfig(
            section_key=definition.section_key,
            default_items=default_items,
            id_generator=definition.generate_id,
            validate_on_create=definition.validate_required,
        ),
    )
    return SectionService(definition, repository)


def build_container(
    settings: Settings,
    *,
    kv_backend: KVBackend | None | object = FROM_SETTINGS,
    media_store: MediaStore | None = None,
    clock=time.monotonic,
) -> Container:
    """Wire the backends and every service around one cached document store."""
    if kv_backend is FROM_SETTINGS:
        kv_backend = build_kv_backend(
            settings.kv_backend_url, echo_sql=settings.log_level_sql.upper() == "DEBUG"
        )

    default_document = load_default_document(settings.default_content_file)
    client = DocumentStoreClient(kv_backend, default_document, key=settings.document_key)
    cache = DocumentCache(
        client.load_document,
        ttl_seconds=settings.document_cache_ttl_seconds,
        clock=clock,
    )
    store = DocumentStore(client, cache)

    media_store = media_store or LocalMediaStore(settings.media_dir)

    container = Container(
        settings=settings,
        kv_backend=kv_backend,
        document_store=store,
        media_store=media_store,
        auth=AdminAuthService(
            email=settings.admin_email,
            password=settings.admin_password,
            session_secret=settings.session_secret,
            session_ttl_seconds=settings.admin_session_ttl_seconds,
        ),
        site_content=SiteContentService(store),
        uploads=UploadService(media_store, max_size_bytes=settings.max_upload_size_mb * 1024 * 1024),
        form_responses=FormResponseService(media_store),
        sections={
            definition.path: _section_service(definition, store, default_document)
            for definition in SECTIONS
        },
    )
    logger.info(
        "Container ready: backend=%s, document_key=%s, cache_ttl=%.0fs, sections=%s",
        client.backend_name,
        settings.document_key,
        settings.document_cache_ttl_seconds,
        ", ".join(container.sections),
    )
    return container
