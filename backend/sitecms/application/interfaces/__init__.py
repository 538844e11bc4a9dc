from .kv_backend import KVBackend
from .media_store import MediaObject, MediaStore
from .section_repository import SectionRepository
from .site_document import SiteDocumentStore

__all__ = [
    "KVBackend",
    "MediaObject",
    "MediaStore",
    "SectionRepository",
    "SiteDocumentStore",
]
