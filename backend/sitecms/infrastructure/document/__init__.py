from .document_store import DocumentStore, SectionMutation
from .read_cache import DocumentCache
from .store_client import DocumentStoreClient, load_default_document

__all__ = [
    "DocumentCache",
    "DocumentStore",
    "DocumentStoreClient",
    "SectionMutation",
    "load_default_document",
]
