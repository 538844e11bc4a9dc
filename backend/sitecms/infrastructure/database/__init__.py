from .base import Base
from .session import create_engine, create_session_factory, get_async_url
from .models import KVEntryModel

__all__ = [
    "Base",
    "create_engine",
    "create_session_factory",
    "get_async_url",
    "KVEntryModel",
]
