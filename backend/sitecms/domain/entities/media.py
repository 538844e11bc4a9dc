"""Domain entity: a stored media object."""

from dataclasses import dataclass


@dataclass
class StoredMedia:
    """Result of storing an uploaded file in the media store."""

    key: str
    url: str
    size: int
    content_type: str
    uploaded_at: float
