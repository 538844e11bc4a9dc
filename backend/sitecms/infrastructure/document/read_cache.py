"""Process-local read cache for the site document.

One entry, ``(document, loaded_at)``, valid while ``now - loaded_at < ttl``.
Writes must call ``invalidate()``; there is no cross-process invalidation,
so another instance may serve a stale document for up to ``ttl`` seconds.
"""

import copy
import logging
import time
from collections.abc import Awaitable, Callable

from sitecms.domain.entities import Document

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Loader = Callable[[], Awaitable[Document]]


class DocumentCache:
    """Time-bounded single-entry cache in front of a document loader.

    Usage:
        cache = DocumentCache(client.load_document, ttl_seconds=60)
        doc = await cache.get()
        ...
        cache.invalidate()
    """

    def __init__(
        self,
        loader: Loader,
        ttl_seconds: float = 60.0,
        clock: Clock = time.monotonic,
    ):
        self._loader = loader
        self._ttl = ttl_seconds
        self._clock = clock
        self._document: Document | None = None
        self._loaded_at: float | None = None

        self.hits = 0
        self.misses = 0

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def is_valid(self) -> bool:
        if self._document is None or self._loaded_at is None:
            return False
        return self._clock() - self._loaded_at < self._ttl

    async def get(self) -> Document:
        """Return the cached document, loading it when absent or expired.

        Callers receive a deep copy and may mutate it freely.
        """
        if self.is_valid():
            self.hits += 1
            logger.debug("Document cache HIT (hits=%d, misses=%d)", self.hits, self.misses)
            return copy.deepcopy(self._document)

        self.misses += 1
        logger.debug("Document cache MISS (hits=%d, misses=%d)", self.hits, self.misses)
        document = await self._loader()
        self._document = document
        self._loaded_at = self._clock()
        return copy.deepcopy(document)

    def invalidate(self) -> None:
        """Drop the entry so the next ``get()`` reloads from the backend."""
        if self._document is not None:
            logger.debug("Document cache invalidated")
        self._document = None
        self._loaded_at = None
