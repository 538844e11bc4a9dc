"""Key-value backend on a single SQL table, via SQLAlchemy async sessions."""

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from sitecms.application.interfaces import KVBackend
from sitecms.infrastructure.database import Base, KVEntryModel, create_engine, create_session_factory

logger = logging.getLogger(__name__)


class SQLAlchemyKVBackend(KVBackend):
    """Implements the KVBackend port on the ``kv_entries`` table.

    Each call runs in its own session and transaction, matching the
    one-request-one-unit-of-work model of the rest of the store.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
    ):
        self._engine = engine
        self._session_factory = session_factory or create_session_factory(engine)

    @classmethod
    def from_url(cls, url: str, *, echo: bool = False) -> "SQLAlchemyKVBackend":
        return cls(create_engine(url, echo=echo))

    @property
    def name(self) -> str:
        return f"sql:{self._engine.dialect.name}"

    async def create_tables(self) -> None:
        """Create the ``kv_entries`` table if it does not yet exist."""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.debug("Ensured kv_entries table exists")

    async def get(self, key: str) -> str | None:
        async with self._session_factory() as session:
            model = await session.get(KVEntryModel, key)
            return model.value if model else None

    async def put(self, key: str, value: str) -> None:
        async with self._session_factory() as session:
            try:
                model = await session.get(KVEntryModel, key)
                if model is None:
                    session.add(KVEntryModel(key=key, value=value))
                else:
                    model.value = value
                    model.updated_at = datetime.now(timezone.utc)
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def close(self) -> None:
        await self._engine.dispose()
