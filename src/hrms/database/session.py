"""
Engine and session lifecycle.

The FastAPI lifespan builds one `Database`, keeps it on `app.state.database`
and disposes it at shutdown. Each request gets its own AsyncSession through
`hrms.core.dependencies.get_db_session`.
"""
import logging
from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

logger = logging.getLogger(__name__)


class Database:
    """
    Args:
        url: async SQLAlchemy URL (postgresql+psycopg://..., sqlite+aiosqlite://)
        engine: a prebuilt engine; tests bind one to their own database
        **engine_options: forwarded to create_async_engine (echo, pool_size, ...)
    """

    def __init__(self, url: str | None = None, *, engine: AsyncEngine | None = None, **engine_options: Any):
        if engine is None:
            if url is None:
                raise ValueError("Database needs either a url or an engine")
            engine_options.setdefault("pool_pre_ping", True)
            engine = create_async_engine(url, **engine_options)

        self.engine = engine
        # records are serialized after commit, so attributes must stay loaded
        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.session_factory() as session:
            yield session

    async def dispose(self) -> None:
        logger.info("database.dispose", extra={"dialect": self.dialect})
        await self.engine.dispose()
