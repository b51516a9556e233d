from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from pathlib import Path
import logging

from contact_backend.config import Config
from .database import Base


class BaseDatabaseManager:
    def __init__(self, config: Config):
        self.config = config
        self.engine: AsyncEngine | None = None
        self.session_factory: async_sessionmaker[AsyncSession] | None = None
        self._logger = logging.getLogger(__name__)

    async def initialize(self):
        raise NotImplementedError()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        if not self.engine:
            await self.initialize()

        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_tables(self):
        if not self.engine:
            await self.initialize()

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self):
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None


class DatabaseManager(BaseDatabaseManager):
    def get_url(self) -> str | URL:
        """
        Picks the database URL: explicit URL, then PostgreSQL, then SQLite
        :return:
        """
        db = self.config.db
        if db.url:
            return db.url

        if db.host:
            return URL.create(
                "postgresql+asyncpg",
                username=db.user,
                password=db.password,
                host=db.host,
                port=db.port,
                database=db.name,
            )

        Path(db.path).parent.mkdir(parents=True, exist_ok=True)
        return f"sqlite+aiosqlite:///{db.path}"

    async def initialize(self):
        url = self.get_url()
        options = {"pool_pre_ping": True, "echo": False}
        if not str(url).startswith("sqlite"):
            options.update(pool_size=10, max_overflow=20, pool_timeout=60)

        self.engine = create_async_engine(url, **options)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self._logger.debug("Database engine initialized for %s", self.engine.url.render_as_string(hide_password=True))
