import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlmodel import DateTime, Field, SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.core.config import settings

logger = logging.getLogger(__name__)


class Database:
    """Owns the async engine and hands out sessions bound to it."""

    def __init__(self, db_url: str, echo: bool = False):
        self.url = db_url
        self.engine = create_async_engine(db_url, echo=echo, future=True)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    async def create_all(self) -> None:
        """Create every table registered on the SQLModel metadata."""
        # Table models must be imported before create_all sees them
        import src.shared.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables ensured")

    async def drop_all(self) -> None:
        import src.shared.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)
        logger.info("Database tables dropped")

    async def ping(self) -> bool:
        async with self.get_session() as session:
            await session.exec(select(1))
        return True

    async def disconnect(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, Any]:
        async with self._session_factory() as session:
            yield session


database = Database(settings.ASYNC_DATABASE_URL, echo=settings.DB_ECHO)


class BaseModel(SQLModel):
    """Base model with common fields."""

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(
        default_factory=settings.get_now, sa_type=DateTime(timezone=True)  # type: ignore[call-overload]
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        sa_type=DateTime(timezone=True),  # type: ignore[call-overload]
        sa_column_kwargs={"onupdate": settings.get_now},
    )
