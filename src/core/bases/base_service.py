import logging
from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import Any, AsyncGenerator, Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.core import exceptions
from src.core.bases.base_repository import RepositoryError

logger = logging.getLogger(__name__)

# Session of the transaction currently open in this task, if any
_current_session: ContextVar[Optional[AsyncSession]] = ContextVar(
    "current_session", default=None
)


class BaseService:
    """Base class for services whose public methods each run in one transaction.

    The outermost ``transaction()`` opens a session, commits when the block
    finishes and rolls back when anything propagates out of it. A service
    called from inside another service's transaction joins that transaction
    instead of opening its own.
    """

    def __init__(self, get_session: Callable[..., Any]):
        self.get_session = get_session

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession, None]:
        session = _current_session.get()
        if session is not None:
            yield session
            return

        async with self.get_session() as session:
            token = _current_session.set(session)
            try:
                yield session
                await session.commit()
            except (RepositoryError, SQLAlchemyError) as e:
                await session.rollback()
                logger.error("Transaction rolled back: %s", e)
                raise exceptions.ServiceException(
                    f"Database operation failed in {self.__class__.__name__}"
                ) from e
            except Exception:
                await session.rollback()
                raise
            finally:
                _current_session.reset(token)
