from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
from sqlalchemy import delete as sa_delete, update as sa_update
from sqlmodel import SQLModel, func, select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from pydantic import BaseModel

T = TypeVar("T", bound=SQLModel)


class RepositoryError(Exception):
    """Custom exception for repository errors."""

    pass


class BaseRepository(Generic[T]):
    """Generic CRUD against one table model, bound to one session.

    Repositories never commit: they flush so generated values (ids, defaults)
    are visible, and leave commit/rollback to the service transaction.
    """

    model: Type[T]

    def __init__(self, session: AsyncSession):
        self.session = session

    def _handle_db_error(self, error: SQLAlchemyError, operation: str) -> None:
        """Handle database errors and raise appropriate exceptions."""
        if isinstance(error, IntegrityError):
            raise RepositoryError(
                f"Database integrity error during {operation}: {error}"
            ) from error
        else:
            raise RepositoryError(
                f"Database error during {operation}: {error}"
            ) from error

    def _apply_filters(self, stmt: Any, **filters) -> Any:
        for field, value in filters.items():
            if not hasattr(self.model, field):
                raise RepositoryError(
                    f"{self.model.__name__} has no field '{field}'"
                )
            column = getattr(self.model, field)
            if value is None:
                stmt = stmt.where(column.is_(None))
            else:
                stmt = stmt.where(column == value)
        return stmt

    def _build_select_stmt(self, **filters) -> Any:
        """Build select statement with equality filters, ordered by id."""
        stmt = self._apply_filters(select(self.model), **filters)
        return stmt.order_by(self.model.id)  # type: ignore

    # ----------------- CRUD ----------------- #
    async def get(self, item_id: Any, **filters) -> Optional[T]:
        """Get a single item by ID with optional additional filters."""
        try:
            stmt = self._build_select_stmt(**filters)
            stmt = stmt.where(self.model.id == item_id)  # type: ignore

            result = await self.session.exec(stmt)
            return result.first()
        except SQLAlchemyError as e:
            self._handle_db_error(e, "get")

    async def get_one(self, **filters) -> Optional[T]:
        """Get the first item matching the filters."""
        try:
            result = await self.session.exec(self._build_select_stmt(**filters))
            return result.first()
        except SQLAlchemyError as e:
            self._handle_db_error(e, "get_one")

    async def get_many(self, **filters) -> List[T]:  # type:ignore
        """Get every item matching the filters, in id order."""
        try:
            result = await self.session.exec(self._build_select_stmt(**filters))
            return list(result.all())
        except SQLAlchemyError as e:
            self._handle_db_error(e, "get_many")

    async def create(
        self, obj_in: Union[Dict[str, Any], BaseModel]
    ) -> T:  # type:ignore
        """Create a new item."""
        if isinstance(obj_in, BaseModel):
            obj_in = obj_in.model_dump(exclude_unset=True)

        try:
            obj = self.model(**obj_in)  # type: ignore
            self.session.add(obj)
            await self.session.flush()
            await self.session.refresh(obj)
            return obj
        except SQLAlchemyError as e:
            self._handle_db_error(e, "create")

    async def update(
        self,
        db_obj: T,
        obj_in: Union[Dict[str, Any], BaseModel],
        exclude_unset: bool = True,
    ) -> T:  # type:ignore
        """Write the given fields onto an already loaded item."""
        if isinstance(obj_in, BaseModel):
            update_data = obj_in.model_dump(exclude_unset=exclude_unset)
        else:
            update_data = dict(obj_in)

        # Remove ID from update data to prevent changing primary key
        update_data.pop("id", None)

        if not update_data:
            raise RepositoryError("No data provided for update")

        try:
            for key, value in update_data.items():
                if hasattr(db_obj, key):
                    setattr(db_obj, key, value)

            self.session.add(db_obj)
            await self.session.flush()
            await self.session.refresh(db_obj)
            return db_obj
        except SQLAlchemyError as e:
            self._handle_db_error(e, "update")

    async def exists(self, item_id: Any, **filters) -> bool:  # type:ignore
        """Check if an item exists."""
        try:
            stmt = select(self.model.id).where(self.model.id == item_id)  # type: ignore
            stmt = self._apply_filters(stmt, **filters)

            result = await self.session.exec(stmt)
            return result.first() is not None
        except SQLAlchemyError as e:
            self._handle_db_error(e, "exists")

    async def count(self, **filters) -> int:  # type:ignore
        """Count items matching optional filters."""
        try:
            stmt = self._build_select_stmt(**filters)
            count_stmt = select(func.count()).select_from(stmt.subquery())
            result = await self.session.exec(count_stmt)
            return result.one()
        except SQLAlchemyError as e:
            self._handle_db_error(e, "count")

    # ----------------- DELETE ----------------- #
    async def delete(self, db_obj: T) -> None:
        """Permanently delete a loaded item."""
        try:
            await self.session.delete(db_obj)
            await self.session.flush()
        except SQLAlchemyError as e:
            self._handle_db_error(e, "delete")

    async def delete_where(self, **filters) -> int:  # type:ignore
        """Permanently delete every item matching the filters in one statement."""
        try:
            stmt = self._apply_filters(sa_delete(self.model), **filters)
            result = await self.session.execute(stmt)
            return result.rowcount
        except SQLAlchemyError as e:
            self._handle_db_error(e, "delete_where")

    async def update_where(self, values: Dict[str, Any], **filters) -> int:  # type:ignore
        """Set the given column values on every item matching the filters."""
        try:
            stmt = self._apply_filters(sa_update(self.model), **filters)
            result = await self.session.execute(stmt.values(**values))
            return result.rowcount
        except SQLAlchemyError as e:
            self._handle_db_error(e, "update_where")
