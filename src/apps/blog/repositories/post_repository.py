"""Post repository."""

from typing import Any, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from src.core.bases.base_repository import BaseRepository
from src.apps.blog.models.post import Post


class PostRepository(BaseRepository[Post]):
    """Post repository class."""

    model = Post

    def _build_state_stmt(self, is_deleted: bool, **filters) -> Any:
        stmt = self._build_select_stmt(**filters)
        if is_deleted:
            return stmt.where(Post.deleted_at.is_not(None))  # type: ignore[union-attr]
        return stmt.where(Post.deleted_at.is_(None))  # type: ignore[union-attr]

    async def get_by_state(self, post_id: int, is_deleted: bool) -> Optional[Post]:
        """Get a post only if its deletion state matches ``is_deleted``."""
        try:
            stmt = self._build_state_stmt(is_deleted).where(Post.id == post_id)
            result = await self.session.exec(stmt)
            return result.first()
        except SQLAlchemyError as e:
            self._handle_db_error(e, "get_by_state")

    async def get_many_by_state(self, is_deleted: bool, **filters) -> List[Post]:  # type:ignore
        try:
            result = await self.session.exec(
                self._build_state_stmt(is_deleted, **filters)
            )
            return list(result.all())
        except SQLAlchemyError as e:
            self._handle_db_error(e, "get_many_by_state")

    async def has_active_in_category(self, category_id: int) -> bool:  # type:ignore
        try:
            stmt = self._build_state_stmt(False, category_id=category_id).limit(1)
            result = await self.session.exec(stmt)
            return result.first() is not None
        except SQLAlchemyError as e:
            self._handle_db_error(e, "has_active_in_category")
