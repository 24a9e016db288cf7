"""Comment service."""

import logging
from typing import List

from src.core.bases.base_service import BaseService
from src.apps.blog.exceptions import PostNotFound
from src.apps.blog.repositories.comment_repository import CommentRepository
from src.apps.blog.repositories.post_repository import PostRepository
from src.apps.blog.schemas.comment import CommentRead

logger = logging.getLogger(__name__)


class CommentService(BaseService):
    """Comments can only be added to and listed for active posts."""

    async def add_comment(self, post_id: int, content: str) -> CommentRead:
        async with self.transaction() as session:
            await self._ensure_active_post(PostRepository(session), post_id)
            comment = await CommentRepository(session).create(
                {"post_id": post_id, "content": content}
            )
            logger.info(
                "Comment added", extra={"post_id": post_id, "comment_id": comment.id}
            )
            return CommentRead.model_validate(comment)

    async def view_comments(self, post_id: int) -> List[CommentRead]:
        async with self.transaction() as session:
            await self._ensure_active_post(PostRepository(session), post_id)
            comments = await CommentRepository(session).get_many(post_id=post_id)
            return [CommentRead.model_validate(c) for c in comments]

    @staticmethod
    async def _ensure_active_post(repository: PostRepository, post_id: int) -> None:
        if await repository.get_by_state(post_id, is_deleted=False) is None:
            raise PostNotFound(post_id)
