"""Hard deletion of a post together with its comments."""

import logging

from src.core.bases.base_service import BaseService
from src.apps.blog.exceptions import PostNotFound
from src.apps.blog.repositories.comment_repository import CommentRepository
from src.apps.blog.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


class PostCommentService(BaseService):

    async def delete_post(self, post_id: int) -> int:
        """Remove the post row and every comment it owns.

        Works on active and soft deleted posts alike. Returns the number of
        comments removed.
        """
        async with self.transaction() as session:
            posts = PostRepository(session)
            post = await posts.get(post_id)
            if post is None:
                raise PostNotFound(post_id)

            removed = await CommentRepository(session).delete_where(post_id=post_id)
            await posts.delete(post)
            logger.info(
                "Post hard deleted with %d comment(s)", removed,
                extra={"post_id": post_id},
            )
            return removed
