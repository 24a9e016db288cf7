"""Post service."""

import logging
from typing import Any, Callable, List

from src.core.bases.base_service import BaseService
from src.core.config import settings
from src.apps.blog.exceptions import PostNotFound
from src.apps.blog.models.post import Post
from src.apps.blog.repositories.post_repository import PostRepository
from src.apps.blog.schemas.post import PostCreate, PostRead, PostUpdate
from src.apps.blog.services.category_service import CategoryService

logger = logging.getLogger(__name__)


class PostService(BaseService):
    """Post service class."""

    def __init__(self, get_session: Callable[..., Any], category_service: CategoryService):
        super().__init__(get_session)
        self.category_service = category_service

    async def create_post(self, post_in: PostCreate) -> PostRead:
        if post_in.category_id is None:
            # Outside the post transaction so a lost creation race can be retried
            await self.category_service.ensure_default_category()
        async with self.transaction() as session:
            category = await self.category_service.get_categories_by_post(post_in)
            post = await PostRepository(session).create(
                {
                    "category_id": category.id,
                    "title": post_in.title,
                    "content": post_in.content,
                }
            )
            logger.info("Post created: %s", post.title, extra={"post_id": post.id})
            return PostRead.model_validate(post)

    async def edit_post(self, post_id: int, post_in: PostUpdate) -> PostRead:
        """Overwrite title and content of an active post.

        The post moves to another category only when ``category_id`` is given.
        """
        async with self.transaction() as session:
            repository = PostRepository(session)
            post = await self._get_or_raise(repository, post_id, is_deleted=False)

            changes = {"title": post_in.title, "content": post_in.content}
            if post_in.category_id is not None:
                category = await self.category_service.get_categories_by_post(post_in)
                changes["category_id"] = category.id

            post = await repository.update(post, changes)
            logger.info("Post edited", extra={"post_id": post_id})
            return PostRead.model_validate(post)

    async def view_posts(self, is_deleted: bool) -> List[PostRead]:
        async with self.transaction() as session:
            posts = await PostRepository(session).get_many_by_state(is_deleted)
            return [PostRead.model_validate(p) for p in posts]

    async def view_posts_by_category(self, category_id: int, is_deleted: bool) -> List[PostRead]:
        async with self.transaction() as session:
            posts = await PostRepository(session).get_many_by_state(
                is_deleted, category_id=category_id
            )
            return [PostRead.model_validate(p) for p in posts]

    async def view_post_detail(self, post_id: int, is_deleted: bool) -> PostRead:
        """Return one post and count the read.

        The increment is a plain read-modify-write; two concurrent readers of
        the same post can lose one update under the store's default isolation.
        """
        async with self.transaction() as session:
            repository = PostRepository(session)
            post = await self._get_or_raise(repository, post_id, is_deleted=is_deleted)
            post = await repository.update(post, {"view": post.view + 1})
            return PostRead.model_validate(post)

    async def delete_post_by_id(self, post_id: int) -> None:
        """Soft delete: stamp ``deleted_at`` and keep the row."""
        async with self.transaction() as session:
            repository = PostRepository(session)
            post = await self._get_or_raise(repository, post_id, is_deleted=False)
            await repository.update(post, {"deleted_at": settings.get_now()})
            logger.info("Post soft deleted", extra={"post_id": post_id})

    @staticmethod
    async def _get_or_raise(repository: PostRepository, post_id: int, is_deleted: bool) -> Post:
        post = await repository.get_by_state(post_id, is_deleted)
        if post is None:
            raise PostNotFound(post_id)
        return post
