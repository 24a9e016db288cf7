"""Category service."""

import logging
from typing import Any, Callable, List, Optional

from src.core.bases.base_service import BaseService
from src.core.config import settings
from src.core.exceptions import ServiceException
from src.apps.blog.exceptions import CategoryNotFound, NonEmptyCategory
from src.apps.blog.models.category import Category
from src.apps.blog.repositories.category_repository import CategoryRepository
from src.apps.blog.repositories.post_repository import PostRepository
from src.apps.blog.schemas.category import CategoryRead
from src.apps.blog.schemas.post import PostCreate

logger = logging.getLogger(__name__)


class CategoryService(BaseService):
    """Category CRUD plus the rule that only empty categories can be deleted."""

    def __init__(
        self,
        get_session: Callable[..., Any],
        default_category_name: Optional[str] = None,
    ):
        super().__init__(get_session)
        self.default_category_name = (
            default_category_name or settings.DEFAULT_CATEGORY_NAME
        )

    async def create_category(self, name: str) -> CategoryRead:
        async with self.transaction() as session:
            category = await CategoryRepository(session).create({"name": name})
            logger.info(
                "Category created: %s", name, extra={"category_id": category.id}
            )
            return CategoryRead.model_validate(category)

    async def update_category(self, category_id: int, name: str) -> CategoryRead:
        async with self.transaction() as session:
            repository = CategoryRepository(session)
            category = await self._get_or_raise(repository, category_id)
            category = await repository.update(category, {"name": name})
            return CategoryRead.model_validate(category)

    async def get_category(self, category_id: int) -> CategoryRead:
        async with self.transaction() as session:
            category = await self._get_or_raise(CategoryRepository(session), category_id)
            return CategoryRead.model_validate(category)

    async def get_category_all(self) -> List[CategoryRead]:
        async with self.transaction() as session:
            categories = await CategoryRepository(session).get_many()
            return [CategoryRead.model_validate(c) for c in categories]

    async def ensure_default_category(self) -> CategoryRead:
        """Return the default category, creating it if it does not exist yet.

        Called at startup. When two callers race to create it, the unique
        index rejects the second insert and the loser re-reads the winner's row.
        """
        try:
            async with self.transaction() as session:
                category = await self._get_default_category(CategoryRepository(session))
                return CategoryRead.model_validate(category)
        except ServiceException:
            async with self.transaction() as session:
                category = await CategoryRepository(session).get_one(is_default=True)
                if category is None:
                    raise
                return CategoryRead.model_validate(category)

    async def get_categories_by_post(self, post_in: PostCreate) -> CategoryRead:
        """Resolve the category a post should belong to.

        A post without ``category_id`` goes to the default category, which is
        created the first time it is needed.
        """
        async with self.transaction() as session:
            repository = CategoryRepository(session)
            if post_in.category_id is None:
                category = await self._get_default_category(repository)
            else:
                category = await self._get_or_raise(repository, post_in.category_id)
            return CategoryRead.model_validate(category)

    async def delete_category(self, category_id: int) -> None:
        async with self.transaction() as session:
            repository = CategoryRepository(session)
            category = await self._get_or_raise(repository, category_id)
            if await self.has_post_in_category(category_id):
                logger.warning(
                    "Refusing to delete non-empty category",
                    extra={"category_id": category_id},
                )
                raise NonEmptyCategory(category_id)

            # Only soft deleted posts can still point here; keep them, unfiled
            await PostRepository(session).update_where(
                {"category_id": None}, category_id=category_id
            )
            await repository.delete(category)
            logger.info("Category deleted", extra={"category_id": category_id})

    async def has_post_in_category(self, category_id: int) -> bool:
        async with self.transaction() as session:
            return await PostRepository(session).has_active_in_category(category_id)

    async def _get_default_category(self, repository: CategoryRepository) -> Category:
        category = await repository.get_one(is_default=True)
        if category is None:
            category = await repository.create(
                {"name": self.default_category_name, "is_default": True}
            )
            logger.info(
                "Default category created: %s", self.default_category_name,
                extra={"category_id": category.id},
            )
        return category

    @staticmethod
    async def _get_or_raise(repository: CategoryRepository, category_id: int) -> Category:
        category = await repository.get(category_id)
        if category is None:
            raise CategoryNotFound(category_id)
        return category
