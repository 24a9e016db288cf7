"""Category repository."""

from src.core.bases.base_repository import BaseRepository
from src.apps.blog.models.category import Category


class CategoryRepository(BaseRepository[Category]):
    """Category repository class."""

    model = Category
