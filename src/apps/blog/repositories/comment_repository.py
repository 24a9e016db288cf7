"""Comment repository."""

from src.core.bases.base_repository import BaseRepository
from src.apps.blog.models.comment import Comment


class CommentRepository(BaseRepository[Comment]):
    """Comment repository class."""

    model = Comment
