"""Blog domain errors."""

from src.core.exceptions import ConflictException, NotFoundException


class PostNotFound(NotFoundException):
    def __init__(self, post_id=None):
        detail = "Post not found" if post_id is None else f"Post {post_id} not found"
        super().__init__(detail)
        self.post_id = post_id


class CategoryNotFound(NotFoundException):
    def __init__(self, category_id=None):
        detail = (
            "Category not found"
            if category_id is None
            else f"Category {category_id} not found"
        )
        super().__init__(detail)
        self.category_id = category_id


class NonEmptyCategory(ConflictException):
    """Raised when deleting a category that still holds active posts."""

    def __init__(self, category_id=None):
        super().__init__(f"Category {category_id} still has active posts")
        self.category_id = category_id
