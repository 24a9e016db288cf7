"""Comment model."""

from sqlalchemy import Text
from sqlmodel import Field
from src.core.database import BaseModel


class Comment(BaseModel, table=True):
    """Comment model class."""

    __tablename__ = "blog_comments"  # type: ignore
    post_id: int = Field(
        foreign_key="blog_posts.id", ondelete="CASCADE", index=True
    )
    content: str = Field(sa_type=Text, nullable=False)  # type: ignore[call-overload]
