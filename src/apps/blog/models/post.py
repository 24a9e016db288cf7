"""Post model."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Text
from sqlmodel import Field
from src.core.database import BaseModel


class Post(BaseModel, table=True):
    """Post model class.

    ``deleted_at`` is the soft delete marker: a post is active while it is
    null and hidden from every active query once it is set.
    """

    __tablename__ = "blog_posts"  # type: ignore
    category_id: Optional[int] = Field(
        default=None, foreign_key="blog_categories.id", index=True
    )
    title: str = Field(nullable=False)
    content: str = Field(sa_type=Text, nullable=False)  # type: ignore[call-overload]
    view: int = Field(default=0, nullable=False)
    deleted_at: Optional[datetime] = Field(
        default=None, sa_type=DateTime(timezone=True)  # type: ignore[call-overload]
    )
