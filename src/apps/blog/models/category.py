"""Category model."""

from sqlalchemy import Index, text
from sqlmodel import Field
from src.core.database import BaseModel


class Category(BaseModel, table=True):
    """Category model class.

    At most one row carries ``is_default``; the partial unique index enforces it.
    """

    __tablename__ = "blog_categories"  # type: ignore
    __table_args__ = (
        Index(
            "uq_blog_categories_default",
            "is_default",
            unique=True,
            sqlite_where=text("is_default = 1"),
            postgresql_where=text("is_default"),
        ),
    )
    name: str = Field(nullable=False)
    is_default: bool = Field(default=False, nullable=False)
