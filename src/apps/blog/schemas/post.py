"""Post schemas."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a post."""
    id: Optional[int] = None
    category_id: Optional[int] = None
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)


class PostUpdate(PostCreate):
    """Schema for editing a post; title and content are overwritten."""


class PostRead(BaseModel):
    """Post as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    category_id: Optional[int] = None
    title: str
    content: str
    view: int
    deleted_at: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
