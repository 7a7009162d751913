from typing import Optional
from pydantic import BaseModel, Field, UUID4
from datetime import datetime

from slugline.models.title import CategoryType


class TitleBase(BaseModel):
    category: CategoryType
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    duration_minutes: Optional[int] = Field(None, ge=1)


class TitleCreate(TitleBase):
    slug: Optional[str] = None


class Title(TitleBase):
    id: UUID4
    slug: str
    is_active: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
