from typing import Optional, List
from pydantic import BaseModel, Field, UUID4
from datetime import datetime


# Hall Schemas
class HallBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    screen_type: Optional[str] = None
    capacity: int = Field(..., ge=1)


class HallCreate(HallBase):
    # Left empty to have one generated from the name
    slug: Optional[str] = None


class Hall(HallBase):
    id: UUID4
    venue_id: UUID4
    slug: str
    is_active: bool

    class Config:
        from_attributes = True


# Venue Schemas
class VenueBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    address: Optional[str] = None


class VenueCreate(VenueBase):
    slug: Optional[str] = None


class VenueUpdate(BaseModel):
    name: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    slug: Optional[str] = None
    # Rebuild the slug from the (updated) name and city
    regenerate_slug: bool = False


class Venue(VenueBase):
    id: UUID4
    slug: str
    is_active: bool
    created_at: Optional[datetime] = None
    halls: List[Hall] = []

    class Config:
        from_attributes = True


# Compact venue for list responses
class VenueSummary(BaseModel):
    id: UUID4
    name: str
    city: str
    slug: str

    class Config:
        from_attributes = True
