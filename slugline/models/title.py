import uuid
import enum
from sqlalchemy import Column, String, Boolean, DateTime, func, Text, Integer, Enum, Uuid, UniqueConstraint
from slugline.db.session import Base
from slugline.slugs import slugged

class CategoryType(str, enum.Enum):
    movies = "movies"
    events = "events"
    restaurants = "restaurants"

@slugged("title", limit_length=64, uniqueness={"scope": ["category"]})
class Title(Base):
    __tablename__ = "titles"
    __table_args__ = (UniqueConstraint("category", "slug", name="uq_titles_category_slug"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    category = Column(Enum(CategoryType, name="category_type"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(80), nullable=False, index=True)
    description = Column(Text, nullable=True)
    duration_minutes = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)
    is_active = Column(Boolean, default=True)
