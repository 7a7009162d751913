import uuid
from sqlalchemy import Column, String, Boolean, DateTime, func, Text, Uuid
from sqlalchemy.orm import relationship
from slugline.db.session import Base
from slugline.slugs import slugged

@slugged(["name", "city"])
class Venue(Base):
    __tablename__ = "venues"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False, index=True)
    slug = Column(String(64), unique=True, nullable=False, index=True)
    address = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    halls = relationship("Hall", back_populates="venue", cascade="all, delete-orphan")
