import uuid
from sqlalchemy import Column, String, Boolean, Integer, ForeignKey, Uuid, UniqueConstraint
from sqlalchemy.orm import relationship
from slugline.db.session import Base
from slugline.slugs import slugged

# Hall slugs only need to be unique inside their venue: /venues/pvr-mumbai/halls/audi-1
@slugged("name", uniqueness={"scope": ["venue"]})
class Hall(Base):
    __tablename__ = "halls"
    __table_args__ = (UniqueConstraint("venue_id", "slug", name="uq_halls_venue_slug"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    venue_id = Column(Uuid, ForeignKey("venues.id"), nullable=False)
    name = Column(String(100), nullable=False)
    slug = Column(String(64), nullable=False)
    screen_type = Column(String(50), nullable=True) # nicethave: 'imax', 'regular', etc.
    capacity = Column(Integer, nullable=False)
    is_active = Column(Boolean, default=True)

    # Relationships
    venue = relationship("Venue", back_populates="halls")
