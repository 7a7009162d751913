from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from slugline.db.session import get_db
from slugline.models.venue import Venue
from slugline.models.hall import Hall
from slugline.schemas.venue import (
    VenueCreate,
    VenueUpdate,
    Venue as VenueSchema,
    VenueSummary,
    HallCreate,
    Hall as HallSchema,
)
from slugline.schemas.common import PaginatedResponse
from slugline.slugs import reassign_slug

router = APIRouter(prefix="/venues", tags=["Venues"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _get_venue_or_404(db: Session, slug: str) -> Venue:
    venue = db.query(Venue).filter(Venue.slug == slug, Venue.is_active == True).first()
    if not venue:
        raise HTTPException(status_code=404, detail="Venue not found")
    return venue


# ---------------------------------------------------------------------------
# Venue CRUD
# ---------------------------------------------------------------------------


@router.post("/", response_model=VenueSchema, status_code=status.HTTP_201_CREATED)
def create_venue(data: VenueCreate, db: Session = Depends(get_db)):
    # The slug is generated on flush when none was supplied
    venue = Venue(**data.model_dump())
    db.add(venue)
    db.commit()
    db.refresh(venue)
    return venue


@router.get("/", response_model=PaginatedResponse[VenueSummary])
def list_venues(
    city: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    query = db.query(Venue).filter(Venue.is_active == True)
    if city:
        query = query.filter(Venue.city.ilike(f"%{city}%"))

    total = query.count()
    venues = query.order_by(Venue.slug).offset((page - 1) * limit).limit(limit).all()

    return PaginatedResponse(
        data=venues,
        total=total,
        page=page,
        limit=limit,
        total_pages=-(-total // limit) if total else 0,
    )


@router.get("/{slug}", response_model=VenueSchema)
def get_venue(slug: str, db: Session = Depends(get_db)):
    return _get_venue_or_404(db, slug)


@router.patch("/{slug}", response_model=VenueSchema)
def update_venue(slug: str, data: VenueUpdate, db: Session = Depends(get_db)):
    """
    Update a venue. Renaming keeps the existing slug so old links stay valid;
    pass `regenerate_slug: true` to rebuild it from the new name and city.
    """
    venue = _get_venue_or_404(db, slug)

    for field, value in data.model_dump(exclude_unset=True, exclude={"regenerate_slug"}).items():
        setattr(venue, field, value)

    if data.regenerate_slug:
        reassign_slug(db, venue)

    db.commit()
    db.refresh(venue)
    return venue


@router.delete("/{slug}", status_code=status.HTTP_200_OK)
def delete_venue(slug: str, db: Session = Depends(get_db)):
    venue = _get_venue_or_404(db, slug)
    venue.is_active = False
    db.commit()
    return {"slug": venue.slug, "is_active": False}


# ---------------------------------------------------------------------------
# Halls (slugs unique per venue)
# ---------------------------------------------------------------------------


@router.post("/{slug}/halls", response_model=HallSchema, status_code=status.HTTP_201_CREATED)
def create_hall(slug: str, data: HallCreate, db: Session = Depends(get_db)):
    venue = _get_venue_or_404(db, slug)
    hall = Hall(**data.model_dump(), venue=venue)
    db.add(hall)
    db.commit()
    db.refresh(hall)
    return hall


@router.get("/{slug}/halls", response_model=List[HallSchema])
def list_halls(slug: str, db: Session = Depends(get_db)):
    venue = _get_venue_or_404(db, slug)
    return (
        db.query(Hall)
        .filter(Hall.venue_id == venue.id, Hall.is_active == True)
        .order_by(Hall.slug)
        .all()
    )


@router.get("/{slug}/halls/{hall_slug}", response_model=HallSchema)
def get_hall(slug: str, hall_slug: str, db: Session = Depends(get_db)):
    venue = _get_venue_or_404(db, slug)
    hall = db.query(Hall).filter(Hall.venue_id == venue.id, Hall.slug == hall_slug).first()
    if not hall:
        raise HTTPException(status_code=404, detail="Hall not found")
    return hall
