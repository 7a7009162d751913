from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from slugline.db.session import get_db
from slugline.models.title import Title, CategoryType
from slugline.schemas.title import TitleCreate, Title as TitleSchema
from slugline.schemas.common import PaginatedResponse
from slugline.slugs import reassign_slug

router = APIRouter(prefix="/titles", tags=["Titles"])


def _get_title_or_404(db: Session, category: CategoryType, slug: str) -> Title:
    title = (
        db.query(Title)
        .filter(Title.category == category, Title.slug == slug, Title.is_active == True)
        .first()
    )
    if not title:
        raise HTTPException(status_code=404, detail="Title not found")
    return title


@router.post("/", response_model=TitleSchema, status_code=status.HTTP_201_CREATED)
def create_title(data: TitleCreate, db: Session = Depends(get_db)):
    title = Title(**data.model_dump())
    db.add(title)
    db.commit()
    db.refresh(title)
    return title


@router.get("/{category}", response_model=PaginatedResponse[TitleSchema])
def list_titles(
    category: CategoryType,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    query = db.query(Title).filter(Title.category == category, Title.is_active == True)
    total = query.count()
    titles = query.order_by(Title.created_at.desc()).offset((page - 1) * limit).limit(limit).all()

    return PaginatedResponse(
        data=titles,
        total=total,
        page=page,
        limit=limit,
        total_pages=-(-total // limit) if total else 0,
    )


@router.get("/{category}/{slug}", response_model=TitleSchema)
def get_title(category: CategoryType, slug: str, db: Session = Depends(get_db)):
    return _get_title_or_404(db, category, slug)


@router.post("/{category}/{slug}/reslug", response_model=TitleSchema)
def reslug_title(category: CategoryType, slug: str, db: Session = Depends(get_db)):
    """Rebuild the slug from the current title text."""
    title = _get_title_or_404(db, category, slug)
    reassign_slug(db, title)
    db.commit()
    db.refresh(title)
    return title
