from slugline.schemas.common import PaginatedResponse, ErrorResponse, SlugErrorResponse
from slugline.schemas.venue import (
    Venue, VenueCreate, VenueUpdate, VenueSummary,
    Hall, HallCreate,
)
from slugline.schemas.title import Title, TitleCreate
