from fastapi import APIRouter

from slugline.api.v1.venues import router as venues_router
from slugline.api.v1.titles import router as titles_router

api_router = APIRouter()

api_router.include_router(venues_router)
api_router.include_router(titles_router)
