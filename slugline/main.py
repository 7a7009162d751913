import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from sqlalchemy.exc import IntegrityError

from slugline.db.base import Base
from slugline.db.session import engine
from slugline.core.config import settings
from slugline.api.v1.router import api_router
from slugline.schemas.common import ErrorResponse, SlugErrorResponse
from slugline.slugs import SlugValidationError

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create tables
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)


@app.exception_handler(SlugValidationError)
async def slug_validation_error_handler(request: Request, exc: SlugValidationError):
    body = SlugErrorResponse(
        error="invalid_slug",
        message=exc.first_message,
        field=exc.field,
        errors=exc.messages,
    )
    return JSONResponse(status_code=422, content=body.model_dump())


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    # Two writers raced past the slug check; the unique constraint caught it
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    body = ErrorResponse(error="conflict", message="A record with this slug already exists.")
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=body.model_dump())


app.include_router(api_router, prefix=settings.API_V1_STR)

@app.get("/")
def read_root():
    return {"Hello": "Slugline"}
