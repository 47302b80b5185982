from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from memberquery.application.errors import ConflictError, NotFoundError, ValidationError
from memberquery.config import settings
from memberquery.infrastructure.db.session import create_schema
from memberquery.infrastructure.logging import configure_logging, get_logger
from memberquery.interfaces.api.v1.router import api_router

logger = get_logger(__name__)

OPENAPI_DESCRIPTION = """
Member and team search API with dynamic filters and count-aware pagination.

How to call this API:
- Filter with any subset of `username`, `team_name`, `age_at_least`, `age_at_most`; blank values are ignored.
- Page with `offset`, `limit`, and repeated `sort=attribute,direction` parameters.
"""

OPENAPI_TAGS = [
    {"name": "health", "description": "Service health and connectivity checks."},
    {"name": "members", "description": "Member creation, lookup, search, and paginated search."},
    {"name": "teams", "description": "Team creation."},
]


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    if settings.create_schema_on_startup:
        create_schema()
    logger.info("app_startup", app_name=settings.app_name, version=settings.app_version)
    yield
    logger.info("app_shutdown", app_name=settings.app_name)


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=OPENAPI_DESCRIPTION,
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
)


@app.get("/")
def root():
    return {"message": "Member query environment is running"}


@app.exception_handler(NotFoundError)
async def handle_not_found(_: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(ConflictError)
async def handle_conflict(_: Request, exc: ConflictError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


@app.exception_handler(ValidationError)
async def handle_validation(_: Request, exc: ValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


app.include_router(api_router)
