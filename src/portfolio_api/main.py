# main.py
from dotenv import load_dotenv
load_dotenv()
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn
import logging

from portfolio_api.core.config import Settings, get_settings
from portfolio_api.core.database import create_storage
from portfolio_api.core.exceptions import ApplicationException, DatabaseException
from portfolio_api.db.init_db import initialize_database
from portfolio_api.schemas.common import ErrorResponse
from portfolio_api.api import (
    auth_api_router,
    projects_api_router,
    colleagues_api_router,
    meetings_api_router,
    ideas_api_router,
    notes_api_router,
    career_api_router,
    future_work_api_router,
    deadlines_api_router,
    events_api_router,
    calendar_events_api_router,
    profile_api_router,
    resume_api_router,
    health_api_router,
)

logger = logging.getLogger("MAIN")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    storage = create_storage(settings)
    initialize_database(storage)
    app.state.storage = storage
    logger.info(f"{settings.app_name} ready ({storage.name}, {settings.environment})")
    try:
        yield
    finally:
        storage.dispose()
        logger.info("Storage released")


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as ``{"error": message}`` with the matching status."""

    @app.exception_handler(ApplicationException)
    async def application_exception_handler(request: Request, exc: ApplicationException):
        if isinstance(exc, DatabaseException):
            logger.error(f"{request.method} {request.url.path}: {exc.message} {exc.details}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
        else:
            message = "Invalid request."
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Explicit settings (tests point these at a temporary SQLite
            file); defaults to the cached environment settings

    Storage is opened by the lifespan, not here, so importing this module
    never connects to a database.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)

    app = FastAPI(
        title=settings.app_name,
        lifespan=lifespan,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(health_api_router)
    app.include_router(auth_api_router)
    app.include_router(projects_api_router)
    app.include_router(colleagues_api_router)
    app.include_router(meetings_api_router)
    app.include_router(ideas_api_router)
    app.include_router(notes_api_router)
    app.include_router(career_api_router)
    app.include_router(future_work_api_router)
    app.include_router(deadlines_api_router)
    app.include_router(events_api_router)
    app.include_router(calendar_events_api_router)
    app.include_router(profile_api_router)
    app.include_router(resume_api_router)

    @app.get("/")
    async def root():
        return {"message": f"Welcome to the {settings.app_name}"}

    return app


app = create_app()

if __name__ == "__main__":
    settings = get_settings()

    if settings.is_production:
        # Production: Multiple workers, no reload
        uvicorn.run("portfolio_api.main:app", host=settings.host, port=settings.port, workers=4)
    else:
        # Development: Single worker with hot reload
        # Note: reload=True is incompatible with workers > 1
        uvicorn.run("portfolio_api.main:app", host=settings.host, port=settings.port, reload=True)
