#!/usr/bin/env python3
"""
Chirpy API - static file server, admin metrics and the chirp API
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from db_chirpy.database import init_db_pool, close_db_pool
from db_chirpy.queries import ChirpyQueries, MemoryQueries

from .config import Settings, settings as default_settings
from .metrics import HitCounter, MetricsMiddleware
from .routers import admin, chirps, system, users


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database pool on startup and close it on shutdown"""
    logger.info("Starting Chirpy...")
    cfg: Settings = app.state.settings

    if isinstance(app.state.queries, ChirpyQueries):
        try:
            await init_db_pool(cfg.db_url)
            logger.info("Database connection pool initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize database pool: {e}", exc_info=True)
            # Don't raise - the pool is created lazily on the next query

    logger.info(f"Serving files from {cfg.filepath_root} on port {cfg.port}")
    yield

    logger.info("Shutting down Chirpy...")
    try:
        await close_db_pool()
        logger.info("Database connection pool closed")
    except Exception as e:
        logger.error(f"Error during shutdown cleanup: {e}")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "invalid request"},
    )


def create_app(settings: Optional[Settings] = None, queries=None) -> FastAPI:
    """
    Build the Chirpy application.

    Args:
        settings: Configuration, defaults to the environment-backed settings
        queries: Query backend; chosen from settings.db_url when omitted

    Returns:
        Configured FastAPI app
    """
    settings = settings or default_settings

    if queries is None:
        if settings.db_url:
            queries = ChirpyQueries()
        else:
            logger.warning("DB_URL is not set, users and chirps are kept in memory")
            queries = MemoryQueries()

    app = FastAPI(
        title=settings.api_title,
        description="Static file server, admin metrics and the chirp API",
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.queries = queries
    app.state.fileserver_hits = HitCounter()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(system.router)
    app.include_router(admin.router)
    app.include_router(users.router)
    app.include_router(chirps.router)

    if not os.path.isdir(settings.filepath_root):
        logger.error(
            f"FILEPATH_ROOT {settings.filepath_root!r} is not a directory, cannot serve /app/"
        )
        raise RuntimeError(f"Directory '{settings.filepath_root}' does not exist")

    # Every request under /app/ is counted, whatever the outcome
    file_server = StaticFiles(directory=settings.filepath_root, html=True)
    app.mount(
        "/app",
        MetricsMiddleware(file_server, app.state.fileserver_hits),
        name="app",
    )

    return app


app = create_app()
