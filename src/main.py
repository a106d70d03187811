"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.api.router import get_api_router
from src.core.config import settings
from src.core.database import Database
from src.core.locks import ProgramLockRegistry
from src.core.logging import setup_logging
from src.core.redis import RedisCache
from src.schemas.shared import StatusResponse
from src.services.notification import NotificationEmitter
from src.utils.messages import get_message

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect optional services on startup and release everything on shutdown."""
    setup_logging()
    await app.state.cache.init()
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} started")

    yield

    await app.state.notifier.drain()
    await app.state.cache.close()
    await app.state.database.dispose()
    logger.info(f"{settings.PROJECT_NAME} stopped")


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Report store failures that escaped the services as retryable."""
    logger.error(f"Unhandled database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=503,
        content={"detail": get_message("infrastructure", "unavailable")},
        headers={"Retry-After": "1"},
    )


def create_app(database: Optional[Database] = None, cache: Optional[RedisCache] = None) -> FastAPI:
    """Build the application with its shared resources on ``app.state``."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.state.database = database or Database(settings.DATABASE_URI, echo=settings.SQL_ECHO)
    app.state.cache = cache or RedisCache()
    app.state.program_locks = ProgramLockRegistry()
    app.state.notifier = NotificationEmitter(app.state.database)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS_LIST,
        allow_credentials=True,
        allow_methods=settings.CORS_METHODS_LIST,
        allow_headers=settings.CORS_HEADERS_LIST,
    )

    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.include_router(get_api_router(), prefix=settings.API_V1_STR)

    @app.get("/health", response_model=StatusResponse, tags=["Health"])
    async def health(request: Request):
        database_ok = await request.app.state.database.ping()
        return StatusResponse(
            status="ok" if database_ok else "degraded",
            version=settings.VERSION,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    return app


app = create_app()
