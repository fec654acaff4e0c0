"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from people_registry.config import get_settings
from people_registry.infrastructure.database import Base, engine, ensure_sqlite_directory
from people_registry.infrastructure.logging.log_config import setup_logging
from people_registry.presentation.api.router import router as api_router
from people_registry.presentation.cors import cors_middleware_options
from people_registry.presentation.middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: prepare the database, then serve."""
    settings = get_settings()
    setup_logging()

    # 1. Make sure a file-backed SQLite database has somewhere to live
    ensure_sqlite_directory(settings.database_url)

    # 2. Create the people table if it does not exist yet
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))

    yield

    # Shutdown
    await engine.dispose()


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed bodies and path params as invalid input (400), not 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    # Middleware (the last added runs first)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CORSMiddleware, **cors_middleware_options(settings.cors_origins))

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "people_registry.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
    )
