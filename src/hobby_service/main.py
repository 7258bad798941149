"""Hobby Service - FastAPI Application."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .db.postgres import close_postgres, init_postgres
from .errors import HobbyServiceError
from .routers import admin_router, forum_router, hobbies_router, users_router

logger = logging.getLogger("hobby_service")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")

    await init_postgres()
    logger.info("Connected to PostgreSQL")

    yield

    # Shutdown
    await close_postgres()
    logger.info("Disconnected from PostgreSQL")


async def service_error_handler(request: Request, exc: HobbyServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400, content={"detail": "Invalid request", "errors": errors}
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500, content={"detail": "An unexpected error occurred"}
    )


def create_app() -> FastAPI:
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Hobby Service",
        description="Hobby discovery, recommendations and forums",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(HobbyServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    # Routers
    app.include_router(hobbies_router, prefix="/api")
    app.include_router(forum_router, prefix="/api")
    app.include_router(admin_router, prefix="/api")
    app.include_router(users_router, prefix="/api")

    @app.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "service": settings.service_name,
            "version": settings.service_version,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "hobby_service.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
