"""
FastAPI application for the AI Band Registry service.

This module initializes and configures the FastAPI application that serves
the public submission endpoints and the admin review endpoints.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ai_band_registry.api.endpoints import admin, public
from ai_band_registry.config.settings import Settings, get_settings
from ai_band_registry.core.exceptions import RegistryError
from ai_band_registry.models.dtos import HealthResponse
from ai_band_registry.storage.json_store import SubmissionStore
from ai_band_registry.utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def _resolve_settings(app: FastAPI) -> Settings:
    """Settings as seen by request handlers, honouring dependency overrides."""
    return app.dependency_overrides.get(get_settings, get_settings)()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager for startup and shutdown events.

    Configures logging and makes sure the submissions file exists so the
    first submission does not fail on a fresh deployment.
    """
    settings = _resolve_settings(app)
    setup_logging(settings.LOGGING_CONFIG_PATH)

    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    SubmissionStore(settings.submissions_path).ensure_exists()
    if not settings.ADMIN_TOKEN:
        logger.warning("ADMIN_TOKEN is not set - admin endpoints will reject every request")

    yield

    logger.info("Shutting down application")


async def registry_error_handler(request: Request, exc: RegistryError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 with the same payload shape as other errors."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    logger.info(f"Rejected malformed request to {request.url.path}: {problems}")
    return JSONResponse(status_code=400, content={"error": "Invalid request: " + "; ".join(problems)})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment-derived defaults.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    app_settings = settings or get_settings()

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        description="""Crowd-sourced registry of AI-generated music artists.

        This API provides endpoints for:
        - Submitting suspected AI-generated artists
        - Reading the published AI bands catalog
        - Reviewing submissions (admin, bearer token required)""",
        debug=app_settings.DEBUG,
        lifespan=lifespan,
        docs_url="/docs" if app_settings.DEBUG else None,  # Disable docs in production
        redoc_url="/redoc" if app_settings.DEBUG else None,
        openapi_tags=[
            {"name": "public", "description": "Catalog and submission intake"},
            {"name": "admin", "description": "Submission review"},
            {"name": "health", "description": "Health check and monitoring"},
        ],
    )
    if settings is not None:
        app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS if not app_settings.DEBUG else ["*"],
        allow_methods=app_settings.CORS_ALLOW_METHODS,
        allow_headers=app_settings.CORS_ALLOW_HEADERS,
    )

    app.add_exception_handler(RegistryError, registry_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Include API routers
    app.include_router(public.router, tags=["public"])
    app.include_router(admin.router, prefix="/api/admin", tags=["admin"])

    @app.get("/health", tags=["health"], response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Report service liveness and version."""
        return HealthResponse(
            service=app_settings.APP_NAME,
            version=app_settings.APP_VERSION,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(app, host=_settings.API_HOST, port=_settings.API_PORT)
