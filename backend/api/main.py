"""
FastAPI application for care plan source attribution.

Builds the app, installs CORS and observability middleware, and mounts
the health, attribution, and care plan routers under /api/v1.

Dependencies: fastapi, uvicorn, backend.api, backend.configs, backend.observability
System role: HTTP entry point

Usage:
    python -m backend.api.main
    uvicorn backend.api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.deps.dependencies import get_service_cache
from backend.configs import get_settings
from backend.observability.logger import configure_logging
from backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from . import api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and warm the attribution generator; drop it on shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level)

    cache = get_service_cache()
    generator = cache.attribution_generator
    if not settings.attribution.api_key:
        # Requests still start; each attribution call fails with ConfigurationError
        logger.warning("OPENROUTER_API_KEY is not set; attribution requests will fail")
    logger.info(f"Attribution generator ready (model={generator.model_used})")

    yield

    cache.clear()
    logger.info("Attribution generator released")


def create_app() -> FastAPI:
    """
    Create the FastAPI application.

    Returns:
        FastAPI: App with middleware and /api/v1 routers registered
    """
    app = FastAPI(
        title="Care Plan Source Attribution API",
        description="Maps pharmacist care plan statements to their supporting evidence",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it runs first and the access log line carries the ID
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("backend.api.main:app", host="0.0.0.0", port=8000)
