"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from askboard.config import Settings
from askboard.interface.api.errors import register_exception_handlers
from askboard.interface.api.request_id import REQUEST_ID_HEADER, RequestIDMiddleware
from askboard.interface.api.routes import (
    answers,
    auth,
    health,
    questions,
    stats,
    tags,
    votes,
)
from askboard.util.di.container import create_container, setup_di
from askboard.util.logging import setup_logging
from askboard.util.observability import instrument_fastapi

API_PREFIX = "/api"


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container to use; the production container when omitted

    Returns:
        Configured application
    """
    settings = Settings()
    setup_logging(settings)

    app_instance = FastAPI(
        title="Askboard API",
        description="Backend API for Askboard - a question and answer forum",
        version=settings.version,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(RequestIDMiddleware)
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            REQUEST_ID_HEADER,
        ],
        expose_headers=["Content-Length", "Content-Type", REQUEST_ID_HEADER],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_exception_handlers(app_instance)

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router, prefix=API_PREFIX)
    app_instance.include_router(questions.router, prefix=API_PREFIX)
    app_instance.include_router(answers.router, prefix=API_PREFIX)
    app_instance.include_router(votes.router, prefix=API_PREFIX)
    app_instance.include_router(tags.router, prefix=API_PREFIX)
    app_instance.include_router(stats.router, prefix=API_PREFIX)

    return app_instance
