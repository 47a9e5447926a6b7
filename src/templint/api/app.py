"""FastAPI application factory for templint."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from templint import __version__
from templint.api.deps import init_analyzer, reset_analyzer
from templint.api.middleware import RequestTimingMiddleware, TemplateSizeLimitMiddleware
from templint.api.routers import analyze, directives
from templint.api.schemas import HealthResponse
from templint.service.analyzer import TemplateAnalyzer
from templint.settings import Settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Install the TemplateAnalyzer for the lifetime of the application."""
    init_analyzer(TemplateAnalyzer(app.state.settings))
    try:
        yield
    finally:
        reset_analyzer()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="templint",
        description="Checks mail-merge templates for brace and IF/END IF problems.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(TemplateSizeLimitMiddleware)
    app.add_middleware(RequestTimingMiddleware)

    app.include_router(analyze.router, prefix="/analyze", tags=["analyze"])
    app.include_router(directives.router, prefix="/directives", tags=["directives"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("templint.api")
    logger.info(
        "templint API Server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.api_server_port,
    )

    uvicorn.run(
        "templint.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.api_server_port,
        log_level=settings.log_level.lower(),
    )
