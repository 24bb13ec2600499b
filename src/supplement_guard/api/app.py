"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI

from supplement_guard.api.middleware.error_handler import register_error_handlers
from supplement_guard.api.routes import analyze, health
from supplement_guard.config import APIConfig, AppSettings
from supplement_guard.logging_config import setup_logging
from supplement_guard.pipeline import AnalysisPipeline
from supplement_guard.providers.generation.protocols import IGenerationClient
from supplement_guard.startup_checks import validate_settings


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("supplement-guard")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


def create_app(
    settings: Optional[AppSettings] = None,
    *,
    client: Optional[IGenerationClient] = None,
) -> FastAPI:
    """Build the app; *settings* and *client* are resolved at startup when omitted."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        resolved = settings or AppSettings()
        validate_settings(resolved)
        setup_logging(resolved.observability)

        app.state.settings = resolved
        app.state.pipeline = AnalysisPipeline(resolved, client=client)
        yield

    api_config = settings.api if settings else APIConfig()
    app = FastAPI(
        title=api_config.title,
        description=api_config.description,
        version=_get_version(),
        lifespan=lifespan,
    )
    register_error_handlers(app)
    app.include_router(health.router)
    app.include_router(analyze.router, prefix="/api")
    return app


app = create_app()
