"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe; 200 whenever the process is up."""
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request) -> JSONResponse:
    """Readiness probe.

    Analyses cannot succeed without a credential, so the app reports 503
    until one is configured.
    """
    settings = request.app.state.settings
    if not settings.credential_present:
        return JSONResponse(status_code=503, content={"status": "not_ready", "reason": "missing_credential"})
    return JSONResponse(content={"status": "ready", "model": settings.llm.model})
