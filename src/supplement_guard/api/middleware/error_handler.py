"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from supplement_guard.exceptions import (
    AnalysisError,
    EmptyInputError,
    EmptyResponseError,
    InvalidCredentialError,
    MissingCredentialError,
    QuotaExhaustedError,
    SupplementGuardError,
    TransientServiceError,
)

STATUS_BY_ERROR: dict[type[AnalysisError], int] = {
    EmptyInputError: 422,
    MissingCredentialError: 503,
    InvalidCredentialError: 502,
    QuotaExhaustedError: 429,
    EmptyResponseError: 502,
    TransientServiceError: 502,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(AnalysisError)
    async def handle_analysis_error(request: Request, exc: AnalysisError) -> JSONResponse:
        status = STATUS_BY_ERROR.get(type(exc), 500)
        return JSONResponse(status_code=status, content=exc.to_dict())

    @app.exception_handler(SupplementGuardError)
    async def handle_generic_error(request: Request, exc: SupplementGuardError) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={"error": str(exc), "type": "supplement_guard_error", "guidance": ""},
        )
