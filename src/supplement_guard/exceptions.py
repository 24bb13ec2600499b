"""Exception hierarchy for supplement-guard.

``AnalysisError`` subclasses form the closed taxonomy surfaced by
``analyze()``.  Each carries a stable ``kind`` code and caller guidance so
that UIs can react without inspecting transport error text.
"""

from __future__ import annotations


class SupplementGuardError(Exception):
    """Base exception for all supplement-guard errors."""


class ConfigurationError(SupplementGuardError):
    """Raised at startup when settings are unusable."""


class AnalysisInProgressError(SupplementGuardError):
    """A session already has an analysis in flight."""


class AnalysisError(SupplementGuardError):
    """Base for classified analysis failures."""

    kind: str = "analysis_error"
    guidance: str = "The analysis failed. Please try again."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.guidance)
        self.message = message or self.guidance

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "type": self.kind, "guidance": self.guidance}


class EmptyInputError(AnalysisError):
    """The item set was empty at call time."""

    kind = "empty_input"
    guidance = "Add at least one medication or supplement to analyze."


class MissingCredentialError(AnalysisError):
    """No API credential is configured; no network call was attempted."""

    kind = "missing_credential"
    guidance = (
        "No API key is configured. Set SUPPLEMENT_GUARD_LLM_API_KEY "
        "(or GEMINI_API_KEY) and try again."
    )


class InvalidCredentialError(AnalysisError):
    """The service rejected the credential or the selected model."""

    kind = "invalid_credential"
    guidance = (
        "The configured API key or model is no longer usable. "
        "Select a different key or model."
    )


class QuotaExhaustedError(AnalysisError):
    """Rate or quota limit reached."""

    kind = "quota_exhausted"
    guidance = "The usage quota is exhausted. Please try again later."


class EmptyResponseError(AnalysisError):
    """The service succeeded but returned no usable text."""

    kind = "empty_response"
    guidance = "The analysis service returned an empty report. Please try again."


class TransientServiceError(AnalysisError):
    """Any other failure; the original message is passed through."""

    kind = "transient_service_error"
    guidance = "The analysis service had a temporary problem. Please try again."


ANALYSIS_ERRORS: tuple[type[AnalysisError], ...] = (
    EmptyInputError,
    MissingCredentialError,
    InvalidCredentialError,
    QuotaExhaustedError,
    EmptyResponseError,
    TransientServiceError,
)

__all__ = [
    "SupplementGuardError",
    "ConfigurationError",
    "AnalysisInProgressError",
    "AnalysisError",
    "EmptyInputError",
    "MissingCredentialError",
    "InvalidCredentialError",
    "QuotaExhaustedError",
    "EmptyResponseError",
    "TransientServiceError",
    "ANALYSIS_ERRORS",
]
