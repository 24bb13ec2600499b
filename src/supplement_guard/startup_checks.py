"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from supplement_guard.exceptions import ConfigurationError

if TYPE_CHECKING:
    from supplement_guard.config import AppSettings

log = logging.getLogger(__name__)


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ConfigurationError on fatal misconfig."""
    _check_sampling(settings)
    _check_model(settings)
    _check_api_key(settings)


def _check_sampling(settings: AppSettings) -> None:
    if not 0.0 <= settings.llm.temperature <= 1.0:
        raise ConfigurationError(
            f"SUPPLEMENT_GUARD_LLM_TEMPERATURE must be within [0, 1], got {settings.llm.temperature}"
        )
    if not 0.0 < settings.llm.top_p <= 1.0:
        raise ConfigurationError(
            f"SUPPLEMENT_GUARD_LLM_TOP_P must be within (0, 1], got {settings.llm.top_p}"
        )
    if settings.llm.timeout is not None and settings.llm.timeout <= 0:
        raise ConfigurationError("SUPPLEMENT_GUARD_LLM_TIMEOUT must be positive when set")


def _check_model(settings: AppSettings) -> None:
    if not settings.llm.model.strip():
        raise ConfigurationError("SUPPLEMENT_GUARD_LLM_MODEL must not be empty")


def _check_api_key(settings: AppSettings) -> None:
    """A missing key is not fatal: analyses fail fast with MissingCredentialError."""
    if not settings.credential_present:
        log.warning(
            "No API key configured. Set SUPPLEMENT_GUARD_LLM_API_KEY or GEMINI_API_KEY; "
            "analysis requests will be rejected until then."
        )
