"""Nested pydantic-settings configuration for the application.

Each sub-config reads its own ``SUPPLEMENT_GUARD_<GROUP>_*`` env vars::

    export SUPPLEMENT_GUARD_LLM_API_KEY=...
    export SUPPLEMENT_GUARD_LLM_MODEL=gemini/gemini-2.5-flash
    export SUPPLEMENT_GUARD_OBSERVABILITY_LOG_LEVEL=DEBUG

The credential also honours ``GEMINI_API_KEY`` and the bare ``API_KEY``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from supplement_guard.models import PromptConfig

# Values that front-end build tooling leaves behind when a key was never set
_PLACEHOLDER_KEYS = frozenset({"", "undefined", "null", "no-key"})


class LLMConfig(BaseSettings):
    """Generation backend configuration.

    Env vars use ``SUPPLEMENT_GUARD_LLM_`` prefix.
    """

    model_config = {"env_prefix": "SUPPLEMENT_GUARD_LLM_", "populate_by_name": True}

    model: str = "gemini/gemini-3-flash-preview"
    api_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "SUPPLEMENT_GUARD_LLM_API_KEY",
            "GEMINI_API_KEY",
            "API_KEY",
        ),
    )
    temperature: float = 0.7
    top_p: float = 0.95
    grounding_enabled: bool = True
    timeout: Optional[float] = None

    @property
    def credential_present(self) -> bool:
        return self.api_key.strip() not in _PLACEHOLDER_KEYS


class ClassifierConfig(BaseSettings):
    """Substring tables used by the error classifier.

    Matching is case-insensitive substring search, so HTTP statuses belong in
    the rules' status codes rather than here.  Env vars use ``SUPPLEMENT_GUARD_CLASSIFIER_``
    prefix and take JSON lists.
    """

    model_config = {"env_prefix": "SUPPLEMENT_GUARD_CLASSIFIER_"}

    missing_credential_patterns: list[str] = [
        "api_key_missing",
        "api key is missing",
        "missing api key",
        "no api key",
        "api key not set",
        "api_key environment variable",
    ]
    rejected_credential_patterns: list[str] = [
        "api_key_invalid",
        "api key not valid",
        "invalid api key",
        "permission denied",
        "requested entity was not found",
    ]
    not_found_patterns: list[str] = ["not found", "not_found", "notfound"]
    quota_patterns: list[str] = [
        "quota",
        "rate limit",
        "ratelimit",
        "resource_exhausted",
        "resource exhausted",
        "too many requests",
    ]


class SessionConfig(BaseSettings):
    """Session defaults.

    Env vars use ``SUPPLEMENT_GUARD_SESSION_`` prefix.
    """

    model_config = {"env_prefix": "SUPPLEMENT_GUARD_SESSION_"}

    default_items: list[str] = ["Aspirin", "Omega-3", "Vitamin E"]


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``SUPPLEMENT_GUARD_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "SUPPLEMENT_GUARD_OBSERVABILITY_"}

    log_level: str = "INFO"
    json_logs: Optional[bool] = None


class APIConfig(BaseSettings):
    """HTTP API configuration.

    Env vars use ``SUPPLEMENT_GUARD_API_`` prefix.
    """

    model_config = {"env_prefix": "SUPPLEMENT_GUARD_API_"}

    title: str = "supplement-guard"
    description: str = "Medication and supplement interaction-risk reports"


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    api: APIConfig = Field(default_factory=APIConfig)

    @property
    def credential_present(self) -> bool:
        return self.llm.credential_present

    def to_prompt_config(self) -> PromptConfig:
        """Snapshot the generation parameters for a single call."""
        return PromptConfig(
            temperature=self.llm.temperature,
            grounding_enabled=self.llm.grounding_enabled,
            model_identifier=self.llm.model,
            top_p=self.llm.top_p,
        )
