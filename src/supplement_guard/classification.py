"""Table-driven mapping from raw generation failures to the error taxonomy.

Rules are checked in order and the first match wins.  Substring tables come
from ``ClassifierConfig`` so that transport wording can change without
touching the taxonomy.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Optional

from supplement_guard.config import ClassifierConfig
from supplement_guard.exceptions import (
    AnalysisError,
    InvalidCredentialError,
    MissingCredentialError,
    QuotaExhaustedError,
    TransientServiceError,
)

_STATUS_ATTRS = ("status_code", "status", "code", "http_status")


@dataclass(frozen=True)
class ClassificationRule:
    """Maps a raw failure to ``error_type`` when a pattern or status matches."""

    error_type: type[AnalysisError]
    patterns: tuple[str, ...] = ()
    status_codes: frozenset[int] = field(default_factory=frozenset)

    def matches(self, message: str, status: Optional[int]) -> bool:
        if status is not None and status in self.status_codes:
            return True
        lowered = message.lower()
        return any(p.lower() in lowered for p in self.patterns)


def build_rules(config: ClassifierConfig) -> tuple[ClassificationRule, ...]:
    """Rule table in precedence order."""
    return (
        ClassificationRule(MissingCredentialError, tuple(config.missing_credential_patterns)),
        ClassificationRule(
            InvalidCredentialError,
            tuple(config.rejected_credential_patterns),
            frozenset({401, 403}),
        ),
        ClassificationRule(
            InvalidCredentialError,
            tuple(config.not_found_patterns),
            frozenset({404}),
        ),
        ClassificationRule(
            QuotaExhaustedError,
            tuple(config.quota_patterns),
            frozenset({429}),
        ),
    )


def _status_of(raw_error: BaseException) -> Optional[int]:
    for attr in _STATUS_ATTRS:
        value = getattr(raw_error, attr, None)
        if isinstance(value, bool):
            continue
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.isdigit():
            return int(value)
    return None


class ErrorClassifier:
    """Pure classifier over a raw error's message and status code."""

    def __init__(self, config: Optional[ClassifierConfig] = None) -> None:
        self._rules = build_rules(config or ClassifierConfig())

    @property
    def rules(self) -> tuple[ClassificationRule, ...]:
        return self._rules

    def classify(self, raw_error: BaseException) -> AnalysisError:
        if isinstance(raw_error, AnalysisError):
            return raw_error
        if isinstance(raw_error, asyncio.TimeoutError):
            return TransientServiceError(str(raw_error) or "Generation timed out")

        message = str(raw_error)
        status = _status_of(raw_error)
        for rule in self._rules:
            if rule.matches(message, status):
                return rule.error_type(message or None)

        return TransientServiceError(message or type(raw_error).__name__)


def classify(raw_error: BaseException, config: Optional[ClassifierConfig] = None) -> AnalysisError:
    return ErrorClassifier(config).classify(raw_error)
