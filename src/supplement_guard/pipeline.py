"""Analysis pipeline: items → prompt → generation → parsed report.

``analyze`` is the whole caller-facing surface of the core.  It makes at
most one generation call, never retries, and either returns a complete
``AnalysisResult`` or raises an ``AnalysisError`` subclass.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from supplement_guard.classification import ErrorClassifier
from supplement_guard.config import AppSettings
from supplement_guard.exceptions import (
    AnalysisError,
    EmptyInputError,
    EmptyResponseError,
    MissingCredentialError,
    TransientServiceError,
)
from supplement_guard.items import ItemSet
from supplement_guard.models import AnalysisResult, PromptConfig, RawGenerationResponse
from supplement_guard.prompts.builder import PromptBuilder
from supplement_guard.providers.generation.client import GenerationClient
from supplement_guard.providers.generation.protocols import IGenerationClient
from supplement_guard.report.parser import ReportParser
from supplement_guard.report.sources import extract_sources
from supplement_guard.report.verdict import detect_verdict

log = logging.getLogger(__name__)


async def analyze(
    items: ItemSet,
    credential_present: bool,
    *,
    client: IGenerationClient,
    config: PromptConfig,
    api_key: str = "",
    classifier: Optional[ErrorClassifier] = None,
    timeout: Optional[float] = None,
) -> AnalysisResult:
    """Run one interaction analysis.

    Args:
        items: Items to analyze, in display order.
        credential_present: Whether a usable API credential is configured.
            When False no network call is made.
        client: Generation backend.
        config: Model, temperature and grounding settings for this call.
        api_key: Credential passed through to the backend.
        classifier: Maps raw backend failures to the taxonomy.
        timeout: Optional caller deadline in seconds; expiry is reported as
            ``TransientServiceError``.

    Raises:
        EmptyInputError, MissingCredentialError, InvalidCredentialError,
        QuotaExhaustedError, EmptyResponseError, TransientServiceError.
    """
    if not items:
        raise EmptyInputError()
    if not credential_present:
        raise MissingCredentialError()

    prompt = PromptBuilder().build(items)
    log.info(
        "Starting analysis",
        extra={
            "item_count": len(items),
            "model": config.model_identifier,
            "grounding": config.grounding_enabled,
        },
    )

    response = await _generate_once(
        client, prompt, config, api_key, classifier or ErrorClassifier(), timeout
    )

    if not response.text.strip():
        log.warning("Generation returned no text")
        raise EmptyResponseError()

    blocks = ReportParser().parse(response.text)
    sources = extract_sources(response.citations)
    result = AnalysisResult(blocks=blocks, sources=sources, verdict=detect_verdict(blocks))
    log.info(
        "Analysis complete",
        extra={
            "blocks": len(result.blocks),
            "sources": len(result.sources),
            "verdict": result.verdict.value if result.verdict else None,
        },
    )
    return result


async def _generate_once(
    client: IGenerationClient,
    prompt: str,
    config: PromptConfig,
    api_key: str,
    classifier: ErrorClassifier,
    timeout: Optional[float],
) -> RawGenerationResponse:
    try:
        call = client.generate(prompt, config, api_key=api_key)
        if timeout is None:
            return await call
        return await asyncio.wait_for(call, timeout=timeout)
    except asyncio.TimeoutError as e:
        log.warning("Generation timed out", extra={"timeout": timeout})
        raise TransientServiceError(f"Generation timed out after {timeout}s") from e
    except AnalysisError:
        raise
    except Exception as e:
        classified = classifier.classify(e)
        log.warning(
            "Generation failed",
            extra={"kind": classified.kind, "error_type": type(e).__name__},
        )
        raise classified from e


class AnalysisPipeline:
    """Settings-bound wrapper around ``analyze``."""

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        *,
        client: Optional[IGenerationClient] = None,
        classifier: Optional[ErrorClassifier] = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client or GenerationClient()
        self._classifier = classifier or ErrorClassifier(self._settings.classifier)

    @property
    def settings(self) -> AppSettings:
        return self._settings

    async def analyze(
        self,
        items: ItemSet,
        *,
        config: Optional[PromptConfig] = None,
        timeout: Optional[float] = None,
    ) -> AnalysisResult:
        return await analyze(
            items,
            self._settings.credential_present,
            client=self._client,
            config=config or self._settings.to_prompt_config(),
            api_key=self._settings.llm.api_key,
            classifier=self._classifier,
            timeout=timeout if timeout is not None else self._settings.llm.timeout,
        )
