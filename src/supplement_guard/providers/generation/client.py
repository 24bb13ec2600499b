"""Async generation client routed through LiteLLM.

Gemini models (``gemini/`` prefix) get Google Search grounding attached when
the call asks for it; LiteLLM surfaces the grounding metadata on the
response, from which the raw citations are read.
"""

from __future__ import annotations

import logging
from typing import Any

from supplement_guard.models import PromptConfig, RawCitation, RawGenerationResponse

log = logging.getLogger(__name__)

GOOGLE_SEARCH_TOOL: dict[str, Any] = {"googleSearch": {}}


class GenerationClient:
    """Single-shot LiteLLM client; no retries, no cached credential.

    Timeouts are applied by the caller around ``generate``.
    """

    async def generate(
        self,
        prompt: str,
        config: PromptConfig,
        *,
        api_key: str,
    ) -> RawGenerationResponse:
        """One completion call returning text plus grounding citations.

        Raw LiteLLM / transport exceptions propagate unchanged so the caller
        can classify them.
        """
        from litellm import acompletion

        kwargs: dict[str, Any] = {
            "model": config.model_identifier,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": config.temperature,
            "top_p": config.top_p,
            "api_key": api_key,
            "num_retries": 0,
        }
        if config.grounding_enabled:
            kwargs["tools"] = [GOOGLE_SEARCH_TOOL]

        response = await acompletion(**kwargs)

        text = _response_text(response)
        citations = extract_raw_citations(response)
        log.debug(
            "Generation finished",
            extra={"model": config.model_identifier, "chars": len(text), "citations": len(citations)},
        )
        return RawGenerationResponse(text=text, citations=citations)


def _response_text(response: Any) -> str:
    choices = getattr(response, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    return content if isinstance(content, str) else ""


def _grounding_metadata(response: Any) -> list[dict[str, Any]]:
    """Collect grounding metadata dicts from wherever LiteLLM put them."""
    metadata = getattr(response, "vertex_ai_grounding_metadata", None)
    if not metadata:
        hidden = getattr(response, "_hidden_params", None)
        if isinstance(hidden, dict):
            metadata = hidden.get("vertex_ai_grounding_metadata")
    if isinstance(metadata, dict):
        return [metadata]
    if isinstance(metadata, list):
        return [m for m in metadata if isinstance(m, dict)]
    return []


def extract_raw_citations(response: Any) -> list[RawCitation]:
    """Flatten ``groundingChunks[].web`` entries into ``RawCitation`` records.

    No filtering or deduplication happens here.
    """
    citations: list[RawCitation] = []
    for metadata in _grounding_metadata(response):
        chunks = metadata.get("groundingChunks") or metadata.get("grounding_chunks") or []
        for chunk in chunks:
            if not isinstance(chunk, dict):
                continue
            web = chunk.get("web")
            if not isinstance(web, dict):
                continue
            title = web.get("title")
            uri = web.get("uri")
            citations.append(
                RawCitation(
                    title=title if isinstance(title, str) else None,
                    uri=uri if isinstance(uri, str) else None,
                )
            )
    return citations
