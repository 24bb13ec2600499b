"""Generation backend protocol the pipeline depends on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from supplement_guard.models import PromptConfig, RawGenerationResponse


@runtime_checkable
class IGenerationClient(Protocol):
    """Protocol for text-generation backends.

    Implementations make exactly one outbound call per ``generate`` and let
    transport errors propagate unclassified.
    """

    async def generate(
        self,
        prompt: str,
        config: PromptConfig,
        *,
        api_key: str,
    ) -> RawGenerationResponse:
        """Run a single generation call.

        Args:
            prompt: Fully rendered prompt text.
            config: Model, temperature and grounding settings for this call.
            api_key: Credential passed through to the service.

        Returns:
            RawGenerationResponse with text (possibly empty) and citations.
        """
        ...
