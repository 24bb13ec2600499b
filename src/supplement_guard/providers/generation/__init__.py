"""LiteLLM-backed generation client and its protocol."""

from __future__ import annotations

from supplement_guard.providers.generation.client import GenerationClient, extract_raw_citations
from supplement_guard.providers.generation.protocols import IGenerationClient

__all__ = ["GenerationClient", "IGenerationClient", "extract_raw_citations"]
