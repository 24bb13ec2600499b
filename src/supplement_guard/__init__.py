"""supplement-guard: LLM-generated interaction-risk reports for medications and supplements.

Core API::

    from supplement_guard import (
        ItemSet, AnalysisPipeline, analyze,
        AnalysisResult, AnalysisError,
    )
"""

from __future__ import annotations

from supplement_guard.classification import ClassificationRule, ErrorClassifier, classify
from supplement_guard.config import AppSettings
from supplement_guard.exceptions import (
    AnalysisError,
    AnalysisInProgressError,
    EmptyInputError,
    EmptyResponseError,
    InvalidCredentialError,
    MissingCredentialError,
    QuotaExhaustedError,
    SupplementGuardError,
    TransientServiceError,
)
from supplement_guard.items import ItemSet
from supplement_guard.models import (
    AnalysisResult,
    BulletList,
    Heading,
    InlineRun,
    Paragraph,
    PromptConfig,
    RawCitation,
    RawGenerationResponse,
    Source,
    Verdict,
)
from supplement_guard.pipeline import AnalysisPipeline, analyze
from supplement_guard.prompts import PromptBuilder, build_prompt
from supplement_guard.providers.generation import GenerationClient, IGenerationClient
from supplement_guard.report import ReportParser, SourceExtractor, extract_sources, parse_report
from supplement_guard.session import AnalysisSession

__all__ = [
    "AnalysisError",
    "AnalysisInProgressError",
    "AnalysisPipeline",
    "AnalysisResult",
    "AnalysisSession",
    "AppSettings",
    "BulletList",
    "ClassificationRule",
    "EmptyInputError",
    "EmptyResponseError",
    "ErrorClassifier",
    "GenerationClient",
    "Heading",
    "IGenerationClient",
    "InlineRun",
    "InvalidCredentialError",
    "ItemSet",
    "MissingCredentialError",
    "Paragraph",
    "PromptBuilder",
    "PromptConfig",
    "QuotaExhaustedError",
    "RawCitation",
    "RawGenerationResponse",
    "ReportParser",
    "Source",
    "SourceExtractor",
    "SupplementGuardError",
    "TransientServiceError",
    "Verdict",
    "analyze",
    "build_prompt",
    "classify",
    "extract_sources",
    "parse_report",
]
