"""Pydantic data models for supplement-guard.

Every value produced by a single pipeline call is frozen: prompt settings,
the raw generation response, report blocks and the final
``AnalysisResult``.  ``ItemSet`` (session-lived, mutable) lives in
``supplement_guard.items``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# ── Generation request / response ────────────────────────────────────


class PromptConfig(BaseModel):
    """Per-call generation parameters chosen by the caller."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    temperature: float = Field(default=0.7, ge=0.0, le=1.0)
    grounding_enabled: bool = True
    model_identifier: str = Field(min_length=1)
    top_p: float = Field(default=0.95, gt=0.0, le=1.0)


class RawCitation(BaseModel):
    """A grounding citation exactly as the service reported it."""

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    uri: Optional[str] = None


class RawGenerationResponse(BaseModel):
    """Unprocessed generation output."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    citations: list[RawCitation] = Field(default_factory=list)


class Source(BaseModel):
    """A validated, deduplicated web source."""

    model_config = ConfigDict(frozen=True)

    title: str
    uri: str


# ── Report blocks ────────────────────────────────────────────────────


class InlineRun(BaseModel):
    """A span of text, bold when ``emphasized``."""

    model_config = ConfigDict(frozen=True)

    text: str
    emphasized: bool = False


class Heading(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["heading"] = "heading"
    level: int = Field(default=3, ge=1, le=6)
    text: str


class Paragraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["paragraph"] = "paragraph"
    runs: list[InlineRun] = Field(default_factory=list)


class BulletList(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["bullet_list"] = "bullet_list"
    items: list[list[InlineRun]] = Field(default_factory=list)


ReportBlock = Annotated[Union[Heading, Paragraph, BulletList], Field(discriminator="kind")]


# ── Result ───────────────────────────────────────────────────────────


class Verdict(str, Enum):
    """Overall safety verdict requested from the model."""

    SAFE = "safe"
    CAUTION = "caution"
    RISK = "risk"


class AnalysisResult(BaseModel):
    """Structured interaction-risk report returned by ``analyze``."""

    model_config = ConfigDict(frozen=True)

    blocks: list[ReportBlock] = Field(default_factory=list)
    sources: list[Source] = Field(default_factory=list)
    verdict: Optional[Verdict] = None
