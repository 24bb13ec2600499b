"""Analysis endpoint."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from supplement_guard.items import ItemSet
from supplement_guard.models import AnalysisResult, PromptConfig

router = APIRouter(tags=["analysis"])


class AnalyzeRequest(BaseModel):
    """Items to analyze plus optional per-call overrides."""

    items: list[str] = Field(default_factory=list)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    grounding_enabled: Optional[bool] = None
    model: Optional[str] = None


def _prompt_config(request: AnalyzeRequest, base: PromptConfig) -> PromptConfig:
    overrides: dict = {}
    if request.temperature is not None:
        overrides["temperature"] = request.temperature
    if request.grounding_enabled is not None:
        overrides["grounding_enabled"] = request.grounding_enabled
    if request.model:
        overrides["model_identifier"] = request.model
    return base.model_copy(update=overrides) if overrides else base


@router.post("/analyze", response_model=AnalysisResult)
async def analyze(request: AnalyzeRequest, req: Request) -> AnalysisResult:
    """Run one interaction analysis for the posted items.

    Taxonomy failures are turned into JSON error responses by the
    registered exception handlers.
    """
    settings = req.app.state.settings
    pipeline = req.app.state.pipeline

    config = _prompt_config(request, settings.to_prompt_config())
    return await pipeline.analyze(ItemSet(request.items), config=config)
