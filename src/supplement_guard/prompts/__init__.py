"""Prompt construction for interaction analysis."""

from __future__ import annotations

from supplement_guard.prompts.builder import PromptBuilder, build_prompt
from supplement_guard.prompts.templates.interaction import DISCLAIMER

__all__ = ["DISCLAIMER", "PromptBuilder", "build_prompt"]
