"""Shared fixtures for supplement-guard tests."""

from __future__ import annotations

import pytest

from supplement_guard.config import AppSettings, LLMConfig
from supplement_guard.models import PromptConfig, RawCitation

SAMPLE_REPORT = """### Summary
Overall verdict: **Caution**. Aspirin and omega-3 both affect clotting.

### Key Warnings
- **Bleeding risk**: aspirin with high-dose omega-3 may increase bleeding.

- **Vitamin E**: also has a mild antiplatelet effect.

### Duplicate Ingredients
No duplicated ingredients were found.

### Interactions
- Aspirin + Omega-3: additive antiplatelet effect.
- Aspirin + Vitamin E: additive antiplatelet effect.

### Recommendations
Talk to your pharmacist before combining these products.
This information is for reference only.
"""


@pytest.fixture
def settings() -> AppSettings:
    """Settings with a test key and fixed model, independent of the environment."""
    return AppSettings(
        llm=LLMConfig(
            api_key="test-key",
            model="gemini/test-model",
            temperature=0.7,
            grounding_enabled=True,
        ),
    )


@pytest.fixture
def keyless_settings() -> AppSettings:
    return AppSettings(llm=LLMConfig(api_key="", model="gemini/test-model"))


@pytest.fixture
def prompt_config() -> PromptConfig:
    return PromptConfig(temperature=0.7, grounding_enabled=True, model_identifier="gemini/test-model")


@pytest.fixture
def sample_report() -> str:
    return SAMPLE_REPORT


@pytest.fixture
def sample_citations() -> list[RawCitation]:
    return [
        RawCitation(title="Aspirin interactions", uri="https://example.org/aspirin"),
        RawCitation(title="", uri="https://example.org/blank-title"),
        RawCitation(title="Omega-3 and bleeding", uri="https://example.org/omega3"),
        RawCitation(title="Aspirin interactions (dup)", uri="https://example.org/aspirin"),
        RawCitation(title="No uri", uri=None),
    ]
