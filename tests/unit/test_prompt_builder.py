"""Tests for the interaction-analysis prompt."""

from __future__ import annotations

import pytest

from supplement_guard.items import ItemSet
from supplement_guard.prompts import DISCLAIMER, PromptBuilder, build_prompt


class TestPromptBuilder:
    def test_deterministic(self) -> None:
        items = ItemSet(["Aspirin", "Omega-3", "Vitamin E"])
        first = build_prompt(items)
        assert all(build_prompt(ItemSet(["Aspirin", "Omega-3", "Vitamin E"])) == first for _ in range(5))

    def test_items_comma_joined_in_order(self) -> None:
        prompt = build_prompt(ItemSet(["Vitamin E", "Aspirin"]))
        assert "[Vitamin E, Aspirin]" in prompt

    def test_order_changes_prompt(self) -> None:
        assert build_prompt(ItemSet(["A", "B"])) != build_prompt(ItemSet(["B", "A"]))

    def test_structure_sections_present(self) -> None:
        prompt = build_prompt(ItemSet(["Aspirin"]))
        for heading in ["### Summary", "### Duplicate Ingredients", "### Interactions", "### Recommendations"]:
            assert heading in prompt
        for verdict in ["**Safe**", "**Caution**", "**Risk**"]:
            assert verdict in prompt

    def test_closing_mandates_disclaimer(self) -> None:
        prompt = build_prompt(ItemSet(["Aspirin"]))
        assert prompt.rstrip().endswith(f'"{DISCLAIMER}"')

    def test_preamble_comes_first(self) -> None:
        prompt = build_prompt(ItemSet(["Aspirin"]))
        assert prompt.startswith("You are an expert clinical pharmacist")
        assert prompt.index("Aspirin") < prompt.index("### Summary")

    def test_report_language_is_fixed(self) -> None:
        prompt = build_prompt(ItemSet(["아스피린"]))
        assert "Write the analysis in English" in prompt
        assert "[아스피린]" in prompt

    def test_empty_item_set_rejected(self) -> None:
        with pytest.raises(ValueError):
            PromptBuilder().build(ItemSet())
