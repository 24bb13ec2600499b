"""Render an ``ItemSet`` into the fixed interaction-analysis prompt."""

from __future__ import annotations

from supplement_guard.items import ItemSet
from supplement_guard.prompts.templates import interaction

ITEM_SEPARATOR = ", "


class PromptBuilder:
    """Builds byte-identical prompts for identical, identically ordered item sets."""

    def build(self, items: ItemSet) -> str:
        if not items:
            raise ValueError("Cannot build a prompt for an empty item set")

        sections = [
            interaction.PREAMBLE,
            interaction.ITEMS_LINE.format(items=ITEM_SEPARATOR.join(items)),
            interaction.STRUCTURE,
            interaction.CLOSING.format(disclaimer=interaction.DISCLAIMER),
        ]
        return "\n\n".join(sections)


def build_prompt(items: ItemSet) -> str:
    return PromptBuilder().build(items)
