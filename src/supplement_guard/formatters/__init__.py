"""Output formatters for analysis results."""

from __future__ import annotations

from supplement_guard.formatters.json_formatter import JSONFormatter
from supplement_guard.formatters.protocols import IOutputFormatter
from supplement_guard.formatters.text_formatter import MarkdownFormatter, PlainTextFormatter

FORMATTERS: dict[str, type] = {
    "json": JSONFormatter,
    "markdown": MarkdownFormatter,
    "text": PlainTextFormatter,
}


def get_formatter(name: str) -> IOutputFormatter:
    """Look up a formatter by name (``json``, ``markdown`` or ``text``)."""
    try:
        return FORMATTERS[name]()
    except KeyError:
        raise ValueError(f"Unknown output format {name!r}; expected one of {sorted(FORMATTERS)}") from None


__all__ = [
    "FORMATTERS",
    "IOutputFormatter",
    "JSONFormatter",
    "MarkdownFormatter",
    "PlainTextFormatter",
    "get_formatter",
]
