"""Markdown and plain-text report formatters."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from supplement_guard.models import AnalysisResult, Source
from supplement_guard.report.render import render_markdown, render_plain_text

SOURCES_HEADING = "Sources (Google Search)"


def _sources_section(sources: list[Source], *, markdown: bool) -> str:
    if markdown:
        lines = [f"- [{s.title}]({s.uri})" for s in sources]
    else:
        lines = [f"- {s.title} <{s.uri}>" for s in sources]
    return f"### {SOURCES_HEADING}\n\n" + "\n".join(lines)


class MarkdownFormatter:
    """Report blocks as markdown, followed by a sources section when present."""

    markdown = True

    def render(self, result: AnalysisResult) -> str:
        body = render_markdown(result.blocks) if self.markdown else render_plain_text(result.blocks)
        if result.sources:
            body = f"{body}\n\n{_sources_section(result.sources, markdown=self.markdown)}"
        return body + "\n"

    def format(self, result: AnalysisResult, **kwargs: Any) -> bytes:
        return self.render(result).encode("utf-8")

    def format_to_file(self, result: AnalysisResult, path: Path, **kwargs: Any) -> Path:
        path.write_bytes(self.format(result, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "text/markdown"


class PlainTextFormatter(MarkdownFormatter):
    """Same layout without emphasis markers or link syntax."""

    markdown = False

    @property
    def content_type(self) -> str:
        return "text/plain"
