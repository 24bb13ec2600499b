"""Report parsing, source extraction and rendering."""

from __future__ import annotations

from supplement_guard.report.parser import ReportParser, parse_report, tokenize_inline
from supplement_guard.report.render import render_markdown, render_plain_text
from supplement_guard.report.sources import SourceExtractor, extract_sources
from supplement_guard.report.verdict import detect_verdict

__all__ = [
    "ReportParser",
    "SourceExtractor",
    "detect_verdict",
    "extract_sources",
    "parse_report",
    "render_markdown",
    "render_plain_text",
    "tokenize_inline",
]
