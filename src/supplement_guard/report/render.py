"""Render parsed blocks back to text."""

from __future__ import annotations

from supplement_guard.models import BulletList, Heading, InlineRun, Paragraph, ReportBlock
from supplement_guard.report.parser import BOLD_DELIMITER, BULLET_RE, ESCAPE, HEADING_RE


def _runs_text(runs: list[InlineRun], *, markers: bool) -> str:
    if not markers:
        return "".join(run.text for run in runs)
    return "".join(
        f"{BOLD_DELIMITER}{run.text}{BOLD_DELIMITER}" if run.emphasized else run.text
        for run in runs
    )


def _paragraph_text(runs: list[InlineRun], *, markers: bool) -> str:
    """Paragraph text, escaped when it would re-parse as a heading or bullet."""
    text = _runs_text(runs, markers=markers)
    if HEADING_RE.match(text) or BULLET_RE.match(text):
        return ESCAPE + text
    return text


def _render(blocks: list[ReportBlock], *, markers: bool) -> str:
    chunks: list[str] = []
    for block in blocks:
        if isinstance(block, Heading):
            chunks.append(f"{'#' * block.level} {block.text}")
        elif isinstance(block, Paragraph):
            chunks.append(_paragraph_text(block.runs, markers=markers))
        elif isinstance(block, BulletList):
            chunks.append("\n".join(f"- {_runs_text(item, markers=markers)}" for item in block.items))
    return "\n\n".join(chunks)


def render_plain_text(blocks: list[ReportBlock]) -> str:
    """Headings and bullets keep their prefixes; emphasis markers are dropped."""
    return _render(blocks, markers=False)


def render_markdown(blocks: list[ReportBlock]) -> str:
    return _render(blocks, markers=True)
