"""Recover the overall Safe / Caution / Risk verdict from parsed blocks."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from supplement_guard.models import BulletList, Heading, InlineRun, Paragraph, ReportBlock, Verdict

VERDICT_RE = re.compile(r"\b(safe|caution|risk)\b", re.IGNORECASE)
_RUN_PUNCTUATION = " \t.,:;!-()[]"


def _summary_runs(blocks: Iterable[ReportBlock]) -> Iterator[InlineRun]:
    """Runs of the first section: everything up to the second heading."""
    headings_seen = 0
    for block in blocks:
        if isinstance(block, Heading):
            headings_seen += 1
            if headings_seen > 1:
                return
        elif isinstance(block, Paragraph):
            yield from block.runs
        elif isinstance(block, BulletList):
            for item in block.items:
                yield from item


def detect_verdict(blocks: list[ReportBlock]) -> Optional[Verdict]:
    """A run consisting solely of a verdict word wins; otherwise the first mention.

    Returns ``None`` when the first section names no verdict.
    """
    runs = list(_summary_runs(blocks))
    for run in runs:
        word = run.text.strip(_RUN_PUNCTUATION).lower()
        if word in {v.value for v in Verdict}:
            return Verdict(word)
    for run in runs:
        match = VERDICT_RE.search(run.text)
        if match:
            return Verdict(match.group(1).lower())
    return None
