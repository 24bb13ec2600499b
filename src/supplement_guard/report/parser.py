"""Markdown-flavoured report text to structured blocks.

The parser is a small line-driven state machine:

- ``IDLE``: nothing open.
- ``IN_LIST``: bullet lines are accumulating into one ``BulletList``.
  Blank lines are dropped without closing the list, so bullets separated
  by blank lines still form a single list.
- ``IN_PARAGRAPH``: consecutive text lines are accumulating into one
  ``Paragraph``.  A blank line closes it.

Headings close whatever is open.  Inline ``**bold**`` spans are tokenized
per line; an unmatched delimiter is kept as literal text.  A backslash
before a leading ``#``, ``-`` or ``*`` makes the line plain text.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from supplement_guard.models import BulletList, Heading, InlineRun, Paragraph, ReportBlock

BOLD_DELIMITER = "**"

HEADING_RE = re.compile(r"^(#{1,6})[ \t]+(\S.*)$")
BULLET_RE = re.compile(r"^[-*][ \t]+(\S.*)$")

ESCAPE = "\\"
ESCAPABLE_MARKERS = ("#", "-", "*")


class _State(Enum):
    IDLE = "idle"
    IN_LIST = "in_list"
    IN_PARAGRAPH = "in_paragraph"


def tokenize_inline(line: str) -> list[InlineRun]:
    """Split *line* on ``**`` into plain/emphasized runs.

    Odd-indexed segments are emphasized.  When the delimiter count is odd,
    the last delimiter and everything after it stay literal.  Empty runs are
    dropped and adjacent runs with the same emphasis are merged.
    """
    parts = line.split(BOLD_DELIMITER)
    tail = ""
    if len(parts) % 2 == 0:
        tail = BOLD_DELIMITER + parts.pop()
    parts[-1] += tail

    runs: list[InlineRun] = []
    for index, text in enumerate(parts):
        if not text:
            continue
        emphasized = index % 2 == 1
        if runs and runs[-1].emphasized == emphasized:
            runs[-1] = InlineRun(text=runs[-1].text + text, emphasized=emphasized)
        else:
            runs.append(InlineRun(text=text, emphasized=emphasized))
    return runs


def _join_lines(lines: list[list[InlineRun]]) -> list[InlineRun]:
    """Concatenate per-line runs with a single plain space between lines."""
    joined: list[InlineRun] = []
    for line_runs in lines:
        pieces = list(line_runs)
        if joined:
            pieces.insert(0, InlineRun(text=" ", emphasized=False))
        for run in pieces:
            if joined and joined[-1].emphasized == run.emphasized:
                joined[-1] = InlineRun(text=joined[-1].text + run.text, emphasized=run.emphasized)
            else:
                joined.append(run)
    return joined


class ReportParser:
    """Stateless between calls; each ``parse`` starts from a fresh machine."""

    def parse(self, text: str) -> list[ReportBlock]:
        return _ParseRun().feed(text)


class _ParseRun:
    """Mutable state for a single ``parse`` invocation."""

    def __init__(self) -> None:
        self.blocks: list[ReportBlock] = []
        self.state = _State.IDLE
        self.list_items: list[list[InlineRun]] = []
        self.paragraph_lines: list[list[InlineRun]] = []

    def feed(self, text: str) -> list[ReportBlock]:
        for raw_line in text.splitlines():
            self._line(raw_line.strip())
        self._flush()
        return self.blocks

    def _line(self, line: str) -> None:
        if not line:
            if self.state is _State.IN_PARAGRAPH:
                self._flush()
            return

        if line.startswith(ESCAPE) and line[1:2] in ESCAPABLE_MARKERS:
            self._text(line[1:])
            return

        heading = _match_heading(line)
        if heading is not None:
            self._flush()
            self.blocks.append(heading)
            return

        bullet = BULLET_RE.match(line)
        if bullet:
            if self.state is _State.IN_PARAGRAPH:
                self._flush()
            runs = tokenize_inline(bullet.group(1))
            if runs:
                self.list_items.append(runs)
            self.state = _State.IN_LIST
            return

        self._text(line)

    def _text(self, line: str) -> None:
        if self.state is _State.IN_LIST:
            self._flush()
        runs = tokenize_inline(line)
        if runs:
            self.paragraph_lines.append(runs)
        self.state = _State.IN_PARAGRAPH

    def _flush(self) -> None:
        if self.list_items:
            self.blocks.append(BulletList(items=self.list_items))
        if self.paragraph_lines:
            self.blocks.append(Paragraph(runs=_join_lines(self.paragraph_lines)))
        self.list_items = []
        self.paragraph_lines = []
        self.state = _State.IDLE


def _match_heading(line: str) -> Optional[Heading]:
    match = HEADING_RE.match(line)
    if not match:
        return None
    text = match.group(2).replace(BOLD_DELIMITER, "").strip()
    if not text:
        return None
    return Heading(level=len(match.group(1)), text=text)


def parse_report(text: str) -> list[ReportBlock]:
    return ReportParser().parse(text)
