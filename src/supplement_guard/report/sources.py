"""Validate and deduplicate grounding citations."""

from __future__ import annotations

from typing import Iterable

from supplement_guard.models import RawCitation, Source


def extract_sources(citations: Iterable[RawCitation]) -> list[Source]:
    """Keep citations with a non-blank title and uri, first occurrence per uri wins."""
    sources: list[Source] = []
    seen_uris: set[str] = set()
    for citation in citations:
        title = (citation.title or "").strip()
        uri = (citation.uri or "").strip()
        if not title or not uri or uri in seen_uris:
            continue
        seen_uris.add(uri)
        sources.append(Source(title=title, uri=uri))
    return sources


class SourceExtractor:
    def extract(self, citations: Iterable[RawCitation]) -> list[Source]:
        return extract_sources(citations)
