"""Output formatter protocol implemented by all report formatters."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from supplement_guard.models import AnalysisResult


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for output formatters (JSON, Markdown, plain text)."""

    def format(self, result: AnalysisResult, **kwargs: Any) -> bytes:
        """Render the result into output bytes."""
        ...

    def format_to_file(self, result: AnalysisResult, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format (e.g. 'application/json')."""
        ...


__all__ = ["IOutputFormatter"]
