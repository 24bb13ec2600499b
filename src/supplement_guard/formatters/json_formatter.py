"""JSON output formatter used by the CLI for API-shaped dumps."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from supplement_guard.models import AnalysisResult


class JSONFormatter:
    """Renders AnalysisResult as indented JSON bytes."""

    def format(self, result: AnalysisResult, **kwargs: Any) -> bytes:
        """Serialize *result* to pretty-printed JSON bytes."""
        return result.model_dump_json(indent=2).encode()

    def format_to_file(self, result: AnalysisResult, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(result, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"
