"""Per-user session state: the item list, the busy flag and the last outcome.

This is the caller layer the core assumes: it serializes analyses so that
at most one is in flight, and keeps the last result or error for display.
"""

from __future__ import annotations

import logging
from typing import Optional

from supplement_guard.exceptions import AnalysisError, AnalysisInProgressError
from supplement_guard.items import ItemSet
from supplement_guard.models import AnalysisResult, PromptConfig
from supplement_guard.pipeline import AnalysisPipeline

log = logging.getLogger(__name__)


class AnalysisSession:
    """Holds an ``ItemSet`` and runs analyses through a pipeline one at a time."""

    def __init__(self, pipeline: AnalysisPipeline, items: Optional[ItemSet] = None) -> None:
        self._pipeline = pipeline
        self.items = items if items is not None else ItemSet.with_defaults(
            pipeline.settings.session.default_items
        )
        self._in_flight = False
        self.last_result: Optional[AnalysisResult] = None
        self.last_error: Optional[AnalysisError] = None

    @property
    def busy(self) -> bool:
        return self._in_flight

    def add(self, item: str) -> bool:
        return self.items.add(item)

    def remove(self, item: str) -> bool:
        return self.items.remove(item)

    async def run(
        self,
        *,
        config: Optional[PromptConfig] = None,
        timeout: Optional[float] = None,
    ) -> AnalysisResult:
        """Analyze the current items.

        Raises ``AnalysisInProgressError`` if another run is outstanding.
        The previous result and error are cleared before the call starts;
        on cancellation neither is set.
        """
        if self._in_flight:
            raise AnalysisInProgressError("An analysis is already running for this session")

        self._in_flight = True
        self.last_result = None
        self.last_error = None
        try:
            result = await self._pipeline.analyze(
                ItemSet(self.items.as_list()), config=config, timeout=timeout
            )
        except AnalysisError as e:
            self.last_error = e
            raise
        finally:
            self._in_flight = False

        self.last_result = result
        return result
