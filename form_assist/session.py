"""Analysis session: single-flight analysis and the retained result."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional

from playwright.sync_api import Page

from .analysis_client import AnalysisClient
from .errors import AnalysisBusyError, NoFormsFoundError, NoResultAvailableError
from .form_detection import discover_forms
from .form_filling import apply_recommendations
from .form_models import AnalysisResult, FillReport, FormGroup
from .page_utils import capture_screenshot

Discoverer = Callable[..., List[FormGroup]]
ScreenshotProvider = Callable[[Page], Optional[str]]


class SessionState(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"


class AnalysisSession:
    """Owns the in-flight flag and the last successful AnalysisResult.

    Only ``start_analysis``, ``fill``, ``restore`` and ``end`` change state.
    A second analysis requested while one is running is rejected, not queued,
    and a failed analysis leaves the previously retained result in place.
    """

    def __init__(
        self,
        client: AnalysisClient,
        *,
        discover: Discoverer = discover_forms,
        screenshot: Optional[ScreenshotProvider] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.client = client
        self.logger = logger or logging.getLogger(__name__)
        self._discover = discover
        self._screenshot = screenshot or (
            lambda page: capture_screenshot(page, logger=self.logger)
        )
        self._state = SessionState.IDLE
        self._result: Optional[AnalysisResult] = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_analyzing(self) -> bool:
        return self._state is SessionState.ANALYZING

    @property
    def last_result(self) -> Optional[AnalysisResult]:
        return self._result

    @property
    def has_result(self) -> bool:
        return self._result is not None

    def start_analysis(self, page: Page) -> AnalysisResult:
        if self.is_analyzing:
            self.logger.warning("Rejected analysis request: one is already running")
            raise AnalysisBusyError()

        self._state = SessionState.ANALYZING
        self.logger.info("Analysis started")
        try:
            groups = self._discover(page, logger=self.logger)
            if not groups:
                raise NoFormsFoundError()
            screenshot = self._screenshot(page)
            result = self.client.analyze(groups, screenshot)
            self._result = result
            return result
        finally:
            self._state = SessionState.IDLE
            self.logger.info("Analysis finished (result retained=%s)", self.has_result)

    def fill(self, page: Page) -> FillReport:
        result = self._result
        if result is None:
            raise NoResultAvailableError()
        return apply_recommendations(page, result, logger=self.logger)

    def restore(self, result: AnalysisResult) -> None:
        if self.is_analyzing:
            raise AnalysisBusyError()
        self._result = result

    def end(self) -> None:
        self._result = None


__all__ = ["SessionState", "AnalysisSession"]
