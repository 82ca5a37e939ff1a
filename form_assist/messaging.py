"""Request/response entry points for the orchestrating process."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from playwright.sync_api import Error as PlaywrightError, Page

from .errors import FormAssistError
from .session import AnalysisSession

START_ANALYSIS = "startAnalysis"
FILL_FORM = "fillForm"

Response = Dict[str, Any]


class MessageDispatcher:
    """Maps action messages onto session operations, one reply per request."""

    def __init__(
        self,
        session: AnalysisSession,
        page_provider: Callable[[], Page],
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.session = session
        self.page_provider = page_provider
        self.logger = logger or logging.getLogger(__name__)
        self._handlers: Dict[str, Callable[[], Response]] = {
            START_ANALYSIS: self._start_analysis,
            FILL_FORM: self._fill_form,
        }

    def handle(self, message: Mapping[str, Any]) -> Response:
        action = message.get("action")
        handler = self._handlers.get(action)
        if handler is None:
            return {"success": False, "error": f"Unknown action: {action}"}
        try:
            return handler()
        except FormAssistError as exc:
            self.logger.error("%s failed: %s", action, exc)
            return {"success": False, "error": str(exc)}
        except PlaywrightError as exc:
            self.logger.error("%s failed on the page: %s", action, exc)
            return {"success": False, "error": str(exc)}

    def _start_analysis(self) -> Response:
        result = self.session.start_analysis(self.page_provider())
        return {"success": True, "analysis": result.to_dict()}

    def _fill_form(self) -> Response:
        report = self.session.fill(self.page_provider())
        return {
            "success": True,
            "filledCount": report.filled_count,
            "errorCount": report.error_count,
        }


__all__ = ["START_ANALYSIS", "FILL_FORM", "MessageDispatcher"]
