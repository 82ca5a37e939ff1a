"""Apply analysis recommendations to the live page."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from playwright.sync_api import ElementHandle, Error as PlaywrightError, Page

from .errors import FieldResolutionError
from .form_models import (
    AnalysisResult,
    FieldFillResult,
    FieldRecommendation,
    FillOutcome,
    FillReport,
)
from .path_codec import resolve_path

TRUTHY_TOKENS = frozenset({"yes", "true", "1", "on", "checked"})

ELEMENT_INFO_SCRIPT = """
(el) => ({
  tag: el.tagName.toLowerCase(),
  type: (el.getAttribute('type') || '').toLowerCase(),
  options: el.tagName === 'SELECT' ? Array.from(el.options).map(opt => opt.text) : [],
})
"""

# Direct property writes do not fire listeners, so each mutation dispatches
# the events a user interaction would have produced.
SELECT_INDEX_SCRIPT = """
(el, index) => {
  el.selectedIndex = index;
  el.dispatchEvent(new Event('input', { bubbles: true }));
  el.dispatchEvent(new Event('change', { bubbles: true }));
}
"""

CHECK_SCRIPT = """
(el) => {
  el.checked = true;
  el.dispatchEvent(new Event('input', { bubbles: true }));
  el.dispatchEvent(new Event('change', { bubbles: true }));
}
"""

SET_VALUE_SCRIPT = """
(el, value) => {
  el.value = value;
  el.dispatchEvent(new Event('input', { bubbles: true }));
  el.dispatchEvent(new Event('change', { bubbles: true }));
}
"""


def apply_recommendations(
    page: Page,
    result: AnalysisResult,
    logger: Optional[logging.Logger] = None,
) -> FillReport:
    log = logger or logging.getLogger(__name__)
    report = FillReport()
    for recommendation in result.fields:
        path = recommendation.path
        if not path or not recommendation.recommended_value:
            report.results.append(FieldFillResult(path=path, outcome=FillOutcome.SKIPPED))
            continue
        try:
            handle = resolve_path(page, path)
            fill_result = _fill_control(handle, recommendation)
        except (FieldResolutionError, PlaywrightError) as exc:
            log.warning("Failed to fill %s: %s", path, exc)
            report.results.append(
                FieldFillResult(path=path, outcome=FillOutcome.ERROR, error=str(exc))
            )
            continue
        log.debug(
            "%s %s with strategy %s",
            fill_result.outcome.value.capitalize(),
            path,
            fill_result.strategy,
        )
        report.results.append(fill_result)

    log.info(
        "Autofill finished: %s filled, %s errors, %s skipped",
        report.filled_count,
        report.error_count,
        report.skipped_count,
    )
    return report


def _fill_control(
    handle: ElementHandle, recommendation: FieldRecommendation
) -> FieldFillResult:
    path = recommendation.path
    value = recommendation.recommended_value or ""
    info = handle.evaluate(ELEMENT_INFO_SCRIPT)

    if info["tag"] == "select":
        index = match_option(info["options"], value)
        if index is None:
            return FieldFillResult(path=path, outcome=FillOutcome.SKIPPED, strategy="select")
        handle.evaluate(SELECT_INDEX_SCRIPT, index)
        return FieldFillResult(path=path, outcome=FillOutcome.FILLED, strategy="select")

    if info["tag"] == "input" and info["type"] in {"checkbox", "radio"}:
        strategy = info["type"]
        if not is_truthy(value):
            return FieldFillResult(path=path, outcome=FillOutcome.SKIPPED, strategy=strategy)
        handle.evaluate(CHECK_SCRIPT)
        return FieldFillResult(path=path, outcome=FillOutcome.FILLED, strategy=strategy)

    handle.evaluate(SET_VALUE_SCRIPT, value)
    return FieldFillResult(path=path, outcome=FillOutcome.FILLED, strategy="value")


def match_option(options: Sequence[str], value: str) -> Optional[int]:
    """Index of the option a free-text value selects, or None.

    Exact case-insensitive text match wins; otherwise the first option whose
    text contains the value, or is contained in it.
    """
    wanted = value.lower()
    lowered = [option.lower() for option in options]
    for index, text in enumerate(lowered):
        if text == wanted:
            return index
    for index, text in enumerate(lowered):
        if wanted in text or text in wanted:
            return index
    return None


def is_truthy(value: str) -> bool:
    return value.strip().lower() in TRUTHY_TOKENS


__all__ = ["TRUTHY_TOKENS", "apply_recommendations", "match_option", "is_truthy"]
