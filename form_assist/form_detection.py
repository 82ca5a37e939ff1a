"""Form discovery: scan a page for groups of fillable controls."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional

from playwright.sync_api import ElementHandle, Error as PlaywrightError, Page

from .form_models import FALLBACK_KIND, FORM_KIND, FieldDescriptor, FormGroup
from .label_resolver import label_for_control
from .path_codec import encode_path

FIELD_QUERY = "input, select, textarea"
IGNORED_INPUT_TYPES = {"hidden", "submit", "button"}
MIN_FALLBACK_CONTROLS = 3

CONTROL_DATA_SCRIPT = """
(el) => {
  const tag = el.tagName.toLowerCase();
  const options = tag === 'select'
    ? Array.from(el.options || []).map(opt => opt.text)
    : null;
  return {
    tag,
    type: (typeof el.type === 'string' && el.type) ? el.type.toLowerCase() : tag,
    name: el.getAttribute('name') || '',
    id: el.id || '',
    options,
  };
}
"""

# Inputs named "action", "method" or "id" shadow the form's own properties.
FORM_META_SCRIPT = """
(form) => ({
  action: typeof form.action === 'string' ? form.action : (form.getAttribute('action') || ''),
  method: typeof form.method === 'string' && form.method ? form.method : 'get',
  id: typeof form.id === 'string' ? form.id : (form.getAttribute('id') || ''),
})
"""

CONTROL_COUNT_SCRIPT = f"(el) => el.querySelectorAll('{FIELD_QUERY}').length"


def discover_forms(page: Page, logger: Optional[logging.Logger] = None) -> List[FormGroup]:
    """Return every form-like group of eligible controls on the page.

    Real ``<form>`` elements come first; only when none of them yields a
    control do we fall back to ``<div>`` containers holding at least
    ``MIN_FALLBACK_CONTROLS`` controls.
    """
    log = logger or logging.getLogger(__name__)
    groups: List[FormGroup] = []

    for index, form in enumerate(page.query_selector_all("form")):
        elements = _extract_fields(form, "form", index, log)
        if not elements:
            log.debug("Form #%s has no eligible controls", index)
            continue
        try:
            meta = form.evaluate(FORM_META_SCRIPT) or {}
        except PlaywrightError as exc:
            log.debug("Skipping form #%s: %s", index, exc)
            continue
        groups.append(
            FormGroup(
                kind=FORM_KIND,
                action=meta.get("action") or "",
                method=meta.get("method") or "get",
                container_id=meta.get("id") or "",
                elements=elements,
            )
        )

    if groups:
        log.info("Discovered %s form(s)", len(groups))
        return groups

    for index, div in enumerate(page.query_selector_all("div")):
        try:
            if div.evaluate(CONTROL_COUNT_SCRIPT) < MIN_FALLBACK_CONTROLS:
                continue
            container_id = div.get_attribute("id") or ""
        except PlaywrightError as exc:
            log.debug("Skipping div #%s: %s", index, exc)
            continue
        elements = _extract_fields(div, "div", index, log)
        if not elements:
            continue
        groups.append(
            FormGroup(
                kind=FALLBACK_KIND,
                action="",
                method="unknown",
                container_id=container_id,
                elements=elements,
            )
        )

    if groups:
        log.info("Discovered %s form-like div group(s)", len(groups))
    else:
        log.info("No eligible form controls found")
    return groups


def _extract_fields(
    container: ElementHandle,
    container_kind: str,
    container_index: int,
    log: logging.Logger,
) -> List[FieldDescriptor]:
    # Element indices count every control of a tag, excluded ones included,
    # so they line up with container.query_selector_all(tag) at fill time.
    tag_counters: Dict[str, int] = defaultdict(int)
    descriptors: List[FieldDescriptor] = []

    try:
        controls = container.query_selector_all(FIELD_QUERY)
    except PlaywrightError as exc:
        log.debug("Skipping %s #%s: %s", container_kind, container_index, exc)
        return descriptors

    for control in controls:
        try:
            data = control.evaluate(CONTROL_DATA_SCRIPT)
        except PlaywrightError as exc:
            log.debug("Skipping control in %s #%s: %s", container_kind, container_index, exc)
            continue
        tag = data["tag"]
        element_index = tag_counters[tag]
        tag_counters[tag] += 1

        control_type = data.get("type") or tag
        if control_type in IGNORED_INPUT_TYPES:
            continue

        try:
            label = label_for_control(control)
        except PlaywrightError as exc:
            log.debug("Label lookup failed for %s: %s", data.get("name") or tag, exc)
            label = ""

        descriptors.append(
            FieldDescriptor(
                type=control_type,
                name=data.get("name") or "",
                dom_id=data.get("id") or "",
                label=label,
                options=data.get("options") if tag == "select" else None,
                path=encode_path(container_kind, container_index, tag, element_index),
            )
        )
    return descriptors


__all__ = [
    "FIELD_QUERY",
    "IGNORED_INPUT_TYPES",
    "MIN_FALLBACK_CONTROLS",
    "discover_forms",
]
