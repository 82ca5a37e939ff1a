"""Human-readable labels for form controls."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from playwright.sync_api import ElementHandle

# Longer parent text usually belongs to an unrelated content block.
PARENT_TEXT_LIMIT = 100

LABEL_CANDIDATES_SCRIPT = """
(el) => {
  let labelFor = null;
  if (el.id) {
    const label = document.querySelector(`label[for="${CSS.escape(el.id)}"]`);
    if (label) labelFor = label.textContent || '';
  }
  const parent = el.parentElement;
  return {
    labelFor,
    placeholder: el.getAttribute('placeholder'),
    parentText: parent ? (parent.textContent || '') : null,
  };
}
"""


def resolve_label(candidates: Mapping[str, Any]) -> str:
    """Pick the first non-empty label from raw in-page candidates.

    Order: explicit ``label[for]`` text, then placeholder, then the text of
    the immediate parent when it is shorter than ``PARENT_TEXT_LIMIT``.
    """
    label_for = (candidates.get("labelFor") or "").strip()
    if label_for:
        return label_for

    placeholder = candidates.get("placeholder") or ""
    if placeholder:
        return placeholder

    parent_text: Optional[str] = candidates.get("parentText")
    if parent_text and len(parent_text) < PARENT_TEXT_LIMIT:
        return parent_text.strip()
    return ""


def label_for_control(handle: ElementHandle) -> str:
    candidates = handle.evaluate(LABEL_CANDIDATES_SCRIPT) or {}
    return resolve_label(candidates)


__all__ = ["PARENT_TEXT_LIMIT", "resolve_label", "label_for_control"]
