"""Positional addresses for form controls.

A path such as ``form[0]-input[3]`` names the fourth ``<input>`` inside the
first ``<form>`` of the document. Discovery emits these and the autofill step
recomputes the very same queries to find the control again, since no element
handles survive between the two.

Paths are positional snapshots, not persistent identifiers: if controls or
containers are inserted before the target between discovery and fill, a path
can resolve to a different control than the one that was analysed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from playwright.sync_api import ElementHandle, Page

from .errors import FieldResolutionError

CONTAINER_KINDS = ("form", "div")
CONTROL_TAGS = ("input", "select", "textarea")

PATH_PATTERN = re.compile(
    r"(?P<kind>{kinds})\[(?P<container>[0-9]+)\]-(?P<tag>{tags})\[(?P<element>[0-9]+)\]".format(
        kinds="|".join(CONTAINER_KINDS),
        tags="|".join(CONTROL_TAGS),
    ),
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class ControlPath:
    container_kind: str
    container_index: int
    tag: str
    element_index: int

    def __str__(self) -> str:
        return encode_path(
            self.container_kind, self.container_index, self.tag, self.element_index
        )


def encode_path(
    container_kind: str, container_index: int, tag: str, element_index: int
) -> str:
    return f"{container_kind}[{container_index}]-{tag}[{element_index}]"


def decode_path(text: str) -> Optional[ControlPath]:
    if not text:
        return None
    match = PATH_PATTERN.fullmatch(text)
    if not match:
        return None
    return ControlPath(
        container_kind=match.group("kind").lower(),
        container_index=int(match.group("container")),
        tag=match.group("tag").lower(),
        element_index=int(match.group("element")),
    )


def resolve_path(page: Page, path: Union[str, ControlPath]) -> ElementHandle:
    """Locate the control a path points at in the current document."""
    parsed = path if isinstance(path, ControlPath) else decode_path(path)
    if parsed is None:
        raise FieldResolutionError(str(path), "malformed path")

    containers = page.query_selector_all(parsed.container_kind)
    if parsed.container_index >= len(containers):
        raise FieldResolutionError(
            str(parsed),
            f"{parsed.container_kind} index {parsed.container_index} out of range "
            f"({len(containers)} present)",
        )
    container = containers[parsed.container_index]

    controls = container.query_selector_all(parsed.tag)
    if parsed.element_index >= len(controls):
        raise FieldResolutionError(
            str(parsed),
            f"{parsed.tag} index {parsed.element_index} out of range "
            f"({len(controls)} present)",
        )
    return controls[parsed.element_index]


__all__ = [
    "CONTAINER_KINDS",
    "CONTROL_TAGS",
    "ControlPath",
    "encode_path",
    "decode_path",
    "resolve_path",
]
