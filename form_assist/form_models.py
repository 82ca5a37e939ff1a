"""Data models shared across discovery, analysis and autofill."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

FORM_KIND = "form"
FALLBACK_KIND = "fallback-group"


@dataclass(slots=True)
class FieldDescriptor:
    type: str
    name: str
    dom_id: str
    label: str
    path: str
    options: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "id": self.dom_id,
            "label": self.label,
            "options": list(self.options) if self.options is not None else None,
            "path": self.path,
        }


@dataclass(slots=True)
class FormGroup:
    kind: str
    action: str
    method: str
    container_id: str
    elements: List[FieldDescriptor] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "action": self.action,
            "method": self.method,
            "id": self.container_id,
            "elements": [element.to_dict() for element in self.elements],
        }


@dataclass(frozen=True, slots=True)
class FieldRecommendation:
    path: str
    recommended_value: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "FieldRecommendation":
        value = payload.get("recommendedValue")
        return cls(
            path=str(payload.get("path") or ""),
            recommended_value=None if value is None else str(value),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "recommendedValue": self.recommended_value}


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Recommendations returned by the analysis service.

    Replaced wholesale on every successful analysis, never edited in place.
    `raw` keeps the full service payload so callers can display whatever
    else the service returned alongside the fields.
    """

    fields: Tuple[FieldRecommendation, ...] = ()
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "AnalysisResult":
        entries = payload.get("fields") or []
        fields = tuple(
            FieldRecommendation.from_dict(entry)
            for entry in entries
            if isinstance(entry, Mapping)
        )
        return cls(fields=fields, raw=dict(payload))

    def to_dict(self) -> Dict[str, Any]:
        payload = dict(self.raw)
        payload["fields"] = [recommendation.to_dict() for recommendation in self.fields]
        return payload


class FillOutcome(str, Enum):
    FILLED = "filled"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass(slots=True)
class FieldFillResult:
    path: str
    outcome: FillOutcome
    strategy: Optional[str] = None
    error: Optional[str] = None


@dataclass(slots=True)
class FillReport:
    results: List[FieldFillResult] = field(default_factory=list)

    @property
    def filled_count(self) -> int:
        return self._count(FillOutcome.FILLED)

    @property
    def error_count(self) -> int:
        return self._count(FillOutcome.ERROR)

    @property
    def skipped_count(self) -> int:
        return self._count(FillOutcome.SKIPPED)

    def _count(self, outcome: FillOutcome) -> int:
        return sum(1 for result in self.results if result.outcome is outcome)


__all__ = [
    "FORM_KIND",
    "FALLBACK_KIND",
    "FieldDescriptor",
    "FormGroup",
    "FieldRecommendation",
    "AnalysisResult",
    "FillOutcome",
    "FieldFillResult",
    "FillReport",
]
