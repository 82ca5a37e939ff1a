"""HTTP client for the external form analysis service."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

import requests

from .config import ServiceConfig
from .errors import AnalysisTransportError
from .form_models import AnalysisResult, FormGroup


class AnalysisClient:
    """Posts discovered form groups to the analysis endpoint.

    Transport failures and ``success != true`` payloads are reported the same
    way, as ``AnalysisTransportError``. No retries: the caller owns retry
    policy.
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        http: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config or ServiceConfig()
        self.http = http or requests.Session()
        self.logger = logger or logging.getLogger(__name__)

    def build_payload(
        self, groups: Sequence[FormGroup], screenshot: Optional[str] = None
    ) -> Dict[str, Any]:
        return {
            "userId": self.config.user_id,
            "formData": [group.to_dict() for group in groups],
            "screenshot": screenshot,
        }

    def analyze(
        self, groups: Sequence[FormGroup], screenshot: Optional[str] = None
    ) -> AnalysisResult:
        payload = self.build_payload(groups, screenshot)
        self.logger.info(
            "Requesting analysis of %s group(s) from %s (screenshot=%s)",
            len(groups),
            self.config.api_url,
            screenshot is not None,
        )
        try:
            resp = self.http.post(
                self.config.api_url, json=payload, timeout=self.config.timeout_s
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as exc:
            raise AnalysisTransportError(f"Analysis request failed: {exc}") from exc
        except ValueError as exc:
            raise AnalysisTransportError(f"Analysis response was not JSON: {exc}") from exc

        if not isinstance(data, dict) or data.get("success") is not True:
            error = data.get("error") if isinstance(data, dict) else None
            raise AnalysisTransportError(error or "Analysis failed")

        analysis = data.get("analysis")
        if not isinstance(analysis, dict):
            analysis = {"fields": data.get("fields") or []}
        result = AnalysisResult.from_payload(analysis)
        self.logger.info("Analysis returned %s recommendation(s)", len(result.fields))
        return result


__all__ = ["AnalysisClient"]
