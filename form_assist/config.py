"""Runtime configuration, overridable through environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

API_URL_ENV = "FORM_ASSIST_API_URL"
DEFAULT_API_URL = "https://profolio.com/api/assistant/analyze"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ServiceConfig:
    api_url: str = field(default_factory=lambda: os.getenv(API_URL_ENV, DEFAULT_API_URL))
    timeout_s: float = field(
        default_factory=lambda: float(os.getenv("FORM_ASSIST_TIMEOUT_S", "60"))
    )
    user_id: Optional[str] = field(default_factory=lambda: os.getenv("FORM_ASSIST_USER_ID"))


@dataclass(frozen=True)
class CaptureConfig:
    enabled: bool = field(default_factory=lambda: _env_flag("FORM_ASSIST_SCREENSHOT", True))
    quality: int = 70
    full_page: bool = False


@dataclass(frozen=True)
class AppConfig:
    service: ServiceConfig = field(default_factory=ServiceConfig)
    capture: CaptureConfig = field(default_factory=CaptureConfig)


def load_config() -> AppConfig:
    return AppConfig()


__all__ = ["ServiceConfig", "CaptureConfig", "AppConfig", "load_config"]
