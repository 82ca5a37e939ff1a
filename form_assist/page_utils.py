from __future__ import annotations

import base64
import logging
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .config import CaptureConfig


def _log_fallback(logger) -> None:
    if logger:
        logger.debug("load state timed out, retrying with domcontentloaded")


def safe_goto(
    page,
    url: str,
    *,
    wait_until: str = "load",
    timeout_ms: int = 20000,
    logger=None,
):
    try:
        return page.goto(url, wait_until=wait_until, timeout=timeout_ms)
    except PlaywrightTimeoutError:
        if wait_until != "load":
            raise
        _log_fallback(logger)
        return page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)


def capture_screenshot(
    page,
    config: Optional[CaptureConfig] = None,
    logger: Optional[logging.Logger] = None,
) -> Optional[str]:
    """JPEG screenshot of the viewport as a data URL, or None on any failure."""
    config = config or CaptureConfig()
    if not config.enabled:
        return None
    try:
        data = page.screenshot(
            type="jpeg",
            quality=config.quality,
            full_page=config.full_page,
            scale="css",
        )
    except PlaywrightError as exc:
        (logger or logging.getLogger(__name__)).warning("Screenshot failed: %s", exc)
        return None
    return "data:image/jpeg;base64," + base64.b64encode(data).decode("ascii")
