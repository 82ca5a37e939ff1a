import base64

from playwright.sync_api import Error as PlaywrightError

from form_assist.config import CaptureConfig, ServiceConfig
from form_assist.page_utils import capture_screenshot


class BrokenPage:
    def screenshot(self, **kwargs):
        raise PlaywrightError("Target closed")


def test_screenshot_is_a_jpeg_data_url(load_html) -> None:
    page = load_html("<form><input name='q'></form>")
    data_url = capture_screenshot(page, CaptureConfig(enabled=True))
    prefix = "data:image/jpeg;base64,"
    assert data_url.startswith(prefix)
    assert base64.b64decode(data_url[len(prefix):])[:2] == b"\xff\xd8"


def test_screenshot_failure_is_not_fatal() -> None:
    assert capture_screenshot(BrokenPage(), CaptureConfig(enabled=True)) is None


def test_screenshot_can_be_disabled() -> None:
    assert capture_screenshot(BrokenPage(), CaptureConfig(enabled=False)) is None


def test_service_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("FORM_ASSIST_API_URL", "http://localhost:8000/analyze")
    monkeypatch.setenv("FORM_ASSIST_TIMEOUT_S", "12.5")
    monkeypatch.setenv("FORM_ASSIST_USER_ID", "42")
    config = ServiceConfig()
    assert config.api_url == "http://localhost:8000/analyze"
    assert config.timeout_s == 12.5
    assert config.user_id == "42"


def test_capture_config_flag(monkeypatch) -> None:
    monkeypatch.setenv("FORM_ASSIST_SCREENSHOT", "off")
    assert CaptureConfig().enabled is False
