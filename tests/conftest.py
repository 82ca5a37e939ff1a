import textwrap
from typing import Callable, Iterator

import pytest
from playwright.sync_api import Browser, Error as PlaywrightError, Page, sync_playwright


@pytest.fixture(scope="session")
def browser() -> Iterator[Browser]:
    with sync_playwright() as playwright:
        try:
            browser = playwright.chromium.launch(headless=True)
        except PlaywrightError as exc:
            pytest.skip(f"Chromium is not available: {exc}")
        yield browser
        browser.close()


@pytest.fixture()
def page(browser: Browser) -> Iterator[Page]:
    context = browser.new_context()
    page = context.new_page()
    yield page
    context.close()


@pytest.fixture()
def load_html(page: Page) -> Callable[[str], Page]:
    def _load(body: str) -> Page:
        page.set_content(
            "<!doctype html><html><head><meta charset='utf-8'></head><body>"
            + textwrap.dedent(body)
            + "</body></html>"
        )
        return page

    return _load
