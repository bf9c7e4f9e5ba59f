#!/usr/bin/env python3
"""
Tests for the browser session, run against fake Playwright objects
"""

import asyncio
import io

import pytest
from playwright.async_api import Error as PlaywrightError, TimeoutError as PlaywrightTimeoutError
from rich.console import Console

from scrape_checker import browser
from scrape_checker.browser import BrowserSession, NavigationError
from scrape_checker.commands import scrape_check
from scrape_checker.commands.scrape_check import ScrapeCheckOptions, scrape_check_action
from scrape_checker.cookies import CanonicalCookie
from scrape_checker.document import PlaywrightDocument
from scrape_checker.output import Output


class FakePage:
    def __init__(self, error=None):
        self.error = error
        self.visits = []
        self.waits = []

    async def goto(self, url, timeout=None, wait_until=None):
        self.visits.append((url, timeout, wait_until))
        if self.error:
            raise self.error

    async def wait_for_timeout(self, ms):
        self.waits.append(ms)


class FakeContext:
    def __init__(self, page):
        self.page = page
        self.cookies = []
        self.closed = False

    async def new_page(self):
        return self.page

    async def add_cookies(self, cookies):
        self.cookies.extend(cookies)

    async def close(self):
        self.closed = True


def _session(page):
    session = BrowserSession()
    session.context = FakeContext(page)
    return session


def test_navigate_returns_document():
    page = FakePage()
    session = _session(page)

    document = asyncio.run(session.navigate("https://example.com", timeout_ms=5000,
                                            wait_until="load", extra_wait_ms=250))

    assert isinstance(document, PlaywrightDocument)
    assert document.page is page
    assert page.visits == [("https://example.com", 5000, "load")]
    assert page.waits == [250]


def test_navigate_timeout_is_navigation_error():
    session = _session(FakePage(PlaywrightTimeoutError("x")))
    with pytest.raises(NavigationError, match="Timed out after 100ms loading https://example.com"):
        asyncio.run(session.navigate("https://example.com", timeout_ms=100))


def test_navigate_failure_is_navigation_error():
    session = _session(FakePage(PlaywrightError("net::ERR_NAME_NOT_RESOLVED")))
    with pytest.raises(NavigationError) as exc:
        asyncio.run(session.navigate("https://nowhere.invalid", timeout_ms=100))
    assert "Could not load https://nowhere.invalid" in str(exc.value)
    assert "ERR_NAME_NOT_RESOLVED" in str(exc.value)


def test_failed_navigation_does_not_wait():
    page = FakePage(PlaywrightTimeoutError("x"))
    with pytest.raises(NavigationError):
        asyncio.run(_session(page).navigate("https://example.com", timeout_ms=100, extra_wait_ms=500))
    assert page.waits == []


def test_document_before_navigation():
    with pytest.raises(NavigationError, match="No page loaded"):
        BrowserSession().document()


def test_document_after_navigation():
    page = FakePage()
    session = _session(page)
    asyncio.run(session.navigate("https://example.com", timeout_ms=100))
    assert session.document().page is page


def test_add_cookies():
    session = _session(FakePage())
    cookies = [CanonicalCookie(name="sid", value="1", domain="x.com", same_site="Lax")]

    assert asyncio.run(session.add_cookies(cookies)) == 1
    assert session.context.cookies == [{
        "name": "sid", "value": "1", "domain": "x.com",
        "httpOnly": False, "secure": False, "sameSite": "Lax",
    }]
    assert asyncio.run(session.add_cookies([])) == 0


def test_close_releases_context():
    session = _session(FakePage())
    context = session.context
    asyncio.run(session.close())
    assert context.closed
    assert session.context is None and session.page is None


# ------------------------------------------------------------------
# Browser startup
# ------------------------------------------------------------------

class FakeChromium:
    async def launch(self, headless=True):
        raise PlaywrightError("Executable doesn't exist")


class FakePlaywright:
    def __init__(self):
        self.chromium = FakeChromium()
        self.stopped = False

    async def stop(self):
        self.stopped = True


class FakePlaywrightManager:
    def __init__(self, playwright):
        self.playwright = playwright

    async def start(self):
        return self.playwright


def test_failed_launch_stops_playwright(monkeypatch):
    driver = FakePlaywright()
    monkeypatch.setattr(browser, "async_playwright", lambda: FakePlaywrightManager(driver))

    async def enter():
        async with BrowserSession():
            pass

    with pytest.raises(PlaywrightError):
        asyncio.run(enter())
    assert driver.stopped


# ------------------------------------------------------------------
# Command behaviour
# ------------------------------------------------------------------

def _offline_session(page):
    class OfflineSession(BrowserSession):
        async def init_browser(self):
            self.context = FakeContext(page)
    return OfflineSession


def test_navigation_error_fails_the_command(monkeypatch):
    monkeypatch.setattr(scrape_check, "BrowserSession",
                        _offline_session(FakePage(PlaywrightTimeoutError("x"))))
    err_buf = io.StringIO()
    out = Output(console=Console(file=io.StringIO()), err_console=Console(file=err_buf, width=200))

    result = scrape_check_action(ScrapeCheckOptions(url="https://example.com", timeout=50), out)

    assert not result.success
    assert result.message == "Timed out after 50ms loading https://example.com"
    assert result.data is None
    assert "Scrape failed" in err_buf.getvalue()
