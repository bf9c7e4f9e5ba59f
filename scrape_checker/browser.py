"""
Headless browser session

Owns the Playwright lifecycle (playwright -> browser -> context -> page)
for a single scrape check and exposes the loaded page as a document.
"""

import logging
from typing import List, Optional

from playwright.async_api import (
    async_playwright,
    Page,
    BrowserContext,
    Browser,
    Playwright,
    Error as PlaywrightError,
    TimeoutError as PlaywrightTimeoutError,
)

from .constants import DEFAULT_USER_AGENT, DEFAULT_VIEWPORT, DEFAULT_WAIT_UNTIL
from .cookies import CanonicalCookie
from .document import PlaywrightDocument

logger = logging.getLogger(__name__)


class NavigationError(Exception):
    """Raised when the target page cannot be loaded in time."""


class BrowserSession:
    """Playwright-backed session used by the scrape-check command."""

    def __init__(self, headless: bool = True, user_agent: str = DEFAULT_USER_AGENT):
        self.headless = headless
        self.user_agent = user_agent
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None

    async def __aenter__(self):
        await self.init_browser()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def init_browser(self):
        """Launch browser and create a desktop-sized context."""
        if self.context:
            return

        try:
            self.playwright = await async_playwright().start()
            self.browser = await self.playwright.chromium.launch(headless=self.headless)
            self.context = await self.browser.new_context(
                user_agent=self.user_agent,
                viewport=DEFAULT_VIEWPORT,
            )
        except Exception:
            # __aexit__ does not run when __aenter__ fails
            await self.close()
            raise
        logger.debug("Browser launched (headless=%s)", self.headless)

    async def close(self):
        """Clean up browser resources."""
        if self.context:
            await self.context.close()
        if self.browser:
            await self.browser.close()
        if self.playwright:
            await self.playwright.stop()
        self.page = self.context = self.browser = self.playwright = None

    async def add_cookies(self, cookies: List[CanonicalCookie]) -> int:
        """Inject cookies before navigation. Returns the number added."""
        if not cookies:
            return 0
        await self.context.add_cookies([c.to_playwright() for c in cookies])
        logger.info("Injected %d cookies", len(cookies))
        return len(cookies)

    async def navigate(
        self,
        url: str,
        timeout_ms: int,
        wait_until: str = DEFAULT_WAIT_UNTIL,
        extra_wait_ms: int = 0,
    ) -> PlaywrightDocument:
        """Open ``url`` in a new page and return it as a document.

        Raises:
            NavigationError: on timeout or any navigation failure.
        """
        if self.page is None:
            self.page = await self.context.new_page()

        logger.info("Navigating to %s (timeout=%dms, wait_until=%s)", url, timeout_ms, wait_until)
        try:
            await self.page.goto(url, timeout=timeout_ms, wait_until=wait_until)
        except PlaywrightTimeoutError as e:
            raise NavigationError(f"Timed out after {timeout_ms}ms loading {url}") from e
        except PlaywrightError as e:
            raise NavigationError(f"Could not load {url}: {e.message}") from e

        if extra_wait_ms > 0:
            await self.page.wait_for_timeout(extra_wait_ms)

        return self.document()

    def document(self) -> PlaywrightDocument:
        """The current page as a document.

        Raises:
            NavigationError: if no page has been loaded yet.
        """
        if self.page is None:
            raise NavigationError("No page loaded; call navigate() first")
        return PlaywrightDocument(self.page)
