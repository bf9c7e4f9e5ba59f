"""
Document providers

A document is anything that can count selector matches and read the
attribute or text of the i-th match. Two providers are available:

* ``PlaywrightDocument`` wraps a live Playwright page.
* ``SoupDocument`` wraps static HTML (a saved page) parsed with BeautifulSoup.

Both expose the same async methods so the ranking, extraction and trend
code never has to know which one it is talking to.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup
from playwright.async_api import Page, Error as PlaywrightError
from soupsieve import SelectorSyntaxError

logger = logging.getLogger(__name__)


class SelectorEvaluationError(Exception):
    """Raised when a selector is invalid or cannot be evaluated."""

    def __init__(self, selector: str, reason: str):
        super().__init__(f"Selector {selector!r} failed: {reason}")
        self.selector = selector
        self.reason = reason


# ------------------------------------------------------------------
# Playwright (live page)
# ------------------------------------------------------------------

_COUNT_JS = "els => els.length"
_ATTRIBUTE_JS = "(els, [i, name]) => els[i] ? els[i].getAttribute(name) : null"
_TEXT_JS = "(els, i) => els[i] ? els[i].textContent : null"
_GROUP_JS = """(els, inner) => els.map(el =>
    Array.from(el.querySelectorAll(inner)).map(s => s.textContent))"""


class PlaywrightDocument:
    """Document backed by a live Playwright page."""

    def __init__(self, page: Page):
        self.page = page

    async def _eval_all(self, selector: str, script: str, arg=None):
        # eval_on_selector_all never waits for elements to appear
        try:
            return await self.page.eval_on_selector_all(selector, script, arg)
        except PlaywrightError as e:
            raise SelectorEvaluationError(selector, e.message) from e

    async def count_matches(self, selector: str) -> int:
        return int(await self._eval_all(selector, _COUNT_JS))

    async def get_attribute(self, selector: str, index: int, name: str) -> Optional[str]:
        return await self._eval_all(selector, _ATTRIBUTE_JS, [index, name])

    async def get_text_content(self, selector: str, index: int) -> Optional[str]:
        return await self._eval_all(selector, _TEXT_JS, index)

    async def group_texts(self, container: str, inner: str) -> List[List[Optional[str]]]:
        """Text of every ``inner`` match, grouped per ``container`` match."""
        return await self._eval_all(container, _GROUP_JS, inner)

    async def title(self) -> str:
        return await self.page.title()

    async def meta_description(self) -> Optional[str]:
        try:
            return await self.get_attribute('meta[name="description"]', 0, 'content')
        except SelectorEvaluationError:
            return None

    async def content(self) -> str:
        return await self.page.content()


# ------------------------------------------------------------------
# BeautifulSoup (static HTML)
# ------------------------------------------------------------------


class SoupDocument:
    """Document backed by static HTML."""

    def __init__(self, html: str, parser: str = 'html.parser'):
        self.html = html
        self.soup = BeautifulSoup(html, parser)

    @classmethod
    def from_file(cls, path: str) -> 'SoupDocument':
        with open(path, 'r', encoding='utf-8', errors='ignore') as f:
            return cls(f.read())

    def _select(self, selector: str, root=None):
        root = self.soup if root is None else root
        try:
            return root.select(selector)
        except (SelectorSyntaxError, NotImplementedError, ValueError) as e:
            raise SelectorEvaluationError(selector, str(e)) from e

    def _nth(self, selector: str, index: int):
        matches = self._select(selector)
        return matches[index] if 0 <= index < len(matches) else None

    async def count_matches(self, selector: str) -> int:
        return len(self._select(selector))

    async def get_attribute(self, selector: str, index: int, name: str) -> Optional[str]:
        el = self._nth(selector, index)
        if el is None:
            return None
        value = el.get(name)
        # multi-valued attributes (class, rel) come back as lists
        if isinstance(value, list):
            return ' '.join(value)
        return value

    async def get_text_content(self, selector: str, index: int) -> Optional[str]:
        el = self._nth(selector, index)
        return el.get_text() if el is not None else None

    async def group_texts(self, container: str, inner: str) -> List[List[Optional[str]]]:
        return [
            [s.get_text() for s in self._select(inner, root=el)]
            for el in self._select(container)
        ]

    async def title(self) -> str:
        if self.soup.title and self.soup.title.string:
            return self.soup.title.string.strip()
        return ''

    async def meta_description(self) -> Optional[str]:
        return await self.get_attribute('meta[name="description"]', 0, 'content')

    async def content(self) -> str:
        return self.html
