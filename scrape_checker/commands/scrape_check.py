"""
Scrape check command

Quick check of whether a URL can be scraped with Playwright: loads the
page, ranks the title selector catalog by hit count and prints title
candidates from the best selectors. ``--trends`` parses the X.com trend
sidebar instead, and ``--raw`` dumps the rendered HTML.
"""

import argparse
import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from playwright.async_api import Error as PlaywrightError

from ..browser import BrowserSession, NavigationError
from ..constants import (
    DEFAULT_TIMEOUT_MS,
    DEFAULT_TOP,
    DEFAULT_URL,
    DEFAULT_WAIT_UNTIL,
    WAIT_UNTIL_CHOICES,
)
from ..cookies import MalformedCookieInput, load_cookie_file
from ..document import SelectorEvaluationError, SoupDocument
from ..extractor import extract_candidates
from ..models import CommandContext, CommandResult
from ..output import Output, output
from ..ranker import count_selector, rank_selectors, top_hits
from ..selectors import ALL_TITLE_SELECTORS, QUICK_SELECTORS
from ..trends import parse_trends
from ..utils import truncate

logger = logging.getLogger(__name__)


@dataclass
class ScrapeCheckOptions:
    """Options for a single scrape check."""
    url: str = DEFAULT_URL
    timeout: int = DEFAULT_TIMEOUT_MS
    wait_until: str = DEFAULT_WAIT_UNTIL
    raw: bool = False
    cookies: Optional[str] = None
    wait: int = 0
    trends: bool = False
    top: int = DEFAULT_TOP
    html_file: Optional[str] = None
    all_selectors: bool = False
    json_output: bool = False

    @property
    def source(self) -> str:
        return self.html_file or self.url


# ------------------------------------------------------------------
# Reporting
# ------------------------------------------------------------------

async def _report_raw(document, options: ScrapeCheckOptions, out: Output) -> CommandResult:
    out.raw(await document.content())
    return CommandResult(success=True, message=f"Raw HTML output for {options.source}")


async def _report_trends(document, options: ScrapeCheckOptions, out: Output) -> CommandResult:
    entries = await parse_trends(document)
    payload = [e.to_dict() for e in entries]

    if entries:
        out.success(f"Found {len(entries)} trends:")
        for i, entry in enumerate(entries, 1):
            out.info(f"  {i}. {entry.trend_name or 'Unknown'}")
            if entry.category:
                out.dim(f"     Category: {entry.category}")
            if entry.post_count:
                out.dim(f"     Posts: {entry.post_count}")
        out.raw(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        out.warn("No trends found")
        if options.json_output:
            out.raw(json.dumps(payload))

    return CommandResult(
        success=True,
        message=f"Parsed {len(entries)} trends from {options.source}",
        data={'trends': payload},
    )


async def _report_ranking(document, options: ScrapeCheckOptions, out: Output) -> CommandResult:
    title = await document.title()
    out.info(f"Title: {title or '(empty)'}")

    meta_desc = await document.meta_description()
    if meta_desc:
        out.info(f"Meta Description: {truncate(meta_desc)}...")

    catalog = ALL_TITLE_SELECTORS if options.all_selectors else QUICK_SELECTORS
    ranking = await rank_selectors(document, catalog)

    out.info(f"Selector hits (top {options.top}):")
    for hit in top_hits(ranking, options.top):
        out.dim(f"  {hit.selector}: {hit.count}")

    groups = await extract_candidates(document, ranking, options.top)
    for group in groups:
        out.success(f"Title candidates ({group.selector}):")
        for i, text in enumerate(group.candidates, 1):
            out.info(f"  {i}. {truncate(text)}")

    link_count = await count_selector(document, 'a')
    out.info(f"Total links: {link_count}")
    out.success("Scrape check completed successfully")

    data: Dict[str, Any] = {
        'url': options.source,
        'title': title,
        'metaDescription': meta_desc,
        'ranking': [hit.to_dict() for hit in ranking],
        'candidates': [g.to_dict() for g in groups],
        'totalLinks': link_count,
    }
    if options.json_output:
        out.raw(json.dumps(data, indent=2, ensure_ascii=False))

    logger.info("Scrape check completed")
    return CommandResult(success=True, message=f"Successfully scraped {options.source}", data=data)


async def analyze_document(document, options: ScrapeCheckOptions, out: Output) -> CommandResult:
    """Run the requested mode (raw, trends or ranking) against a document."""
    if options.raw:
        return await _report_raw(document, options, out)
    if options.trends:
        return await _report_trends(document, options, out)
    return await _report_ranking(document, options, out)


# ------------------------------------------------------------------
# Entry points
# ------------------------------------------------------------------

async def run_scrape_check(options: ScrapeCheckOptions, out: Output) -> CommandResult:
    """Load the target (live page or saved HTML) and analyze it."""
    if options.html_file:
        logger.info("Analyzing saved HTML %s", options.html_file)
        document = SoupDocument.from_file(options.html_file)
        return await analyze_document(document, options, out)

    # Cookies must be valid before the browser is even started
    cookies = load_cookie_file(options.cookies) if options.cookies else []

    async with BrowserSession() as session:
        if cookies:
            added = await session.add_cookies(cookies)
            out.info(f"Loaded {added} cookies")
        document = await session.navigate(
            options.url,
            timeout_ms=options.timeout,
            wait_until=options.wait_until,
            extra_wait_ms=options.wait,
        )
        return await analyze_document(document, options, out)


def scrape_check_action(options: ScrapeCheckOptions, out: Output = output) -> CommandResult:
    """Execute the scrape check command.

    Fatal errors (navigation, cookie input, browser failures) are reported
    and returned as an unsuccessful result rather than raised.
    """
    if options.json_output:
        out = Output(out.console, out.err_console, quiet=True)

    logger.info("Starting scrape check url=%s timeout=%d", options.source, options.timeout)
    out.info(f"Scraping: {options.source}")

    try:
        return asyncio.run(run_scrape_check(options, out))
    except (NavigationError, MalformedCookieInput, SelectorEvaluationError,
            PlaywrightError, OSError) as e:
        message = str(e) or type(e).__name__
        out.error(f"Scrape failed: {message}")
        logger.error("Scrape check failed: %s", message)
        return CommandResult(success=False, message=message)


# ------------------------------------------------------------------
# Argument parser
# ------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {number}")
    return number


def _handle_scrape_check(args: argparse.Namespace, context: CommandContext) -> CommandResult:
    """Handler for the ``scrape-check`` subcommand."""
    options = ScrapeCheckOptions(
        url=args.url,
        timeout=args.timeout,
        wait_until=args.wait_until,
        raw=args.raw,
        cookies=args.cookies,
        wait=args.wait,
        trends=args.trends,
        top=args.top,
        html_file=args.html_file,
        all_selectors=args.all_selectors,
        json_output=args.json_output,
    )
    return scrape_check_action(options, Output(quiet=context.quiet))


def register_scrape_check_command(subparsers) -> argparse.ArgumentParser:
    """Add the ``scrape-check`` subcommand to the CLI."""
    cmd = subparsers.add_parser(
        'scrape-check',
        help='Check if a URL can be scraped with Playwright',
        description='Check if a URL can be scraped with Playwright',
    )
    cmd.add_argument('-u', '--url', default=DEFAULT_URL, help='URL to scrape')
    cmd.add_argument(
        '-t', '--timeout', type=_non_negative_int, default=DEFAULT_TIMEOUT_MS,
        help='Timeout in milliseconds (default 30000)',
    )
    cmd.add_argument(
        '--wait-until', choices=WAIT_UNTIL_CHOICES, default=DEFAULT_WAIT_UNTIL,
        help='Wait condition: load, domcontentloaded, networkidle',
    )
    cmd.add_argument('-r', '--raw', action='store_true', help='Output raw HTML response')
    cmd.add_argument('-c', '--cookies', metavar='FILE', help='JSON file with cookies to use')
    cmd.add_argument(
        '-w', '--wait', type=_non_negative_int, default=0,
        help='Additional wait time after page load (ms)',
    )
    cmd.add_argument('--trends', action='store_true', help='Parse X.com trends')
    cmd.add_argument(
        '--top', type=_non_negative_int, default=DEFAULT_TOP,
        help='Number of selector hits to display (default 3)',
    )
    cmd.add_argument(
        '--html-file', metavar='FILE',
        help='Analyze a saved HTML file instead of loading the URL',
    )
    cmd.add_argument(
        '--all-selectors', action='store_true',
        help='Rank the full selector catalog instead of the quick set',
    )
    cmd.add_argument(
        '--json', dest='json_output', action='store_true',
        help='Print the result as JSON',
    )
    cmd.set_defaults(handler=_handle_scrape_check)
    return cmd
