#!/usr/bin/env python3
"""
Scraping checker CLI

Usage examples::

    scraping-checker scrape-check --url https://example.com --top 5
    scraping-checker scrape-check --html-file page.html --all-selectors --json
    scraping-checker scrape-check --url https://x.com/explore --trends -c cookies.json
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .commands import register_commands
from .config import ConfigurationError, get_settings
from .constants import EXIT_CODES
from .models import CommandContext
from .output import Output
from .utils import setup_logging

logger = logging.getLogger(__name__)


class CheckerArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with INVALID_ARGUMENT on bad input."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_CODES['INVALID_ARGUMENT'], f"{self.prog}: error: {message}\n")


def build_parser(prog: str = "scraping-checker") -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = CheckerArgumentParser(
        prog=prog,
        description="Web scraping checker CLI with Playwright",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress output")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subs = parser.add_subparsers(dest="command")
    register_commands(subs)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry-point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    out = Output(quiet=args.quiet)

    try:
        settings = get_settings()
    except ConfigurationError as e:
        out.error(f"Configuration error: {e}")
        return EXIT_CODES['CONFIGURATION_ERROR']

    level = logging.DEBUG if args.debug else settings.logging_level
    setup_logging(level, json_output=settings.is_production)

    if args.command is None:
        parser.print_help()
        return EXIT_CODES['SUCCESS']

    context = CommandContext(command_name=args.command, quiet=args.quiet, debug=args.debug)
    try:
        result = args.handler(args, context)
    except Exception as e:
        logger.exception("CLI error")
        out.error(str(e) or "An unknown error occurred")
        return EXIT_CODES['FAILURE']

    return EXIT_CODES['SUCCESS'] if result.success else EXIT_CODES['FAILURE']


if __name__ == "__main__":
    sys.exit(main())
