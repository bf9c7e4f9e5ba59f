"""
Command registry

Every CLI subcommand registers itself here.
"""

from .scrape_check import (
    ScrapeCheckOptions,
    register_scrape_check_command,
    scrape_check_action,
)


def register_commands(subparsers) -> None:
    """Register all commands with the CLI parser."""
    register_scrape_check_command(subparsers)


__all__ = [
    "ScrapeCheckOptions",
    "register_commands",
    "register_scrape_check_command",
    "scrape_check_action",
]
