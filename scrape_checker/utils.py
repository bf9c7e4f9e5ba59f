"""
Utility functions for the scraping checker
"""
import logging

import structlog

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logging.addLevelName(5, 'TRACE')


def _json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Render standard library log records as one JSON object per line."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )


def setup_logging(level=logging.INFO, json_output: bool = False):
    """Setup logging configuration

    Production runs log JSON lines through structlog; everything else
    uses the plain text format.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(_json_formatter() if json_output else logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)
    return logging.getLogger('scrape_checker')


def truncate(text: str, limit: int = 100) -> str:
    """Cut ``text`` to at most ``limit`` characters."""
    return text[:limit]
