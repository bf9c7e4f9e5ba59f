"""
Trend listing parser

Parses the X.com "trending" sidebar layout. Each trend container holds a
handful of text spans; which span is the category, the post count or the
trend name is decided by marker strings rather than by position, because
the layout drops the category on some entries.

The markers only cover English and Japanese. Tokens in other locales end
up unclassified (or as the trend name).
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

TREND_CONTAINER_SELECTOR = 'div[data-testid="trend"]'
TREND_TOKEN_SELECTOR = 'span.css-1jxf684'

MIN_TREND_TOKENS = 2

# Field name -> substrings that identify it, checked in this order
TREND_MARKERS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ('category', ('トレンド', 'Trending')),
    ('post_count', ('件のポスト', 'posts')),
)


@dataclass
class TrendEntry:
    """One trend record. Any field may be missing."""

    category: Optional[str] = None
    trend_name: Optional[str] = None
    post_count: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape, unset fields omitted."""
        data = {
            'category': self.category,
            'trendName': self.trend_name,
            'postCount': self.post_count,
        }
        return {k: v for k, v in data.items() if v is not None}


def clean_tokens(raw: Iterable[Optional[str]]) -> List[str]:
    """Trim tokens and drop the empty ones, keeping order."""
    return [t.strip() for t in raw if t and t.strip()]


def _first_marked(tokens: List[str], markers: Tuple[str, ...]) -> Optional[str]:
    for token in tokens:
        if any(marker in token for marker in markers):
            return token
    return None


def parse_trend_tokens(raw_tokens: Iterable[Optional[str]]) -> Optional[TrendEntry]:
    """Build a TrendEntry from one container's tokens.

    Returns None when fewer than two non-empty tokens remain.
    """
    tokens = clean_tokens(raw_tokens)
    if len(tokens) < MIN_TREND_TOKENS:
        return None

    fields = {name: _first_marked(tokens, markers) for name, markers in TREND_MARKERS}
    claimed = set(v for v in fields.values() if v is not None)
    trend_name = next((t for t in tokens if t not in claimed), None)

    return TrendEntry(
        category=fields['category'],
        trend_name=trend_name,
        post_count=fields['post_count'],
    )


async def parse_trends(
    document,
    container_selector: str = TREND_CONTAINER_SELECTOR,
    token_selector: str = TREND_TOKEN_SELECTOR,
) -> List[TrendEntry]:
    """Parse every trend container on the page, in document order."""
    groups = await document.group_texts(container_selector, token_selector)
    entries = []
    for i, group in enumerate(groups):
        entry = parse_trend_tokens(group)
        if entry is None:
            logger.debug("Trend container %d skipped: too few tokens", i)
            continue
        entries.append(entry)
    logger.info("Parsed %d trends from %d containers", len(entries), len(groups))
    return entries
