"""
Scraping Checker

Checks arbitrary web pages for their most likely title/headline elements
by ranking a catalog of generic CSS selectors by hit count.
"""

__version__ = "1.0.0"

from .cookies import CanonicalCookie, MalformedCookieInput, load_cookie_file, normalize_cookies
from .document import PlaywrightDocument, SelectorEvaluationError, SoupDocument
from .extractor import SelectorCandidates, extract_candidates
from .ranker import HitResult, rank_selectors, top_hits
from .selectors import ALL_TITLE_SELECTORS, QUICK_SELECTORS, TITLE_SELECTORS
from .trends import TrendEntry, parse_trend_tokens, parse_trends

__all__ = [
    "ALL_TITLE_SELECTORS",
    "CanonicalCookie",
    "HitResult",
    "MalformedCookieInput",
    "PlaywrightDocument",
    "QUICK_SELECTORS",
    "SelectorCandidates",
    "SelectorEvaluationError",
    "SoupDocument",
    "TITLE_SELECTORS",
    "TrendEntry",
    "extract_candidates",
    "load_cookie_file",
    "normalize_cookies",
    "parse_trend_tokens",
    "parse_trends",
    "rank_selectors",
    "top_hits",
]
