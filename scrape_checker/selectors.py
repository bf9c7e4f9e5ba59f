"""
Title selector catalog

Generic CSS selectors that tend to hit headline or title elements on
arbitrary pages. Categories are informational only; ranking works on the
flattened, ordered tuple.
"""

from types import MappingProxyType
from typing import Iterable, Optional, Tuple


TITLE_SELECTORS = MappingProxyType({
    # Basic heading selectors
    'headings': ('h1', 'h2', 'h3', 'h4'),

    # Article / news title selectors
    'article': (
        'article h1',
        'article h2',
        'article .title',
        'article .headline',
        "[class*='article'] h1",
        "[class*='article'] h2",
        "[class*='Article'] h1",
        "[class*='headline']",
        "[class*='Headline']",
        '.entry-title',
        '.post-title',
        '.story-title',
        "[class*='story'] h1",
        "[class*='story-body'] h1",
        "[data-testid='article-body'] h1",
        "[data-testid*='card'] a",
    ),

    # News site link patterns
    'news': (
        "a[href*='/news/']",
        "a[href*='/news/articles/']",
        "a[href*='/article/']",
        "[class*='PagePromo'] a",
        "[class*='story'] a",
        '.fxs_headline_tiny',
        '.fxs_entryHeadline a',
        "[class*='headline'] a",
    ),

    # Blog / content selectors
    'blog': (
        '.blog-title',
        '.entry-title',
        '.post-title',
        "[class*='post'] h1",
        "[class*='post'] h2",
        "[class*='entry'] h1",
        "[class*='entry'] h2",
        "a[href*='/li/']",  # Togetter style
        '.ranking-list a',
        '.list-item a',
        "h1 > a[href*='archives']",
    ),

    'youtube': (
        '#video-title',
        'a#video-title-link',
        'ytd-rich-item-renderer #video-title',
        "a[href*='watch'] #video-title",
    ),

    'twitter': (
        "[data-testid='tweetText']",
        "article[data-testid='tweet'] [data-testid='tweetText']",
        "a[href*='/status/']",
    ),

    # E-commerce / product selectors
    'product': (
        '.product-title',
        '.item-title',
        "[class*='product'] h1",
        "[class*='product'] h2",
        'h2.a-size-medium span',  # Amazon
        "div[data-component-type='s-search-result'] h2 span",
        '.grid h3',
        '.grid.grid-cols-3 h3',
        "[class*='hover:text-primary']",
    ),

    # Comic / manga listings
    'comic': (
        "a[href*='/magazine/'] span",
        '.post-list-image + span',
        "[class*='text-gray-100']",
        "h3[class*='hover:text-primary']",
    ),

    'generic': (
        '.title',
        '.heading',
        '.header',
        "[class*='title']",
        "[class*='Title']",
        "[class*='heading']",
        "[class*='Heading']",
        'span.title',
        'div.title',
        'a.title',
        'strong a',  # Burrn style
        '.box_body h1',
        '.tweet_box h1',
    ),

    'data_attributes': (
        '[data-title]',
        '[data-headline]',
        "[data-testid*='title']",
        "[data-testid*='headline']",
        "[data-component-type*='title']",
    ),

    # Link-based title extraction
    'links': (
        'a[href] h1',
        'a[href] h2',
        'a[href] h3',
        'a[href] span',
        'a[href] .title',
        'article a',
        "[class*='card'] a",
        "[class*='Card'] a",
        'li a',
        'ul li a',
    ),
})

# Default catalog for a quick check
QUICK_SELECTORS: Tuple[str, ...] = (
    '[title]',
    'h1',
    'h2',
    'h3',
    'article h1',
    '.entry-title',
    '.post-title',
    "[class*='title']",
    "[class*='headline']",
    "[class*='card'] a",
)


def _flatten(groups: Iterable[Tuple[str, ...]]) -> Tuple[str, ...]:
    """Concatenate selector groups, keeping only the first occurrence."""
    seen = set()
    flat = []
    for group in groups:
        for selector in group:
            if selector not in seen:
                seen.add(selector)
                flat.append(selector)
    return tuple(flat)


def build_catalog(categories: Optional[Iterable[str]] = None) -> Tuple[str, ...]:
    """Return the flattened catalog for the given categories (all by default).

    Raises:
        ValueError: if a category name is unknown.
    """
    if categories is None:
        names = list(TITLE_SELECTORS)
    else:
        names = list(categories)
        unknown = [n for n in names if n not in TITLE_SELECTORS]
        if unknown:
            raise ValueError(f"Unknown selector categories: {', '.join(unknown)}")
    return _flatten(TITLE_SELECTORS[name] for name in names)


ALL_TITLE_SELECTORS: Tuple[str, ...] = build_catalog()
