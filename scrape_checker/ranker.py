"""
Selector ranking

Counts how many elements each catalog selector hits on a document and
orders the selectors by hit count.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List

from .document import SelectorEvaluationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HitResult:
    """Number of elements matching ``selector`` in the current document."""

    selector: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


async def count_selector(document, selector: str) -> int:
    """Count matches for one selector; evaluation failures count as zero."""
    try:
        return await document.count_matches(selector)
    except SelectorEvaluationError as e:
        logger.debug("Treating selector as zero hits: %s", e)
        return 0


async def rank_selectors(document, catalog: Iterable[str]) -> List[HitResult]:
    """Rank catalog selectors by hit count, highest first.

    Selectors are queried one at a time in catalog order. Ties keep their
    catalog order (``sorted`` is stable), so the same document always gives
    the same ranking.
    """
    results = []
    for selector in catalog:
        count = await count_selector(document, selector)
        results.append(HitResult(selector=selector, count=count))

    ranking = sorted(results, key=lambda r: r.count, reverse=True)
    logger.debug("Ranked %d selectors", len(ranking))
    return ranking


def top_hits(ranking: List[HitResult], n: int) -> List[HitResult]:
    """First ``n`` entries of a ranking."""
    return ranking[:max(n, 0)]
