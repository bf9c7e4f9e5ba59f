"""
Title candidate extraction

Samples the first few elements of the best ranked selectors and proposes
their text as possible page titles.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .document import SelectorEvaluationError
from .ranker import HitResult, top_hits

logger = logging.getLogger(__name__)

# Maximum candidates sampled per selector
MAX_CANDIDATES_PER_SELECTOR = 5

TITLE_ATTRIBUTE = 'title'


@dataclass
class SelectorCandidates:
    """Title candidates sampled from one selector, in document order."""

    selector: str
    count: int
    candidates: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'selector': self.selector,
            'count': self.count,
            'candidates': list(self.candidates),
        }


async def element_text(document, selector: str, index: int) -> str:
    """Trimmed text for one element.

    An element carrying a ``title`` attribute is represented by that
    attribute, even when it is blank; otherwise by its text content.
    """
    title = await document.get_attribute(selector, index, TITLE_ATTRIBUTE)
    if title is not None:
        return title.strip()
    text: Optional[str] = await document.get_text_content(selector, index)
    return (text or '').strip()


async def sample_candidates(
    document,
    hit: HitResult,
    limit: int = MAX_CANDIDATES_PER_SELECTOR,
) -> List[str]:
    """Non-empty texts of the first ``limit`` elements matching ``hit``."""
    texts = []
    for index in range(min(hit.count, limit)):
        try:
            text = await element_text(document, hit.selector, index)
        except SelectorEvaluationError as e:
            logger.debug("Skipping element %d of %s: %s", index, hit.selector, e)
            continue
        if text:
            texts.append(text)
    return texts


async def extract_candidates(
    document,
    ranking: List[HitResult],
    top_n: int,
    per_selector: int = MAX_CANDIDATES_PER_SELECTOR,
) -> List[SelectorCandidates]:
    """Candidates for the first ``top_n`` ranked selectors that hit anything.

    Selectors whose sampled elements are all blank are left out.
    """
    results = []
    for hit in top_hits(ranking, top_n):
        if hit.count <= 0:
            continue
        texts = await sample_candidates(document, hit, per_selector)
        if texts:
            results.append(SelectorCandidates(hit.selector, hit.count, texts))
        else:
            logger.debug("No usable text under %s", hit.selector)
    return results
