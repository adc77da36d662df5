"""Keyword extraction by term frequency."""

import logging

from brief.models import KEYWORD_LIMIT
from brief.tokenizer import KEYWORD_STOP_WORDS, build_frequency_table, tokenize

logger = logging.getLogger(__name__)

# Only words longer than this are keyword candidates.
_KEYWORD_MIN_LENGTH = 4


def extract_keywords(text: str, limit: int = KEYWORD_LIMIT) -> list[str]:
    """Return up to *limit* distinct keywords of *text*, most frequent first.

    Candidates are words longer than four characters that are not in
    ``KEYWORD_STOP_WORDS``.  Words with equal counts keep the order of their
    first appearance.

    Raises:
        ValueError: if ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    freq = build_frequency_table(tokenize(text), _KEYWORD_MIN_LENGTH, KEYWORD_STOP_WORDS)
    ranked = sorted(freq.items(), key=lambda item: item[1], reverse=True)
    logger.debug("Ranked %d keyword candidates", len(ranked))
    return [word for word, _ in ranked[:limit]]
