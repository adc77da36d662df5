"""Word tokenizer and term-frequency tables.

Tokens are lowercase runs of word characters; there is no stemming and no
language-specific handling beyond what ``\\w`` matches.
"""

import re
from collections import Counter
from typing import Iterable, Iterator

_WORD_RE = re.compile(r"\w+")

# Curated function words excluded from keyword ranking only.
KEYWORD_STOP_WORDS = frozenset(
    {
        "the", "is", "at", "which", "on", "a", "an", "and", "or", "but",
        "in", "with", "to", "for", "of", "as", "by", "that", "this", "it",
        "from", "be", "are", "was", "were", "been", "have", "has", "had",
        "do", "does", "did", "will", "would", "could", "should", "may",
        "might", "can",
    }
)


def tokenize(text: str) -> Iterator[str]:
    """Yield the lowercase word tokens of *text* in document order.

    Yields nothing for empty input or text without word characters.
    """
    for match in _WORD_RE.finditer(text.lower()):
        yield match.group(0)


def build_frequency_table(
    tokens: Iterable[str],
    min_length: int,
    stop_words: frozenset[str] = frozenset(),
) -> Counter[str]:
    """Count tokens longer than *min_length* that are not stop words.

    The returned ``Counter`` iterates in first-appearance order, which the
    keyword ranking relies on for tie-breaking.
    """
    return Counter(
        token
        for token in tokens
        if len(token) > min_length and token not in stop_words
    )
