"""Extractive summarization — sentence splitting, scoring and selection.

Each sentence is scored by the average document frequency of its words.  The
highest-scoring sentences are kept and then put back in the order they appear
in the document, so the summary reads in the original narrative order.
"""

import logging
import re

from brief.models import ScoredSentence, Sentence
from brief.tokenizer import build_frequency_table, tokenize

logger = logging.getLogger(__name__)

_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")

# Words of this length or shorter do not contribute to sentence scores.
_SCORING_MIN_LENGTH = 3


def split_sentences(text: str) -> list[Sentence]:
    """Split *text* into sentences terminated by ``.``, ``!`` or ``?``.

    Trailing text without a terminator is not a sentence and is dropped.
    """
    return [
        Sentence(index=i, raw=match.group(0), text=match.group(0).strip())
        for i, match in enumerate(_SENTENCE_RE.finditer(text))
    ]


def score_sentences(text: str, sentences: list[Sentence]) -> list[ScoredSentence]:
    """Score every sentence against the word frequencies of the whole *text*.

    The score is the sum of frequency-table lookups over all of the
    sentence's words, divided by its word count.  Short words are absent from
    the table and count as zero.  A sentence without words scores zero.
    """
    freq = build_frequency_table(tokenize(text), _SCORING_MIN_LENGTH)

    scored: list[ScoredSentence] = []
    for sentence in sentences:
        words = list(tokenize(sentence.raw))
        total = sum(freq.get(word, 0) for word in words)
        score = total / len(words) if words else 0.0
        scored.append(ScoredSentence(index=sentence.index, text=sentence.text, score=score))
    return scored


def select_top(scored: list[ScoredSentence], num_sentences: int) -> list[ScoredSentence]:
    """Keep the *num_sentences* best sentences, returned in document order.

    Equal scores keep their document order (``sorted`` is stable).
    """
    best = sorted(scored, key=lambda s: s.score, reverse=True)[:num_sentences]
    return sorted(best, key=lambda s: s.index)


def extractive_summarize(text: str, num_sentences: int) -> list[str]:
    """Return the *num_sentences* most representative sentences of *text*.

    The count is clamped to the number of sentences available.  If *text*
    has no sentence terminators at all it is returned unchanged as the only
    element.

    Raises:
        ValueError: if ``num_sentences`` is less than 1.
    """
    if num_sentences < 1:
        raise ValueError(f"num_sentences must be >= 1, got {num_sentences}")

    sentences = split_sentences(text)
    if not sentences:
        logger.debug("No sentence boundaries found; returning input unsummarized")
        return [text]

    scored = score_sentences(text, sentences)
    selected = select_top(scored, num_sentences)
    logger.debug(
        "Selected %d of %d sentences (requested %d)",
        len(selected),
        len(sentences),
        num_sentences,
    )
    return [s.text for s in selected]
