"""Per-request orchestration — turns one SummaryRequest into a SummaryResult.

Validation runs first; a request that fails it never reaches the scorer.  The
summary and the keywords are computed independently from the same input
text, and either both are returned or an error is returned instead.
"""

import logging
import time
from concurrent.futures import Executor, Future

from brief.extractive import extractive_summarize
from brief.keywords import extract_keywords
from brief.models import (
    MIN_CHARS,
    SENTENCE_COUNTS,
    Config,
    EmptyInputError,
    ProcessingError,
    SummarizerError,
    SummaryRequest,
    SummaryResult,
    TooShortError,
)
from brief.renderer import format_summary

logger = logging.getLogger(__name__)


def validate_text(text: str, min_chars: int = MIN_CHARS) -> None:
    """Check the request preconditions on the raw input text.

    Raises:
        EmptyInputError: if ``text`` is blank after stripping.
        TooShortError:   if ``text`` has fewer than ``min_chars`` characters.
    """
    if not text.strip():
        raise EmptyInputError()
    if len(text) < min_chars:
        raise TooShortError(min_chars)


def process_text(request: SummaryRequest, config: Config | None = None) -> SummaryResult:
    """Validate and summarize one request, raising on failure.

    Steps
    -----
    1. Validate the input (emptiness, minimum length).
    2. Wait ``config.delay_s`` seconds, if configured.
    3. Select and format the summary sentences.
    4. Extract keywords from the same text.

    Raises:
        EmptyInputError, TooShortError: if validation fails.
        ProcessingError: wraps any other exception raised while scoring or
            formatting.
    """
    config = config or Config()
    validate_text(request.text, config.min_chars)

    try:
        return _run_pipeline(request, config)
    except SummarizerError:
        raise
    except Exception as e:
        raise ProcessingError(e) from e


def _run_pipeline(request: SummaryRequest, config: Config) -> SummaryResult:
    if config.delay_s > 0:
        logger.debug("Simulating processing delay of %.2fs", config.delay_s)
        time.sleep(config.delay_s)

    started = time.perf_counter()
    num_sentences = SENTENCE_COUNTS[request.length]
    sentences = extractive_summarize(request.text, num_sentences)
    summary = format_summary(sentences, request.format)
    keywords = extract_keywords(request.text, config.keyword_limit)

    logger.info(
        "Summarized %s chars into %d sentence(s), %d keyword(s) in %.1f ms",
        f"{len(request.text):,}",
        len(sentences),
        len(keywords),
        (time.perf_counter() - started) * 1000,
    )
    return SummaryResult(summary=summary, sentences=sentences, keywords=keywords)


def summarize(request: SummaryRequest, config: Config | None = None) -> SummaryResult:
    """Run one request and settle it into a ``SummaryResult``.

    Unlike ``process_text`` this never raises for user-facing errors: the
    error message is returned in ``SummaryResult.error`` and no partial output
    accompanies it.
    """
    try:
        return process_text(request, config)
    except ProcessingError as exc:
        logger.debug("Processing failed", exc_info=exc.cause)
        return SummaryResult.failure(str(exc))
    except SummarizerError as exc:
        logger.debug("Request rejected: %s", exc)
        return SummaryResult.failure(str(exc))


def submit_summary(
    request: SummaryRequest, config: Config | None, executor: Executor
) -> "Future[SummaryResult]":
    """Schedule ``summarize`` on *executor* and return its future.

    The future can be cancelled until the worker picks it up; once running,
    the request always completes and settles a result.
    """
    return executor.submit(summarize, request, config)
