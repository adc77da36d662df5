"""Shared pytest fixtures for the brief test suite."""

import logging

import pytest


# ---------------------------------------------------------------------------
# Logger isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_brief_logger():
    """Clear the brief logger between tests.

    Tests that call ``main()`` trigger ``setup_logging()``, which attaches
    handlers and sets ``propagate=False``.  Without this fixture the state
    leaks into subsequent tests and breaks ``caplog`` capture.
    """
    logger = logging.getLogger("brief")
    for h in logger.handlers[:]:
        h.close()
        logger.removeHandler(h)
    logger.propagate = True
    yield
    for h in logger.handlers[:]:
        h.close()
        logger.removeHandler(h)
    logger.propagate = True


# ---------------------------------------------------------------------------
# Sample documents
# ---------------------------------------------------------------------------

CLIMATE_TEXT = (
    "Climate change affects agriculture. "
    "Climate change affects agriculture. "
    "Random filler text here."
)

ARTICLE_TEXT = (
    "Solar power is growing quickly across many regions of the world. "
    "Falling panel prices have made solar power cheaper than coal in several markets. "
    "Some people still prefer to cook dinner at home. "
    "Grid operators now plan storage to balance solar power during the evening. "
    "The weather was pleasant on Tuesday! "
    "Will solar power and storage replace older plants entirely? "
    "Analysts expect solar power capacity to double within a decade."
)


@pytest.fixture
def climate_text() -> str:
    """Three sentences; the first two are identical and share every key term."""
    return CLIMATE_TEXT


@pytest.fixture
def article_text() -> str:
    """Seven sentences about solar power with a few off-topic fillers."""
    return ARTICLE_TEXT
