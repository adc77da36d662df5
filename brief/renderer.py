"""Render selected sentences and summary results as text.

No I/O is performed here; the caller (``cli.py``) is responsible for
writing the returned string to stdout.
"""

from typing import Sequence

from brief.models import SummaryFormat, SummaryResult

# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------


def format_summary(sentences: Sequence[str], fmt: SummaryFormat) -> str:
    """Join the selected sentences into the final summary string.

    ``paragraph`` joins them with single spaces; ``bullets`` puts each on
    its own line prefixed with a 1-based ``"N. "`` counter.

    Raises:
        ValueError: if ``fmt`` is not a known format.
    """
    if fmt == "paragraph":
        return " ".join(sentences)
    if fmt == "bullets":
        return _render_numbered(sentences)
    raise ValueError(f"Unknown summary format: {fmt!r}")


def render_report(result: SummaryResult) -> str:
    """Render a successful ``SummaryResult`` for terminal output.

    The summary comes first, followed by a ``Keywords:`` line when any
    keywords were found.
    """
    assert result.summary is not None
    parts = [result.summary]
    if result.keywords:
        parts.append(f"Keywords: {', '.join(result.keywords)}")
    return "\n\n".join(parts)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _render_numbered(items: Sequence[str]) -> str:
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=1))
