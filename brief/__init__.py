"""
brief — local extractive summarizer and keyword extractor.

Scores sentences by term frequency, keeps the top few in document order, and
ranks keywords by frequency. No network calls and no language model.
"""

__version__ = "0.1.0"

from brief.extractive import extractive_summarize
from brief.keywords import extract_keywords
from brief.models import SummaryRequest, SummaryResult
from brief.pipeline import summarize
from brief.renderer import format_summary

__all__ = [
    "SummaryRequest",
    "SummaryResult",
    "extract_keywords",
    "extractive_summarize",
    "format_summary",
    "summarize",
]
