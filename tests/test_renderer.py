"""Tests for brief/renderer.py — summary formatting and report rendering."""

import re

import pytest

from brief.models import SummaryResult
from brief.renderer import format_summary, render_report

# ---------------------------------------------------------------------------
# format_summary
# ---------------------------------------------------------------------------


def test_format_bullets_example():
    assert format_summary(["A.", "B."], "bullets") == "1. A.\n2. B."


def test_format_paragraph_joins_with_single_space():
    assert format_summary(["First one.", "Second one!"], "paragraph") == (
        "First one. Second one!"
    )


def test_format_bullets_round_trip():
    sentences = [f"Sentence number {i}." for i in range(1, 12)]
    rendered = format_summary(sentences, "bullets")
    recovered = [re.sub(r"^\d+\. ", "", line) for line in rendered.split("\n")]
    assert recovered == sentences


def test_format_empty_sequence():
    assert format_summary([], "paragraph") == ""
    assert format_summary([], "bullets") == ""


def test_format_unknown_raises():
    with pytest.raises(ValueError):
        format_summary(["A."], "table")


# ---------------------------------------------------------------------------
# render_report
# ---------------------------------------------------------------------------


def test_render_report_includes_summary_and_keywords():
    result = SummaryResult(
        summary="1. A.\n2. B.", sentences=["A.", "B."], keywords=["solar", "power"]
    )
    assert render_report(result) == "1. A.\n2. B.\n\nKeywords: solar, power"


def test_render_report_omits_empty_keywords():
    result = SummaryResult(summary="Only this.", sentences=["Only this."])
    assert render_report(result) == "Only this."
