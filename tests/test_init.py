"""Tests for the public API re-exported from the brief package."""

import brief


def test_public_contract_exports():
    assert brief.format_summary(["A.", "B."], "bullets") == "1. A.\n2. B."
    assert callable(brief.extract_keywords)
    assert callable(brief.extractive_summarize)


def test_climate_example_through_package(climate_text):
    assert brief.extractive_summarize(climate_text, 1) == [
        "Climate change affects agriculture."
    ]


def test_version():
    assert brief.__version__ == "0.1.0"
