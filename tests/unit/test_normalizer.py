"""Unit tests for résumé text normalization."""

import pytest

from storycv.contexts.intake.normalizer import normalize_unicode, preprocess_resume_text


@pytest.mark.unit
def test_preprocess_empty_and_none():
    """Missing input becomes empty text."""
    assert preprocess_resume_text("") == ""
    assert preprocess_resume_text(None) == ""


@pytest.mark.unit
def test_preprocess_line_endings():
    """CRLF and bare CR are converted to LF."""
    assert preprocess_resume_text("Jane Doe\r\nEngineer\rAcme") == "Jane Doe\nEngineer\nAcme"


@pytest.mark.unit
def test_preprocess_strips_trailing_whitespace():
    """Trailing spaces are removed from every line, blank lines survive."""
    text = "Jane Doe   \n\nSkills:\t\n"
    assert preprocess_resume_text(text) == "Jane Doe\n\nSkills:\n"


@pytest.mark.unit
def test_normalize_unicode_spaces_and_quotes():
    """Non-breaking spaces and smart quotes fold to ASCII."""
    text = "Jane Doe “Node” O’Neil"
    assert normalize_unicode(text) == 'Jane Doe "Node" O\'Neil'


@pytest.mark.unit
def test_normalize_unicode_removes_zero_width():
    """Zero-width characters and BOMs disappear."""
    assert normalize_unicode("﻿Py​thon") == "Python"


@pytest.mark.unit
def test_normalize_unicode_dashes_and_bullets():
    """Dashes become hyphens and bullet glyphs become the canonical bullet."""
    text = "2019 – 2021\n● Built things\n Shipped things"
    assert normalize_unicode(text) == "2019 - 2021\n• Built things\n• Shipped things"
