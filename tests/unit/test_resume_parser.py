"""Unit tests for résumé layout parsing."""

import pytest

from storycv.contexts.intake.resume_parser import parse_resume_text

RESUME = """Jane Doe

EXPERIENCE
Senior Engineer
Acme Corp

Skills: Python, SQL
Docker
"""


@pytest.mark.unit
def test_parse_resume_text_lines_keep_blanks():
    """Lines are stripped and blank lines are kept as empty strings."""
    layout = parse_resume_text(RESUME)
    assert layout.lines[:3] == ["Jane Doe", "", "EXPERIENCE"]


@pytest.mark.unit
def test_parse_resume_text_sections():
    """Sections run until the next heading; inline content opens the section."""
    layout = parse_resume_text(RESUME)

    assert layout.section("experience") == ["Senior Engineer", "Acme Corp"]
    assert layout.section("skills") == ["Python, SQL", "Docker"]
    assert layout.section("education") == []


@pytest.mark.unit
def test_parse_resume_text_heading_indices():
    """Heading lines are recorded by index, inline content by heading index."""
    layout = parse_resume_text(RESUME)

    assert layout.heading_indices == {2, 6}
    assert layout.inline_content == {6: "Python, SQL"}


@pytest.mark.unit
def test_content_lines_skip_bare_headings():
    """content_lines() yields inline heading content but not bare headings."""
    layout = parse_resume_text(RESUME)
    texts = [text for _, text in layout.content_lines()]

    assert "EXPERIENCE" not in texts
    assert "Python, SQL" in texts
    assert texts[0] == "Jane Doe"


@pytest.mark.unit
def test_parse_resume_text_empty():
    """Empty input yields an empty layout."""
    layout = parse_resume_text("")
    assert layout.lines == []
    assert layout.sections == {}
    assert list(layout.content_lines()) == []
