"""Unit tests for extract(): raw résumé text to ParsedProfile."""

import time
from pathlib import Path

import pytest

from storycv.contexts.intake.fallbacks import FALLBACK_SKILLS
from storycv.contexts.intake.profile_data_structure import ParsedProfile
from storycv.contexts.intake.profile_extractor import extract, extract_draft
from storycv.contexts.intake.resume_parser import parse_resume_text

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
JANE_DOE_TEXT = (FIXTURES_PATH / "resumes" / "jane_doe.txt").read_text(encoding="utf-8")


@pytest.mark.unit
def test_extract_short_resume():
    """Name, role block, vocabulary skills and fallback project/education."""
    profile = extract(JANE_DOE_TEXT)

    assert profile.name == "Jane Doe"
    assert profile.target_role == "Senior Software Engineer"

    role = profile.roles[0]
    assert role.title == "Senior Software Engineer"
    assert role.company == "Acme Corp"
    assert role.duration == "2020 - Present"
    assert role.description == "React, Python, AWS"

    assert profile.skills == ("React", "Python", "AWS")
    assert len(profile.projects) == 1
    assert profile.projects[0].tech_stack == "React, Python, AWS"
    assert len(profile.education) == 1


@pytest.mark.unit
@pytest.mark.parametrize("raw_text", ["", None, "   \n\n\t"])
def test_extract_empty_input(raw_text):
    """Blank input yields a fully defaulted profile."""
    profile = extract(raw_text)

    assert profile.name == "Professional"
    assert profile.target_role == "Software Professional"
    assert len(profile.roles) == 1
    assert profile.roles[0].title == "Software Professional"
    assert profile.skills == FALLBACK_SKILLS
    assert profile.projects[0].tech_stack == "Modern Technologies"
    assert profile.certifications == ()
    assert profile.achievements == ()


@pytest.mark.unit
def test_extract_is_deterministic():
    assert extract(JANE_DOE_TEXT) == extract(JANE_DOE_TEXT)


@pytest.mark.unit
def test_from_text_matches_extract():
    assert ParsedProfile.from_text(JANE_DOE_TEXT) == extract(JANE_DOE_TEXT)


@pytest.mark.unit
def test_no_duplicate_skills():
    text = "Skills: react, React, REACT, python\nPython developer with React"
    folded = [skill.casefold() for skill in extract(text).skills]
    assert len(folded) == len(set(folded))


@pytest.mark.unit
def test_extract_draft_has_no_fallbacks():
    draft = extract_draft(parse_resume_text(""))

    assert draft["name"] is None
    assert draft["target_role"] is None
    assert draft["roles"] == []
    assert draft["skills"] == []


@pytest.mark.unit
def test_extract_survives_stored_round_trip(tmp_path):
    """A saved profile loads back unchanged."""
    profile = extract(JANE_DOE_TEXT)
    assert ParsedProfile.from_yaml(profile.save_yaml(tmp_path / "jane.yaml")) == profile


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw_text",
    ["A" * 50000, "a" * 50000 + "@", "1 " * 25000 + "x"],
    ids=["letters", "unterminated-email", "digit-run"],
)
def test_extract_long_single_line(raw_text):
    """Extraction of a long unbroken line finishes quickly."""
    start_time = time.time()
    profile = extract(raw_text)
    elapsed = time.time() - start_time

    assert elapsed < 5
    assert isinstance(profile, ParsedProfile)
