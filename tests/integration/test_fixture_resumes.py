"""
Integration test for extraction from realistic résumé fixtures.
Tests: résumé text -> ParsedProfile matches the expected YAML next to it.
"""

from pathlib import Path

import pytest
from omegaconf import OmegaConf

from storycv.contexts.intake.profile_extractor import extract
from storycv.contexts.narrative.soft_skills import infer_soft_skills

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
RESUMES_PATH = FIXTURES_PATH / "resumes"


def load_fixture(stem: str):
    text = (RESUMES_PATH / f"{stem}.txt").read_text(encoding="utf-8")
    yaml_data = OmegaConf.load(RESUMES_PATH / f"{stem}_expected.yaml")
    return text, OmegaConf.to_container(yaml_data, resolve=True)


@pytest.mark.integration
def test_full_stack_engineer_identity():
    """Name and target role come from the header and the first role block."""
    text, expected = load_fixture("full_stack_engineer")
    profile = extract(text)

    assert profile.name == expected["name"]
    assert profile.target_role == expected["target_role"]


@pytest.mark.integration
def test_full_stack_engineer_roles():
    """Each three-line block becomes one role, in document order."""
    text, expected = load_fixture("full_stack_engineer")
    profile = extract(text)

    assert len(profile.roles) == len(expected["roles"])
    for role, expected_role in zip(profile.roles, expected["roles"]):
        assert role.title == expected_role["title"]
        assert role.company == expected_role["company"]
        assert role.duration == expected_role["duration"]
        assert role.description


@pytest.mark.integration
def test_full_stack_engineer_projects():
    text, expected = load_fixture("full_stack_engineer")
    profile = extract(text)

    assert len(profile.projects) == expected["project_count"]
    assert profile.projects[0].name.startswith(expected["first_project_prefix"])
    assert "React" in profile.projects[0].technologies


@pytest.mark.integration
def test_full_stack_engineer_skills():
    """Vocabulary and skills-section tokens merge without duplicates."""
    text, expected = load_fixture("full_stack_engineer")
    profile = extract(text)

    for skill in expected["skills_include"]:
        assert skill in profile.skills

    folded = [skill.casefold() for skill in profile.skills]
    assert len(folded) == len(set(folded))
    assert len(profile.skills) <= 20


@pytest.mark.integration
def test_full_stack_engineer_section_fields():
    text, expected = load_fixture("full_stack_engineer")
    profile = extract(text)

    assert list(profile.education) == expected["education"]
    assert list(profile.certifications) == expected["certifications"]
    assert list(profile.achievements) == expected["achievements"]


@pytest.mark.integration
def test_full_stack_engineer_soft_skills():
    text, expected = load_fixture("full_stack_engineer")
    soft_skills = infer_soft_skills(extract(text))

    assert [soft_skill.skill for soft_skill in soft_skills] == expected["soft_skills"]
