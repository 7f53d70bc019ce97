"""Unit tests for StoryBundle and SoftSkill."""

import pytest
from omegaconf import OmegaConf

from storycv.contexts.narrative.story_data_structure import SoftSkill, StoryBundle

PARAGRAPHS = ["Intro paragraph.", "Experience paragraph.", "Projects paragraph.", "Vision paragraph."]
SOFT_SKILLS = [SoftSkill(skill="Leadership", reasoning="Led teams")]


@pytest.mark.unit
def test_from_paragraphs_joins_with_blank_lines():
    bundle = StoryBundle.from_paragraphs(PARAGRAPHS, "Tagline", SOFT_SKILLS)

    assert bundle.story == "\n\n".join(PARAGRAPHS)
    assert bundle.paragraphs == tuple(PARAGRAPHS)
    assert bundle.paragraph("projects") == "Projects paragraph."
    assert bundle.soft_skills == tuple(SOFT_SKILLS)


@pytest.mark.unit
def test_from_paragraphs_requires_four():
    with pytest.raises(ValueError, match="Expected 4 paragraphs, got 3"):
        StoryBundle.from_paragraphs(PARAGRAPHS[:3], "Tagline", SOFT_SKILLS)


@pytest.mark.unit
def test_to_dict_presentation_keys():
    bundle = StoryBundle.from_paragraphs(PARAGRAPHS, "Tagline", SOFT_SKILLS)

    assert bundle.to_dict() == {
        "story": bundle.story,
        "tagline": "Tagline",
        "softSkills": [{"skill": "Leadership", "reasoning": "Led teams"}],
    }
    assert StoryBundle.from_dict(bundle.to_dict()) == bundle


@pytest.mark.unit
def test_to_yaml_loads_back():
    bundle = StoryBundle.from_paragraphs(PARAGRAPHS, "Tagline", SOFT_SKILLS)
    loaded = OmegaConf.to_container(OmegaConf.create(bundle.to_yaml()))

    assert StoryBundle.from_dict(loaded) == bundle
