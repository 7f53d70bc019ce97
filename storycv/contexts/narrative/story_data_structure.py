"""
Story data structure for the Narrative context.

StoryBundle is what the synthesizer returns: a four-paragraph story, a
one-line tagline and one to three inferred soft skills.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence

from omegaconf import OmegaConf

PARAGRAPH_SEPARATOR = "\n\n"

# Paragraph order within StoryBundle.story
STORY_SECTIONS = ("introduction", "experience", "projects", "future_vision")


@dataclass(frozen=True)
class SoftSkill:
    """An inferred soft skill and the profile evidence behind it."""

    skill: str
    reasoning: str

    def to_dict(self) -> Dict[str, str]:
        return {"skill": self.skill, "reasoning": self.reasoning}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SoftSkill":
        return cls(skill=str(data["skill"]), reasoning=str(data["reasoning"]))


@dataclass(frozen=True)
class StoryBundle:
    """
    Narrative output for one profile.

    Attributes:
        story: Paragraphs in STORY_SECTIONS order, joined by a blank line
        tagline: One-sentence headline
        soft_skills: One to three inferred soft skills, in rule order
    """

    story: str
    tagline: str
    soft_skills: tuple[SoftSkill, ...]

    @classmethod
    def from_paragraphs(
        cls, paragraphs: Sequence[str], tagline: str, soft_skills: Sequence[SoftSkill]
    ) -> "StoryBundle":
        """
        Join rendered paragraphs into a bundle.

        Raises:
            ValueError: If the paragraph count does not match STORY_SECTIONS
        """
        if len(paragraphs) != len(STORY_SECTIONS):
            raise ValueError(
                f"Expected {len(STORY_SECTIONS)} paragraphs, got {len(paragraphs)}"
            )
        return cls(
            story=PARAGRAPH_SEPARATOR.join(paragraphs),
            tagline=tagline,
            soft_skills=tuple(soft_skills),
        )

    @property
    def paragraphs(self) -> tuple[str, ...]:
        return tuple(self.story.split(PARAGRAPH_SEPARATOR))

    def paragraph(self, section: str) -> str:
        """Paragraph for a named section (e.g., 'projects')."""
        return self.paragraphs[STORY_SECTIONS.index(section)]

    def to_dict(self) -> Dict[str, Any]:
        """Presentation shape: story, tagline, softSkills."""
        return {
            "story": self.story,
            "tagline": self.tagline,
            "softSkills": [soft_skill.to_dict() for soft_skill in self.soft_skills],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StoryBundle":
        return cls(
            story=str(data["story"]),
            tagline=str(data["tagline"]),
            soft_skills=tuple(SoftSkill.from_dict(item) for item in data["softSkills"]),
        )

    def to_yaml(self) -> str:
        return OmegaConf.to_yaml(OmegaConf.create(self.to_dict()))
