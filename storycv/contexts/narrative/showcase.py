"""
Showcase extras built from a profile and its story.

- compose_voiceover(): a short first-person script for a spoken introduction
- summarize_projects(): per-project highlight bullets for a portfolio view

Both are deterministic.
"""

from dataclasses import dataclass
from typing import Optional

from storycv.contexts.intake.fallbacks import FALLBACK_COMPANY, FALLBACK_NAME
from storycv.contexts.intake.profile_data_structure import ParsedProfile, Project
from storycv.contexts.narrative.registries import NarrativeTemplateRegistry
from storycv.contexts.narrative.story_data_structure import StoryBundle
from storycv.utils.text_processing import as_sentence

VOICEOVER_SECTION = "voiceover"
VOICEOVER_VARIANT = "script"
VOICEOVER_TOP_SKILLS = 3

HIGHLIGHT_BULLET = "•"


@dataclass(frozen=True)
class ProjectHighlight:
    """A project name with two or three highlight bullets."""

    name: str
    bullets: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(f"{HIGHLIGHT_BULLET} {bullet}" for bullet in self.bullets)


def _indefinite_article(phrase: str) -> str:
    return "an" if phrase and phrase[0].lower() in "aeiou" else "a"


def compose_voiceover(
    profile: ParsedProfile,
    bundle: StoryBundle,
    registry: Optional[NarrativeTemplateRegistry] = None,
) -> str:
    """
    Compose a short spoken introduction.

    Args:
        profile: Profile the story was synthesized from
        bundle: The profile's StoryBundle (its first soft skill is featured)
        registry: Template registry (defaults to the packaged templates)

    Returns:
        Single-paragraph voiceover script
    """
    registry = registry if registry is not None else NarrativeTemplateRegistry()
    current_role = profile.roles[0]

    return registry.render(
        VOICEOVER_SECTION,
        VOICEOVER_VARIANT,
        profile=profile,
        current_role=current_role,
        first_project=profile.projects[0],
        known_name=profile.name != FALLBACK_NAME,
        known_company=current_role.company != FALLBACK_COMPANY,
        article=_indefinite_article(profile.target_role),
        highlight=profile.achievements[0] if profile.achievements else None,
        top_soft_skill=bundle.soft_skills[0],
        top_skills=profile.skills[:VOICEOVER_TOP_SKILLS],
    )


def _highlight(project: Project, skills: tuple[str, ...]) -> ProjectHighlight:
    bullets = [as_sentence(project.summary), f"Built with {project.tech_stack}."]

    folded_skills = {skill.casefold() for skill in skills}
    overlap = [tech for tech in project.technologies if tech.casefold() in folded_skills]
    if overlap:
        bullets.append(f"Applied core skills in {', '.join(overlap)}.")

    return ProjectHighlight(name=project.name, bullets=tuple(bullets))


def summarize_projects(profile: ParsedProfile) -> tuple[ProjectHighlight, ...]:
    """
    Highlight bullets for every project.

    Each highlight has the summary, the tech stack and, when some of the
    project's technologies are also listed skills, a skill-overlap bullet.
    """
    return tuple(_highlight(project, profile.skills) for project in profile.projects)
