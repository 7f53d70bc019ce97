"""
Narrative Synthesizer: ParsedProfile -> StoryBundle.

Analyzes a profile, renders the four story paragraphs and a tagline from
Jinja2 templates, and infers soft skills. All randomness (introduction,
future vision and tagline variant choice) goes through one injected
random.Random, drawn in that order, so a seeded synthesizer is reproducible.
"""

import random
from datetime import date
from typing import Any, Callable, Dict, Optional

from storycv import settings
from storycv.contexts.intake.profile_data_structure import ParsedProfile
from storycv.contexts.narrative.analysis import (
    analyze_career_progression,
    analyze_project_impact,
    analyze_technical_skills,
)
from storycv.contexts.narrative.logger import (
    log_story_result,
    log_story_start,
    log_variant_choice,
)
from storycv.contexts.narrative.registries import NarrativeTemplateRegistry
from storycv.contexts.narrative.soft_skills import infer_soft_skills
from storycv.contexts.narrative.story_data_structure import STORY_SECTIONS, StoryBundle
from storycv.utils.timestamp import today as current_date, years_before

# Tagline variant -> years subtracted from the current year for "since <year>"
TAGLINE_YEAR_OFFSETS = {
    "bridging": 2,
    "building": 3,
    "passionate": 0,
    "transforming": 4,
}


def new_story_rng(seed: Optional[int] = None) -> random.Random:
    """
    Create the random source for one synthesis.

    Args:
        seed: Explicit seed; falls back to STORYCV_STORY_SEED, else unseeded

    Returns:
        Fresh random.Random instance
    """
    if seed is None:
        seed = settings.STORY_SEED
    return random.Random(seed)


class NarrativeSynthesizer:
    """
    Composes StoryBundles from ParsedProfiles.

    Example:
        synthesizer = NarrativeSynthesizer(rng=random.Random(7))
        bundle = synthesizer.synthesize(profile)
        print(bundle.tagline)
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        registry: Optional[NarrativeTemplateRegistry] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        """
        Args:
            rng: Random source for variant selection (defaults to new_story_rng())
            registry: Template registry (defaults to the packaged templates)
            today: Date provider for tagline years (defaults to the local date)
        """
        self.rng = rng if rng is not None else new_story_rng()
        self.registry = registry if registry is not None else NarrativeTemplateRegistry()
        self.today = today if today is not None else current_date

    def _choose_variant(self, section: str) -> str:
        variant = self.rng.choice(self.registry.list_variants(section))
        log_variant_choice(section, variant)
        return variant

    def build_context(self, profile: ParsedProfile) -> Dict[str, Any]:
        """Template context shared by every section."""
        return {
            "profile": profile,
            "career": analyze_career_progression(profile.roles),
            "tech": analyze_technical_skills(profile.skills),
            "impact": analyze_project_impact(profile.projects),
            "current_role": profile.roles[0],
            "first_project": profile.projects[0],
        }

    def synthesize(self, profile: ParsedProfile) -> StoryBundle:
        """
        Compose the story, tagline and soft skills for a profile.

        Args:
            profile: Profile satisfying the non-empty invariants

        Returns:
            StoryBundle with four paragraphs, a tagline and 1-3 soft skills

        Raises:
            NarrativeRenderError: If a template is malformed
        """
        log_story_start(profile.name, profile.target_role)
        context = self.build_context(profile)

        introduction_variant = self._choose_variant("introduction")
        future_variant = self._choose_variant("future_vision")
        experience_variant = "leadership" if context["career"].has_leadership else "individual"
        projects_variant = "portfolio" if context["impact"].has_multiple_projects else "showcase"
        log_variant_choice("experience", experience_variant)
        log_variant_choice("projects", projects_variant)

        paragraphs = [
            self.registry.render(section, variant, **context)
            for section, variant in zip(
                STORY_SECTIONS,
                (introduction_variant, experience_variant, projects_variant, future_variant),
            )
        ]

        tagline_variant = self._choose_variant("tagline")
        since_year = years_before(TAGLINE_YEAR_OFFSETS.get(tagline_variant, 0), self.today())
        tagline = self.registry.render("tagline", tagline_variant, since_year=since_year, **context)

        bundle = StoryBundle.from_paragraphs(paragraphs, tagline, infer_soft_skills(profile))
        log_story_result(bundle)
        return bundle


def synthesize(profile: ParsedProfile, rng: Optional[random.Random] = None) -> StoryBundle:
    """
    Compose a StoryBundle with a fresh synthesizer.

    Args:
        profile: Profile satisfying the non-empty invariants
        rng: Random source; defaults to a new one seeded from STORYCV_STORY_SEED (if set)

    Returns:
        StoryBundle
    """
    return NarrativeSynthesizer(rng=rng).synthesize(profile)
