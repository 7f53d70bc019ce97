"""
Résumé-to-story pipeline.

Composes the two contexts: raw text -> extract() -> ParsedProfile ->
NarrativeSynthesizer -> StoryBundle.
"""

import time
from dataclasses import dataclass
from typing import Optional

from storycv.contexts.intake.logger import _log_info as _log_intake_info
from storycv.contexts.intake.profile_data_structure import ParsedProfile
from storycv.contexts.intake.profile_extractor import extract
from storycv.contexts.narrative.logger import _log_success as _log_story_success
from storycv.contexts.narrative.story_data_structure import StoryBundle
from storycv.contexts.narrative.synthesizer import NarrativeSynthesizer


@dataclass(frozen=True)
class StoryResult:
    """
    Result of one pipeline run.

    Attributes:
        profile: Extracted profile
        bundle: Story synthesized from the profile
        elapsed_time: Wall-clock seconds for extraction plus synthesis
    """

    profile: ParsedProfile
    bundle: StoryBundle
    elapsed_time: float


def build_story(
    raw_text: Optional[str], synthesizer: Optional[NarrativeSynthesizer] = None
) -> StoryResult:
    """
    Extract a profile from résumé text and synthesize its story.

    Args:
        raw_text: Résumé text (already extracted from PDF/DOCX)
        synthesizer: Synthesizer to use; pass one with a seeded rng for reproducible output

    Returns:
        StoryResult with both records and the elapsed time

    Example:
        result = build_story(Path("resume.txt").read_text(), NarrativeSynthesizer(rng=random.Random(7)))
        print(result.bundle.story)
    """
    synthesizer = synthesizer if synthesizer is not None else NarrativeSynthesizer()
    start_time = time.time()

    profile = extract(raw_text)
    _log_intake_info(
        f"Extracted {profile.name}: {len(profile.roles)} roles, "
        f"{len(profile.projects)} projects, {len(profile.skills)} skills"
    )

    bundle = synthesizer.synthesize(profile)
    elapsed_time = time.time() - start_time
    _log_story_success(f"Story ready for {profile.name} ({elapsed_time:.2f}s)")

    return StoryResult(profile=profile, bundle=bundle, elapsed_time=elapsed_time)
