"""
Soft-skill inference.

Ordered rules read a ParsedProfile and each may contribute one SoftSkill with
a short justification. Inference is deterministic: the same profile always
yields the same soft skills.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from storycv.contexts.intake.profile_data_structure import ParsedProfile, Role
from storycv.contexts.narrative.story_data_structure import SoftSkill

MAX_SOFT_SKILLS = 3

LEADERSHIP_TITLE_TERMS = ("lead", "senior", "manager")
PROBLEM_SOLVING_MIN_SKILLS = 5  # strictly more than this
ADAPTABILITY_MIN_SKILLS = 7  # strictly more than this
DETAILED_DESCRIPTION_LENGTH = 50  # strictly longer than this


@dataclass(frozen=True)
class SoftSkillRule:
    """
    One inference rule.

    Attributes:
        skill: Soft-skill name emitted when the rule applies
        applies: Predicate over the profile
        explain: Builds the reasoning text for a profile the rule applies to
    """

    skill: str
    applies: Callable[[ParsedProfile], bool]
    explain: Callable[[ParsedProfile], str]

    def evaluate(self, profile: ParsedProfile) -> Optional[SoftSkill]:
        if not self.applies(profile):
            return None
        return SoftSkill(skill=self.skill, reasoning=self.explain(profile))


def _leadership_role(profile: ParsedProfile) -> Optional[Role]:
    for role in profile.roles:
        title = role.title.lower()
        if any(term in title for term in LEADERSHIP_TITLE_TERMS):
            return role
    return None


def _top_skills(profile: ParsedProfile, count: int = 3) -> str:
    return ", ".join(profile.skills[:count])


def _explain_adaptability(profile: ParsedProfile) -> str:
    across_roles = f" across {len(profile.roles)} different roles" if len(profile.roles) > 1 else ""
    return (
        f"Experience with {len(profile.skills)} different technologies{across_roles} "
        "demonstrates strong adaptability"
    )


SOFT_SKILL_RULES = (
    SoftSkillRule(
        skill="Leadership",
        applies=lambda profile: _leadership_role(profile) is not None,
        explain=lambda profile: (
            f"Demonstrated leadership experience as {_leadership_role(profile).title}, "
            "guiding teams and driving technical decisions"
        ),
    ),
    SoftSkillRule(
        skill="Problem Solving",
        applies=lambda profile: (
            len(profile.projects) > 1 or len(profile.skills) > PROBLEM_SOLVING_MIN_SKILLS
        ),
        explain=lambda profile: (
            f"Successfully delivered "
            f"{'multiple projects' if len(profile.projects) > 1 else 'complex projects'} "
            f"using diverse technologies like {_top_skills(profile)}"
        ),
    ),
    SoftSkillRule(
        skill="Adaptability",
        applies=lambda profile: (
            len(profile.skills) > ADAPTABILITY_MIN_SKILLS or len(profile.roles) > 1
        ),
        explain=_explain_adaptability,
    ),
    SoftSkillRule(
        skill="Communication",
        applies=lambda profile: bool(profile.achievements)
        or any(len(role.description) > DETAILED_DESCRIPTION_LENGTH for role in profile.roles),
        explain=lambda profile: (
            "Documented achievements and detailed role descriptions indicate strong "
            "communication and documentation skills"
        ),
    ),
)


def default_soft_skills(profile: ParsedProfile) -> tuple[SoftSkill, ...]:
    """Soft skills reported when no rule applies."""
    return (
        SoftSkill(
            skill="Technical Excellence",
            reasoning=f"Proficiency in {_top_skills(profile)} demonstrates commitment to technical excellence",
        ),
        SoftSkill(
            skill="Continuous Learning",
            reasoning=(
                "Diverse skill set and project experience show dedication to "
                "continuous learning and growth"
            ),
        ),
    )


def infer_soft_skills(profile: ParsedProfile) -> tuple[SoftSkill, ...]:
    """
    Infer up to MAX_SOFT_SKILLS soft skills, in rule order.

    Args:
        profile: Profile satisfying the non-empty invariants

    Returns:
        One to three SoftSkill entries
    """
    inferred = [
        soft_skill
        for soft_skill in (rule.evaluate(profile) for rule in SOFT_SKILL_RULES)
        if soft_skill is not None
    ]
    if not inferred:
        inferred = list(default_soft_skills(profile))
    return tuple(inferred[:MAX_SOFT_SKILLS])
