"""
Profile analysis passes for the narrative context.

Three independent passes summarize a ParsedProfile into the facts the
prose templates branch on: career progression, technical expertise and
project impact. Each pass is a pure function returning a frozen dataclass.
"""

from dataclasses import dataclass
from typing import Iterable

from storycv.contexts.intake.profile_data_structure import Project, Role
from storycv.utils.text_processing import dedupe_preserving_order

# =============================================================================
# VOCABULARIES
# =============================================================================

# Title substrings (lowercase)
SENIOR_TITLE_TERMS = ("senior", "lead", "principal")
JUNIOR_TITLE_TERMS = ("junior", "intern")
LEADERSHIP_TITLE_TERMS = ("lead", "manager", "director")
MENTORSHIP_TERMS = ("mentor",)

MAX_DISPLAY_COMPANIES = 3
MAX_DISPLAY_TECHNOLOGIES = 5
DIVERSE_TECH_THRESHOLD = 3  # more distinct technologies than this is "diverse"

FRONTEND_SKILLS = (
    "React",
    "Angular",
    "Vue",
    "JavaScript",
    "TypeScript",
    "HTML",
    "CSS",
    "Tailwind",
    "Bootstrap",
)
BACKEND_SKILLS = (
    "Node.js",
    "Python",
    "Java",
    "C#",
    "Express",
    "Django",
    "Flask",
    "Spring",
    "API",
    "REST",
    "GraphQL",
)
DATABASE_SKILLS = ("SQL", "MongoDB", "PostgreSQL", "MySQL")
CLOUD_SKILLS = ("AWS", "Azure", "GCP", "Docker", "Kubernetes")


@dataclass(frozen=True)
class CareerProgression:
    """
    Seniority and leadership signals from role titles.

    Attributes:
        seniority: "senior", "junior" or "mid"
        has_leadership: A title names a lead, manager or director
        has_mentorship: A title names a lead or a description mentions mentoring
        company_count: Number of distinct non-empty companies
        companies: First distinct companies, in role order (at most 3)
    """

    seniority: str
    has_leadership: bool
    has_mentorship: bool
    company_count: int
    companies: tuple[str, ...]

    @property
    def is_senior(self) -> bool:
        return self.seniority == "senior"


@dataclass(frozen=True)
class TechnicalExpertise:
    """Skill buckets and the stack they point to."""

    frontend: tuple[str, ...]
    backend: tuple[str, ...]
    database: tuple[str, ...]
    cloud: tuple[str, ...]

    @property
    def is_full_stack(self) -> bool:
        return bool(self.frontend) and bool(self.backend)

    @property
    def is_cloud_native(self) -> bool:
        return bool(self.cloud)

    @property
    def primary_stack(self) -> str:
        """'frontend' if it outnumbers backend, else 'backend' if any, else 'general'."""
        if len(self.frontend) > len(self.backend):
            return "frontend"
        if self.backend:
            return "backend"
        return "general"


@dataclass(frozen=True)
class ProjectImpact:
    """Breadth of the project portfolio."""

    project_count: int
    technologies: tuple[str, ...]
    distinct_technology_count: int

    @property
    def has_multiple_projects(self) -> bool:
        return self.project_count > 1

    @property
    def diverse_tech(self) -> bool:
        return self.distinct_technology_count > DIVERSE_TECH_THRESHOLD


# =============================================================================
# ANALYSIS PASSES
# =============================================================================


def _title_has(role: Role, terms: tuple[str, ...]) -> bool:
    title = role.title.lower()
    return any(term in title for term in terms)


def analyze_career_progression(roles: Iterable[Role]) -> CareerProgression:
    """
    Classify seniority and leadership from role titles.

    Args:
        roles: Roles from a ParsedProfile

    Returns:
        CareerProgression summary
    """
    roles = tuple(roles)

    if any(_title_has(role, SENIOR_TITLE_TERMS) for role in roles):
        seniority = "senior"
    elif any(_title_has(role, JUNIOR_TITLE_TERMS) for role in roles):
        seniority = "junior"
    else:
        seniority = "mid"

    has_mentorship = any(
        _title_has(role, ("lead",))
        or any(term in role.description.lower() for term in MENTORSHIP_TERMS)
        for role in roles
    )

    companies = dedupe_preserving_order(
        (role.company.strip() for role in roles if role.company.strip()),
        key=str.casefold,
    )

    return CareerProgression(
        seniority=seniority,
        has_leadership=any(_title_has(role, LEADERSHIP_TITLE_TERMS) for role in roles),
        has_mentorship=has_mentorship,
        company_count=len(companies),
        companies=tuple(companies[:MAX_DISPLAY_COMPANIES]),
    )


def _bucket(skills: tuple[str, ...], members: tuple[str, ...]) -> tuple[str, ...]:
    folded_members = {member.casefold() for member in members}
    return tuple(skill for skill in skills if skill.casefold() in folded_members)


def analyze_technical_skills(skills: Iterable[str]) -> TechnicalExpertise:
    """
    Partition skills into frontend, backend, database and cloud buckets.

    Membership is case-insensitive; skills outside every bucket are ignored.
    """
    skills = tuple(skills)
    return TechnicalExpertise(
        frontend=_bucket(skills, FRONTEND_SKILLS),
        backend=_bucket(skills, BACKEND_SKILLS),
        database=_bucket(skills, DATABASE_SKILLS),
        cloud=_bucket(skills, CLOUD_SKILLS),
    )


def analyze_project_impact(projects: Iterable[Project]) -> ProjectImpact:
    """Count projects and the distinct technologies across their tech stacks."""
    projects = tuple(projects)
    technologies = dedupe_preserving_order(
        (technology for project in projects for technology in project.technologies),
        key=str.casefold,
    )
    return ProjectImpact(
        project_count=len(projects),
        technologies=tuple(technologies[:MAX_DISPLAY_TECHNOLOGIES]),
        distinct_technology_count=len(technologies),
    )
