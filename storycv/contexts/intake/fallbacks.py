"""
Fallback values for résumé extraction.

Extraction never fails: a field whose heuristics found nothing is filled
from the policy below in a single post-processing step. Consumers can
therefore index roles[0], projects[0], skills[0] and education[0] safely.

The policy works on plain draft dicts (the shape of ParsedProfile.to_dict())
so it applies equally to freshly extracted drafts and to profiles loaded
back from YAML.
"""

from typing import Any, Callable, Dict, List

FALLBACK_NAME = "Professional"
FALLBACK_TARGET_ROLE = "Software Professional"

FALLBACK_COMPANY = "Previous Company"
FALLBACK_DURATION = "2022 - Present"
FALLBACK_ROLE_DESCRIPTION = (
    "Professional experience in software development and technology solutions"
)

FALLBACK_PROJECT_NAME = "Professional Development Project"
FALLBACK_PROJECT_TECH_STACK = "Modern Technologies"
FALLBACK_PROJECT_SUMMARY = (
    "Developed and implemented technology solutions using industry best practices"
)

FALLBACK_SKILLS = ("Problem Solving", "Team Collaboration", "Technical Skills")
FALLBACK_EDUCATION = ("Professional Education Background",)

# Fields that may legitimately stay empty
OPTIONAL_LIST_FIELDS = ("certifications", "achievements")


def is_empty(value: Any) -> bool:
    """
    Emptiness predicate shared by every field.

    None, blank strings and empty collections are empty.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return len(value) == 0


def _default_target_role(resolved: Dict[str, Any]) -> str:
    roles = resolved.get("roles") or []
    if roles and not is_empty(roles[0].get("title")):
        return roles[0]["title"]
    return FALLBACK_TARGET_ROLE


def _default_roles(resolved: Dict[str, Any]) -> List[Dict[str, str]]:
    return [
        {
            "title": resolved["target_role"],
            "company": FALLBACK_COMPANY,
            "duration": FALLBACK_DURATION,
            "description": FALLBACK_ROLE_DESCRIPTION,
        }
    ]


def _default_projects(resolved: Dict[str, Any]) -> List[Dict[str, str]]:
    # Reads skills before their own fallback runs: sentinel skills are not technologies
    skills = resolved.get("skills") or []
    return [
        {
            "name": FALLBACK_PROJECT_NAME,
            "tech_stack": ", ".join(skills[:3]) or FALLBACK_PROJECT_TECH_STACK,
            "summary": FALLBACK_PROJECT_SUMMARY,
        }
    ]


# Field -> default factory. Order matters: each factory sees the fields
# resolved before it (the target role reads the natural roles, fallback roles
# need the target role, and projects need the natural skills).
FIELD_DEFAULTS: Dict[str, Callable[[Dict[str, Any]], Any]] = {
    "name": lambda resolved: FALLBACK_NAME,
    "target_role": _default_target_role,
    "roles": _default_roles,
    "projects": _default_projects,
    "skills": lambda resolved: list(FALLBACK_SKILLS),
    "education": lambda resolved: list(FALLBACK_EDUCATION),
}


def missing_fields(draft: Dict[str, Any]) -> List[str]:
    """Names of required fields that the fallback policy would fill."""
    return [name for name in FIELD_DEFAULTS if is_empty(draft.get(name))]


def apply_fallbacks(draft: Dict[str, Any]) -> Dict[str, Any]:
    """
    Substitute declared defaults for every empty required field.

    Args:
        draft: Profile draft as a plain dict (not modified)

    Returns:
        New dict where name, target_role, roles, projects, skills and
        education are non-empty and optional list fields are lists
    """
    resolved = dict(draft)

    for name, default_factory in FIELD_DEFAULTS.items():
        if is_empty(resolved.get(name)):
            resolved[name] = default_factory(resolved)

    for name in OPTIONAL_LIST_FIELDS:
        if resolved.get(name) is None:
            resolved[name] = []

    return resolved
