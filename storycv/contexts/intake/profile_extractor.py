"""
Résumé Extractor: raw résumé text -> ParsedProfile.

Runs the matcher units from field_extractors.py over a parsed layout,
collects their natural results into a draft, and hands the draft to
ParsedProfile.from_dict(), which applies the fallback policy once.

extract() never raises for string input and has no randomness.
"""

from typing import Any, Dict, Optional

from storycv.contexts.intake.fallbacks import missing_fields
from storycv.contexts.intake.field_extractors import (
    extract_achievements,
    extract_certifications,
    extract_education,
    extract_name,
    extract_projects,
    extract_roles,
    extract_skills,
    infer_target_role,
)
from storycv.contexts.intake.logger import _log_debug, log_extraction_summary
from storycv.contexts.intake.profile_data_structure import ParsedProfile
from storycv.contexts.intake.resume_parser import ResumeLayout, parse_resume_text


def extract_draft(layout: ResumeLayout) -> Dict[str, Any]:
    """
    Collect natural extraction results (no fallbacks applied).

    Args:
        layout: Parsed résumé layout

    Returns:
        Draft dict in the ParsedProfile.to_dict() shape; fields may be empty
    """
    roles = extract_roles(layout)
    skills = extract_skills(layout)

    return {
        "name": extract_name(layout),
        "roles": roles,
        "projects": extract_projects(layout),
        "skills": skills,
        "education": extract_education(layout),
        "certifications": extract_certifications(layout),
        "achievements": extract_achievements(layout),
        "target_role": infer_target_role(roles, skills),
    }


def extract(raw_text: Optional[str]) -> ParsedProfile:
    """
    Extract a structured profile from raw résumé text.

    Args:
        raw_text: Résumé text already extracted from PDF/DOCX (None is treated as empty)

    Returns:
        ParsedProfile whose roles, projects, skills and education are non-empty

    Example:
        >>> profile = extract("Jane Doe\\nSenior Software Engineer\\nAcme Corp\\n2020 - Present")
        >>> profile.name, profile.roles[0].title
        ('Jane Doe', 'Senior Software Engineer')
    """
    layout = parse_resume_text(raw_text or "")
    _log_debug(
        f"Parsed {len(layout.non_blank_lines())} lines; "
        f"sections: {', '.join(sorted(layout.sections)) or 'none'}"
    )

    draft = extract_draft(layout)
    defaulted = missing_fields(draft)

    profile = ParsedProfile.from_dict(draft)
    log_extraction_summary(profile, defaulted)
    return profile
