"""
Pattern matching for résumé section headings.

This module provides regex patterns and helper functions to recognize
section headings ("Experience", "Technical Skills:", "## Projects") and
categorize them into archetypes.

Pattern classes follow the convention from extraction_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from typing import Optional

# Headings longer than this are treated as content
MAX_HEADING_LENGTH = 40

# =============================================================================
# HEADING SHAPE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class HeadingPatterns:
    """
    Regex patterns for the shape of a heading line.

    Supports plain ("SKILLS"), colon ("Skills:"), markdown hash ("## Skills")
    and bold ("**Skills**") headings, plus inline headings whose content
    follows the colon ("Skills: Python, SQL").
    """

    # Markdown decoration around heading text
    DECORATION: str = r"^[#\s*_]+|[\s*_]+$"

    # Heading label followed by inline content
    INLINE_HEADING: str = r"^(?P<label>[A-Za-z][A-Za-z &/]{1,38}?)\s*:\s*(?P<rest>\S.*)$"


# =============================================================================
# SECTION ARCHETYPE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SectionArchetypePatterns:
    """
    Regex patterns for categorizing headings into archetypes.

    Patterns are matched against the whole normalized heading (fullmatch),
    so "Projects" is a heading but "Led three projects" is not. Singular
    "Project:" is deliberately absent: it labels a single project inline.
    """

    EXPERIENCE: tuple = (
        r"(?:work |professional |employment |relevant )?experience",
        r"employment(?: history)?",
        r"(?:work|career) history",
    )

    PROJECTS: tuple = (
        r"(?:personal |key |selected |academic |side |notable )?projects",
        r"portfolio",
        r"work samples?",
    )

    SKILLS: tuple = (
        r"(?:technical |core |key |professional )?skills?(?: (?:&|and) (?:tools|technologies|expertise))?",
        r"technolog(?:y|ies)",
        r"tech(?:nical)? stack",
        r"(?:core )?competenc(?:y|ies)",
        r"tools(?: (?:&|and) technologies)?",
    )

    EDUCATION: tuple = (
        r"education(?:al background)?",
        r"academic (?:background|history|qualifications)",
        r"academics",
    )

    CERTIFICATIONS: tuple = (
        r"certifications?(?: (?:&|and) (?:licenses|training))?",
        r"licenses? (?:&|and) certifications?",
    )

    ACHIEVEMENTS: tuple = (
        r"(?:key )?achievements?",
        r"awards?(?: (?:&|and) (?:honors|recognition))?",
        r"honors(?: (?:&|and) awards)?",
        r"accomplishments?",
    )

    SUMMARY: tuple = (
        r"(?:professional |career )?summary",
        r"(?:professional )?profile",
        r"(?:career )?objective",
        r"about(?: me)?",
    )

    CONTACT: tuple = (r"contact(?: (?:information|info|details))?",)


# Mapping of archetype names to their patterns (checked in this order)
ARCHETYPE_PATTERNS = {
    "experience": SectionArchetypePatterns.EXPERIENCE,
    "projects": SectionArchetypePatterns.PROJECTS,
    "skills": SectionArchetypePatterns.SKILLS,
    "education": SectionArchetypePatterns.EDUCATION,
    "certifications": SectionArchetypePatterns.CERTIFICATIONS,
    "achievements": SectionArchetypePatterns.ACHIEVEMENTS,
    "summary": SectionArchetypePatterns.SUMMARY,
    "contact": SectionArchetypePatterns.CONTACT,
}


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def normalize_heading(text: str) -> str:
    """
    Normalize heading text for matching.

    Strips markdown decoration and a trailing colon, lowercases, and
    collapses internal whitespace.

    Example:
        >>> normalize_heading("## Technical  Skills:")
        'technical skills'
    """
    normalized = re.sub(HeadingPatterns.DECORATION, "", text.strip())
    normalized = normalized.rstrip(":").strip()
    normalized = re.sub(r"\s+", " ", normalized)
    return normalized.lower()


def match_heading_archetype(text: str) -> Optional[str]:
    """
    Match heading text to an archetype.

    Args:
        text: Candidate heading line (with or without decoration)

    Returns:
        Archetype name, or None if the text is not a recognized heading
    """
    normalized = normalize_heading(text)
    if not normalized or len(normalized) > MAX_HEADING_LENGTH:
        return None

    for archetype, patterns in ARCHETYPE_PATTERNS.items():
        for pattern in patterns:
            if re.fullmatch(pattern, normalized):
                return archetype

    return None


def split_heading(line: str) -> tuple[Optional[str], str]:
    """
    Detect a heading line and separate any inline content.

    Args:
        line: One line of résumé text

    Returns:
        (archetype, remainder):
        - ("skills", "") for a bare heading like "SKILLS"
        - ("skills", "Python, SQL") for "Skills: Python, SQL"
        - (None, line) when the line is not a heading

    Example:
        >>> split_heading("**Skills:** Python, SQL")
        ('skills', 'Python, SQL')
    """
    archetype = match_heading_archetype(line)
    if archetype:
        return archetype, ""

    # Bold labels ("**Skills:** ...") lose their asterisks before the inline check
    undecorated = line.strip().replace("**", "")
    match = re.match(HeadingPatterns.INLINE_HEADING, undecorated)
    if match:
        archetype = match_heading_archetype(match.group("label"))
        if archetype:
            return archetype, match.group("rest").strip()

    return None, line
