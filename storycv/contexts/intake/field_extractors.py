"""
Heuristic field extraction from a parsed résumé layout.

Each public extract_* function is an independent matcher unit: it reads a
ResumeLayout and returns the natural (un-defaulted) result for one field.
Empty results are expected; the fallback policy in fallbacks.py fills them.

All vocabularies, limits and regexes live in extraction_patterns.py.
"""

import re
from typing import Optional

from storycv.contexts.intake.extraction_patterns import (
    ACHIEVEMENT_PATTERNS,
    DEFAULT_TECH_STACK,
    EDUCATION_MAX_LINE_LENGTH,
    EDUCATION_PATTERNS,
    MAX_ACHIEVEMENTS,
    MAX_CERTIFICATIONS,
    MAX_EDUCATION,
    MAX_PROJECTS,
    MAX_ROLES,
    MAX_SECTION_SKILLS,
    MAX_SKILLS,
    NAME_BLOCKLIST,
    NAME_MAX_LENGTH,
    NAME_MAX_WORDS,
    NAME_MIN_LENGTH,
    NAME_SEARCH_LINES,
    PHONE_MIN_DIGITS,
    PROJECT_MAX_LENGTH,
    PROJECT_MIN_LENGTH,
    PROJECT_NAME_MAX_LENGTH,
    PROJECT_SECTION_MIN_LINE_LENGTH,
    PROJECT_TECH_PATTERNS,
    PROJECT_TECH_WINDOW,
    ROLE_DESCRIPTION_MAX_LENGTH,
    ROLE_DESCRIPTION_MAX_LINES,
    ROLE_DESCRIPTION_MIN_LINE_LENGTH,
    ROLE_HEADER_MAX_LENGTH,
    ROLE_LINE_ORDERS,
    SKILL_TERM_PATTERNS,
    SKILL_TERMS,
    SKILL_TOKEN_MAX_LENGTH,
    SKILL_TOKEN_MIN_LENGTH,
    TARGET_ROLE_CATEGORIES,
    CertificationPatterns,
    ContactPatterns,
    NamePatterns,
    ProjectPatterns,
    RolePatterns,
    SkillPatterns,
)
from storycv.contexts.intake.resume_parser import ResumeLayout
from storycv.utils.text_processing import (
    collapse_whitespace,
    dedupe_preserving_order,
    strip_bullet,
    truncate_at_word,
)

# Canonical casing lookup for skill tokens
_CANONICAL_SKILLS = {term.casefold(): term for term in SKILL_TERMS}


# =============================================================================
# NAME
# =============================================================================


def _is_valid_name(candidate: str) -> bool:
    """Length, word count and vocabulary checks shared by every name matcher."""
    if not NAME_MIN_LENGTH <= len(candidate) <= NAME_MAX_LENGTH:
        return False
    if len(candidate.split()) > NAME_MAX_WORDS:
        return False
    if any(char.isdigit() for char in candidate):
        return False

    folded = candidate.casefold()
    if any(blocked in folded for blocked in NAME_BLOCKLIST):
        return False

    # "Senior Software Engineer" and "Acme Systems" are shaped like names
    if RolePatterns.JOB_TITLE.search(candidate) or RolePatterns.COMPANY_SUFFIX.search(candidate):
        return False

    return True


def _match_name_shape(text: str) -> Optional[str]:
    """Return the name written in text if it is a capitalized or all-caps name."""
    text = text.strip()
    if NamePatterns.FULL_NAME.match(text):
        candidate = text
    elif NamePatterns.CAPS_NAME.match(text):
        candidate = text.title()
    else:
        return None
    return candidate if _is_valid_name(candidate) else None


def _find_contact(line: str) -> Optional[int]:
    """Start offset of the first email or phone token in line, if any."""
    offsets = []

    email = ContactPatterns.EMAIL.search(line) if "@" in line else None
    if email:
        offsets.append(email.start())

    for phone in ContactPatterns.PHONE.finditer(line):
        if sum(char.isdigit() for char in phone.group()) >= PHONE_MIN_DIGITS:
            offsets.append(phone.start())
            break

    return min(offsets) if offsets else None


def _name_from_header(layout: ResumeLayout) -> Optional[str]:
    """A standalone name line among the first NAME_SEARCH_LINES non-empty lines."""
    top_indices = [index for index, line in enumerate(layout.lines) if line][:NAME_SEARCH_LINES]
    for index in top_indices:
        line = layout.lines[index]
        if index in layout.heading_indices:
            continue
        if "@" in line or ContactPatterns.URL.search(line):
            continue
        if any(char.isdigit() for char in line):
            continue
        candidate = _match_name_shape(strip_bullet(line))
        if candidate:
            return candidate
    return None


def _name_before_contact(lines: list[str]) -> Optional[str]:
    """A name directly preceding an email or phone token."""
    for position, line in enumerate(lines):
        offset = _find_contact(line)
        if offset is None:
            continue

        head_parts = [part for part in NamePatterns.NAME_SEPARATOR.split(line[:offset]) if part.strip()]
        if head_parts:
            candidate = _match_name_shape(head_parts[-1])
            if candidate:
                return candidate
        if position > 0:
            candidate = _match_name_shape(lines[position - 1])
            if candidate:
                return candidate
    return None


def _name_from_label(text: str) -> Optional[str]:
    """An explicit "Name: ..." label anywhere in the text."""
    match = NamePatterns.LABELED_NAME.search(text)
    if match and _is_valid_name(match.group(1)):
        return match.group(1)
    return None


def extract_name(layout: ResumeLayout) -> Optional[str]:
    """
    Extract the candidate's name (first match wins).

    Tries, in order: a name-shaped line among the first few non-empty lines,
    a name immediately before an email/phone token, an explicit "Name:" label.

    Args:
        layout: Parsed résumé layout

    Returns:
        Name, or None when no matcher fires

    Example:
        >>> extract_name(parse_resume_text("Jane Doe\\nSenior Engineer"))
        'Jane Doe'
    """
    return (
        _name_from_header(layout)
        or _name_before_contact(layout.non_blank_lines())
        or _name_from_label(layout.text)
    )


# =============================================================================
# ROLES
# =============================================================================


def _assign_role_lines(window: list[str]) -> Optional[tuple[str, str, str]]:
    """
    Decide which of three lines is title, company and duration.

    Tries ROLE_LINE_ORDERS in preference order. An assignment whose title line
    has no company-suffix hit beats one whose title line does.

    Returns:
        (title, company, duration) or None if no assignment fits
    """
    fallback = None

    for title_at, company_at, duration_at in ROLE_LINE_ORDERS:
        title, company, duration = window[title_at], window[company_at], window[duration_at]
        if not RolePatterns.DURATION.search(duration):
            continue
        if not RolePatterns.JOB_TITLE.search(title):
            continue
        if not RolePatterns.COMPANY_SUFFIX.search(company):
            continue

        if not RolePatterns.COMPANY_SUFFIX.search(title):
            return title, company, duration
        if fallback is None:
            fallback = (title, company, duration)

    return fallback


def _is_role_header_line(layout: ResumeLayout, index: int) -> bool:
    line = layout.lines[index]
    return bool(line) and index not in layout.heading_indices and len(line) <= ROLE_HEADER_MAX_LENGTH


def _find_role_windows(layout: ResumeLayout) -> list[tuple[int, tuple[str, str, str]]]:
    """Non-overlapping (start index, assignment) pairs, in document order."""
    windows = []
    index = 0
    last_start = len(layout.lines) - 3

    while index <= last_start and len(windows) < MAX_ROLES:
        span = range(index, index + 3)
        if all(_is_role_header_line(layout, i) for i in span):
            assignment = _assign_role_lines([strip_bullet(layout.lines[i]) for i in span])
            if assignment:
                windows.append((index, assignment))
                index += 3
                continue
        index += 1

    return windows


def _describe_role(layout: ResumeLayout, start: int, stop: int) -> str:
    """
    Collect up to three descriptive lines after a role header.

    Stops at the first blank line, heading or the next role header (stop).
    """
    description_lines = []
    for index in range(start, stop):
        line = layout.lines[index]
        if not line or index in layout.heading_indices:
            break
        line = strip_bullet(line)
        if len(line) > ROLE_DESCRIPTION_MIN_LINE_LENGTH:
            description_lines.append(line)
        if len(description_lines) == ROLE_DESCRIPTION_MAX_LINES:
            break

    description = " ".join(description_lines)
    return description[:ROLE_DESCRIPTION_MAX_LENGTH].rstrip()


def extract_roles(layout: ResumeLayout) -> list[dict[str, str]]:
    """
    Extract work-experience roles from three-line header windows.

    A window qualifies when its lines jointly hold a job-title hit, a
    company-suffix hit and a duration (year or "present"/"current").

    Args:
        layout: Parsed résumé layout

    Returns:
        Up to MAX_ROLES role dicts with title, company, duration, description
    """
    windows = _find_role_windows(layout)
    roles = []

    for position, (start, (title, company, duration)) in enumerate(windows):
        next_start = windows[position + 1][0] if position + 1 < len(windows) else len(layout.lines)
        description = _describe_role(layout, start + 3, next_start)
        roles.append(
            {
                "title": title,
                "company": company,
                "duration": duration,
                "description": description or f"Professional experience as {title}",
            }
        )

    return roles


# =============================================================================
# PROJECTS
# =============================================================================


def _project_candidates(layout: ResumeLayout) -> list[str]:
    """Raw project mentions in priority order (section, verbs, labels, nouns)."""
    candidates = [
        line
        for line in layout.section("projects")
        if len(line) > PROJECT_SECTION_MIN_LINE_LENGTH
    ]
    candidates.extend(match.group(1) for match in ProjectPatterns.ACTION_PHRASE.finditer(layout.text))
    candidates.extend(match.group(1) for match in ProjectPatterns.PROJECT_LABEL.finditer(layout.text))
    candidates.extend(match.group(1) for match in ProjectPatterns.PRODUCT_NOUN.finditer(layout.text))
    return candidates


def _project_tech_stack(text: str, candidate: str) -> str:
    """Technologies mentioned within PROJECT_TECH_WINDOW chars of the candidate."""
    position = text.find(candidate)
    if position < 0:
        position = text.casefold().find(candidate.casefold())
    if position < 0:
        window = candidate
    else:
        window = text[max(0, position - PROJECT_TECH_WINDOW) : position + len(candidate) + PROJECT_TECH_WINDOW]

    found = [term for term, pattern in PROJECT_TECH_PATTERNS if pattern.search(window)]
    return ", ".join(found) or DEFAULT_TECH_STACK


def extract_projects(layout: ResumeLayout) -> list[dict[str, str]]:
    """
    Extract projects from the Projects section and project-like phrases.

    Candidates are trimmed of bullet markers and kept when their length is
    strictly between PROJECT_MIN_LENGTH and PROJECT_MAX_LENGTH. A candidate
    already contained in a kept one is a duplicate.

    Args:
        layout: Parsed résumé layout

    Returns:
        Up to MAX_PROJECTS project dicts with name, tech_stack, summary
    """
    kept: list[str] = []

    for raw_candidate in _project_candidates(layout):
        candidate = collapse_whitespace(strip_bullet(raw_candidate)).rstrip(" ,;:")
        if not PROJECT_MIN_LENGTH < len(candidate) < PROJECT_MAX_LENGTH:
            continue
        folded = candidate.casefold()
        if any(folded in existing.casefold() for existing in kept):
            continue
        kept.append(candidate)
        if len(kept) == MAX_PROJECTS:
            break

    return [
        {
            "name": truncate_at_word(candidate, PROJECT_NAME_MAX_LENGTH),
            "tech_stack": _project_tech_stack(layout.text, candidate),
            "summary": candidate,
        }
        for candidate in kept
    ]


# =============================================================================
# SKILLS
# =============================================================================


def _canonical_skill(token: str) -> str:
    """Vocabulary spelling when known, title case for all-lowercase tokens."""
    canonical = _CANONICAL_SKILLS.get(token.casefold())
    if canonical:
        return canonical
    if token.islower():
        return token.title()
    return token


def _section_skill_tokens(lines: list[str]) -> list[str]:
    """Tokenize a labeled skills section."""
    tokens = []
    for line in lines:
        line = SkillPatterns.CATEGORY_PREFIX.sub("", strip_bullet(line), count=1)
        for token in SkillPatterns.TOKEN_SEPARATOR.split(line):
            token = strip_bullet(token).rstrip(".:")
            if not SKILL_TOKEN_MIN_LENGTH <= len(token) <= SKILL_TOKEN_MAX_LENGTH:
                continue
            if SkillPatterns.YEAR.search(token):
                continue
            tokens.append(_canonical_skill(token))
            if len(tokens) == MAX_SECTION_SKILLS:
                return tokens
    return tokens


def extract_skills(layout: ResumeLayout) -> list[str]:
    """
    Extract skills from the vocabulary scan and the labeled skills section.

    Vocabulary hits come first (canonical casing), then section tokens.
    Duplicates are dropped case-insensitively, keeping the first spelling.

    Args:
        layout: Parsed résumé layout

    Returns:
        Up to MAX_SKILLS skill names
    """
    vocabulary_hits = [term for term, pattern in SKILL_TERM_PATTERNS if pattern.search(layout.text)]
    section_tokens = _section_skill_tokens(layout.section("skills"))

    skills = dedupe_preserving_order(vocabulary_hits + section_tokens, key=str.casefold)
    return skills[:MAX_SKILLS]


# =============================================================================
# EDUCATION / CERTIFICATIONS / ACHIEVEMENTS
# =============================================================================


def _collect_lines(
    layout: ResumeLayout,
    patterns: list[re.Pattern],
    section: Optional[str],
    limit: int,
    max_length: Optional[int] = None,
) -> list[str]:
    """
    Content lines matching any pattern or belonging to a labeled section.

    Lines keep document order, lose bullet markers and are deduplicated.
    """
    section_lines = set(layout.section(section)) if section else set()
    collected = []

    for _, line in layout.content_lines():
        in_section = line in section_lines
        text = strip_bullet(line)
        if not text:
            continue
        if max_length is not None and len(text) > max_length:
            continue
        if in_section or any(pattern.search(text) for pattern in patterns):
            collected.append(text)

    return dedupe_preserving_order(collected, key=str.casefold)[:limit]


def extract_education(layout: ResumeLayout) -> list[str]:
    """Degree and institution lines plus Education section lines."""
    return _collect_lines(
        layout,
        EDUCATION_PATTERNS,
        section="education",
        limit=MAX_EDUCATION,
        max_length=EDUCATION_MAX_LINE_LENGTH,
    )


def extract_certifications(layout: ResumeLayout) -> list[str]:
    """Lines mentioning a certification plus Certifications section lines."""
    return _collect_lines(
        layout,
        [CertificationPatterns.CERTIFICATION],
        section="certifications",
        limit=MAX_CERTIFICATIONS,
    )


def extract_achievements(layout: ResumeLayout) -> list[str]:
    """Lines carrying an achievement verb or noun."""
    return _collect_lines(layout, ACHIEVEMENT_PATTERNS, section=None, limit=MAX_ACHIEVEMENTS)


# =============================================================================
# TARGET ROLE
# =============================================================================


def infer_target_role(roles: list[dict[str, str]], skills: list[str]) -> Optional[str]:
    """
    Infer the role the candidate is aiming for.

    Uses the first extracted role title; otherwise the first skill category
    (frontend, backend, cloud, data) with a matching skill.

    Args:
        roles: Naturally extracted roles (before fallbacks)
        skills: Naturally extracted skills (before fallbacks)

    Returns:
        Target role, or None when neither source gives a signal
    """
    if roles:
        return roles[0]["title"]

    folded_skills = {skill.casefold() for skill in skills}
    for category, terms in TARGET_ROLE_CATEGORIES:
        if any(term.casefold() in folded_skills for term in terms):
            return category

    return None
