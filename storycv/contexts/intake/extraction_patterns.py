"""
Vocabulary tables and regex patterns for résumé field extraction.

Every recognizer in field_extractors.py is driven by the constants below, so
this module is the extractor's tuning surface: extend a vocabulary tuple here
rather than adding literals to the matchers.

Pattern classes follow the same convention as section_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for compiled patterns
- Helper functions that build patterns from vocabulary tuples
"""

import re
from dataclasses import dataclass

# =============================================================================
# LIMITS
# =============================================================================

MAX_ROLES = 5
MAX_PROJECTS = 4
MAX_SKILLS = 20
MAX_SECTION_SKILLS = 15
MAX_EDUCATION = 3
MAX_CERTIFICATIONS = 3
MAX_ACHIEVEMENTS = 5

# Name candidates
NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 50
NAME_MAX_WORDS = 4
NAME_SEARCH_LINES = 5  # "near the top": first N non-empty lines
NAME_BLOCKLIST = ("resume", "résumé", "curriculum")
PHONE_MIN_DIGITS = 10

# Role blocks
ROLE_HEADER_MAX_LENGTH = 120
ROLE_DESCRIPTION_MIN_LINE_LENGTH = 10  # lines must be longer than this
ROLE_DESCRIPTION_MAX_LINES = 3
ROLE_DESCRIPTION_MAX_LENGTH = 200

# Project candidates (exclusive bounds, after trimming bullets)
PROJECT_MIN_LENGTH = 15
PROJECT_MAX_LENGTH = 100
PROJECT_NAME_MAX_LENGTH = 60
PROJECT_SECTION_MIN_LINE_LENGTH = 5
PROJECT_TECH_WINDOW = 200

# Skill section tokens (inclusive bounds)
SKILL_TOKEN_MIN_LENGTH = 2
SKILL_TOKEN_MAX_LENGTH = 25

EDUCATION_MAX_LINE_LENGTH = 150

# =============================================================================
# VOCABULARIES
# =============================================================================

JOB_TITLE_TERMS = (
    "engineer",
    "developer",
    "manager",
    "analyst",
    "designer",
    "specialist",
    "consultant",
    "coordinator",
    "lead",
    "senior",
    "director",
    "architect",
    "intern",
    "associate",
)

COMPANY_SUFFIX_TERMS = (
    "inc",
    "corp",
    "llc",
    "ltd",
    "company",
    "tech",
    "systems",
    "solutions",
    "group",
    "enterprises",
)

PROJECT_VERBS = ("built", "developed", "created", "designed", "implemented")

PROJECT_NOUN_SUFFIXES = (
    "app",
    "application",
    "website",
    "system",
    "platform",
    "tool",
    "dashboard",
    "api",
)

# Technologies looked up around a project mention to build its tech stack
PROJECT_TECH_TERMS = (
    "React",
    "JavaScript",
    "Python",
    "Java",
    "Node",
    "SQL",
    "HTML",
    "CSS",
    "Angular",
    "Vue",
    "Django",
    "Flask",
    "Spring",
    "MongoDB",
    "PostgreSQL",
    "AWS",
    "Docker",
    "Git",
)

DEFAULT_TECH_STACK = "Various Technologies"

# Canonical spellings; hits are reported in this casing
SKILL_TERMS = (
    # Languages and web
    "JavaScript",
    "TypeScript",
    "React",
    "Angular",
    "Vue",
    "Node.js",
    "Python",
    "Java",
    "C++",
    "C#",
    "HTML",
    "CSS",
    "SASS",
    "SCSS",
    "Tailwind",
    "Bootstrap",
    # Data stores
    "SQL",
    "MongoDB",
    "PostgreSQL",
    "MySQL",
    # Cloud and delivery
    "AWS",
    "Azure",
    "GCP",
    "Docker",
    "Kubernetes",
    "DevOps",
    "Git",
    "GitHub",
    "GitLab",
    "Jenkins",
    "CI/CD",
    # APIs and architecture
    "REST",
    "GraphQL",
    "API",
    "Microservices",
    "Database",
    # Process and collaboration
    "Agile",
    "Scrum",
    "Kanban",
    "Jira",
    "Confluence",
    # Frameworks
    "Redux",
    "Next.js",
    "Express",
    "Django",
    "Flask",
    "Spring",
    "Laravel",
    "Ruby",
    "PHP",
    "Go",
    # Design
    "Figma",
    "Photoshop",
    "Illustrator",
    "Sketch",
    "InVision",
    "Wireframing",
    "Prototyping",
    # Data
    "Machine Learning",
    "AI",
    "Data Science",
    "Analytics",
    "Tableau",
    "Power BI",
    "Excel",
)

# Terms that double as everyday English words; only matched in their written casing
CASE_SENSITIVE_SKILL_TERMS = frozenset(
    {"AI", "Excel", "Express", "Go", "REST", "Sketch", "Spring"}
)

EDUCATION_TERMS = (
    "bachelor",
    "master",
    "phd",
    "doctorate",
    "degree",
    "university",
    "college",
    "institute",
)

CERTIFICATION_TERMS = ("certified", "certification")

ACHIEVEMENT_VERBS = (
    "achieved",
    "accomplished",
    "awarded",
    "recognized",
    "improved",
    "increased",
    "reduced",
    "led",
)

ACHIEVEMENT_NOUNS = ("award", "recognition", "achievement", "accomplishment")

# Ordered: first category with a matching skill decides the target role
TARGET_ROLE_CATEGORIES = (
    ("Frontend Developer", ("React", "Angular", "Vue", "JavaScript", "TypeScript", "HTML", "CSS")),
    ("Backend Developer", ("Python", "Java", "Node.js", "API", "Database")),
    ("DevOps Engineer", ("AWS", "Docker", "Kubernetes", "DevOps")),
    ("Data Scientist", ("Machine Learning", "Data Science", "Analytics")),
)

# =============================================================================
# PATTERN BUILDERS
# =============================================================================


def _alternation(terms: tuple) -> str:
    return "|".join(re.escape(term) for term in terms)


def build_term_pattern(term: str, case_sensitive: bool = False) -> re.Pattern:
    """
    Compile a whole-word pattern for a vocabulary term.

    Uses lookarounds instead of \\b so terms ending in symbols (C++, C#,
    Node.js) still match, and lets multi-word terms span any whitespace.

    Example:
        >>> bool(build_term_pattern("C++").search("Worked in C++ daily"))
        True
        >>> bool(build_term_pattern("Java").search("JavaScript only"))
        False
    """
    body = r"\s+".join(re.escape(word) for word in term.split())
    flags = 0 if case_sensitive else re.IGNORECASE
    return re.compile(rf"(?<![\w]){body}(?![\w])", flags)


# (canonical term, compiled pattern) in vocabulary order
SKILL_TERM_PATTERNS = tuple(
    (term, build_term_pattern(term, case_sensitive=term in CASE_SENSITIVE_SKILL_TERMS))
    for term in SKILL_TERMS
)

PROJECT_TECH_PATTERNS = tuple((term, build_term_pattern(term)) for term in PROJECT_TECH_TERMS)


# =============================================================================
# NAME PATTERNS
# =============================================================================

_NAME_WORD = r"[A-Z][a-z]+(?:['-][A-Za-z]+)?"
_NAME_PART = r"(?:[A-Z][a-z]*\.?(?:['-][A-Za-z]+)?)"
_CAPS_WORD = r"[A-Z]+(?:['-][A-Z]+)?"


@dataclass(frozen=True)
class NamePatterns:
    """
    Regex patterns for recognizing a candidate's name.

    Supports:
    - Capitalized 2-4 word line (Jane Doe, Mary-Jane O'Neil, John Q. Public)
    - All-caps header line (JANE DOE)
    - Explicit label (Name: Jane Doe)
    """

    FULL_NAME: re.Pattern = re.compile(rf"^{_NAME_WORD}(?:[ \t]+{_NAME_PART}){{1,3}}$")

    CAPS_NAME: re.Pattern = re.compile(rf"^{_CAPS_WORD}(?:[ \t]+{_CAPS_WORD}){{1,3}}$")

    # Scoped (?i:) keeps the name itself case-sensitive
    LABELED_NAME: re.Pattern = re.compile(
        rf"(?i:\b(?:full[ \t]+)?name)[ \t]*:[ \t]*({_NAME_WORD}(?:[ \t]+{_NAME_PART}){{1,3}})"
    )

    # Name followed by contact details on the same line: "Jane Doe | jane@x.com"
    NAME_SEPARATOR: re.Pattern = re.compile(r"[ \t]*(?:[|•,;]|[ \t]-[ \t])[ \t]*")


@dataclass(frozen=True)
class ContactPatterns:
    """Regex patterns for contact tokens that usually follow the name."""

    # Local part capped at 64 characters so long runs of word characters stay linear
    EMAIL: re.Pattern = re.compile(r"[\w.+-]{1,64}@[\w-]+(?:\.[\w-]+)+")

    # Digits with spaces, dots, dashes and parentheses on one line; callers also
    # require PHONE_MIN_DIGITS digits so year ranges ("2018 - 2020") are not phones
    PHONE: re.Pattern = re.compile(r"(?<!\w)\+?\(?\d[\d \t().-]{8,24}\d(?!\w)")

    URL: re.Pattern = re.compile(r"https?://|www\.", re.IGNORECASE)


# =============================================================================
# ROLE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class RolePatterns:
    """
    Regex patterns for the three lines of a work-experience block.

    Each matches a line that belongs to one slot of the block:
    title (job-title vocabulary), company (company-suffix vocabulary),
    duration (a year or "present"/"current").
    """

    # "Engineering Manager", "Internship" and plural forms count as title hits
    JOB_TITLE: re.Pattern = re.compile(
        r"\b(?:engineer(?:ing)?|developer|manager|analyst|designer|specialist|consultant"
        r"|coordinator|lead|senior|director|architect|intern(?:ship)?|associate)s?\b",
        re.IGNORECASE,
    )

    # "tech" prefixes company names like TechCorp or Technologies
    COMPANY_SUFFIX: re.Pattern = re.compile(
        r"\b(?:inc|corp(?:oration)?|llc|ltd|company|tech\w*|systems|solutions|group|enterprises)\b",
        re.IGNORECASE,
    )

    DURATION: re.Pattern = re.compile(r"\b(?:19|20)\d{2}\b|\b(?:present|current)\b", re.IGNORECASE)


# Slot assignment preference for a window of lines (title, company, duration)
# Title-company-duration first, company-first layouts second
ROLE_LINE_ORDERS = (
    (0, 1, 2),
    (1, 0, 2),
    (0, 2, 1),
    (2, 0, 1),
    (1, 2, 0),
    (2, 1, 0),
)


# =============================================================================
# PROJECT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ProjectPatterns:
    """
    Regex patterns for spotting project mentions in free text.

    Used in priority order after the labeled Projects section.
    """

    # "Built a real-time chat application..." → text after the verb, up to the sentence end
    ACTION_PHRASE: re.Pattern = re.compile(
        rf"\b(?:{_alternation(PROJECT_VERBS)})[ \t]+([^\n.]{{20,100}})", re.IGNORECASE
    )

    # "Project: Inventory tracker"
    PROJECT_LABEL: re.Pattern = re.compile(r"\bproject[ \t]*:[ \t]*([^\n]{10,80})", re.IGNORECASE)

    # "Customer Support Platform", "Expense Tracking App"
    PRODUCT_NOUN: re.Pattern = re.compile(
        rf"\b([A-Z][A-Za-z \t-]{{10,60}}?(?i:{_alternation(PROJECT_NOUN_SUFFIXES)}))\b"
    )


# =============================================================================
# SKILL PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SkillPatterns:
    """Regex patterns for tokenizing a labeled skills section."""

    # Commas, bullets, pipes, semicolons, slashes-with-spaces and separator hyphens
    TOKEN_SEPARATOR: re.Pattern = re.compile(r"[,;|•]|[ \t]+[-/][ \t]+|\n")

    # "Languages: Python, Go" → drop the "Languages:" category label
    CATEGORY_PREFIX: re.Pattern = re.compile(r"^[A-Za-z][A-Za-z &/]{1,30}:[ \t]*(?=\S)")

    YEAR: re.Pattern = re.compile(r"\d{4}")


# =============================================================================
# EDUCATION / CERTIFICATION / ACHIEVEMENT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class EducationPatterns:
    """Regex patterns for degree and institution lines."""

    # "Bachelor's", "Masters", "University" ...
    DEGREE_TERM: re.Pattern = re.compile(
        rf"\b(?:{_alternation(EDUCATION_TERMS)})(?:'s|s)?\b", re.IGNORECASE
    )

    # B.S., BS, M.Sc., Ph.D., MBA; case-sensitive so "ms" or "ba" inside prose don't count.
    # M.A. and B.A. need their dots, otherwise "Boston, MA" reads as a degree.
    DEGREE_ABBREVIATION: re.Pattern = re.compile(
        r"(?<![\w.])(?:B\.?Sc?|M\.?Sc?|M\.A|B\.A|Ph\.?D|MBA)\.?(?![\w])"
    )


@dataclass(frozen=True)
class CertificationPatterns:
    """Regex patterns for certification lines."""

    CERTIFICATION: re.Pattern = re.compile(r"\bcertifi(?:ed|cations?)\b", re.IGNORECASE)


@dataclass(frozen=True)
class AchievementPatterns:
    """Regex patterns for achievement lines (verb or noun vocabulary)."""

    ACHIEVEMENT_VERB: re.Pattern = re.compile(
        rf"\b(?:{_alternation(ACHIEVEMENT_VERBS)})\b", re.IGNORECASE
    )

    ACHIEVEMENT_NOUN: re.Pattern = re.compile(
        rf"\b(?:{_alternation(ACHIEVEMENT_NOUNS)})s?\b", re.IGNORECASE
    )


# Convenience list for iteration, in evaluation order
ACHIEVEMENT_PATTERNS = [
    AchievementPatterns.ACHIEVEMENT_VERB,
    AchievementPatterns.ACHIEVEMENT_NOUN,
]

EDUCATION_PATTERNS = [
    EducationPatterns.DEGREE_TERM,
    EducationPatterns.DEGREE_ABBREVIATION,
]
