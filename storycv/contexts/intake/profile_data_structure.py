"""
Profile data structure for the Intake context.

Provides ParsedProfile, the structured record extracted from résumé text,
together with its Role and Project value objects. Instances are immutable;
every collection is a tuple.

Factory methods:
    ParsedProfile.from_text(text) - Run the extractor on raw résumé text
    ParsedProfile.from_dict(data) - Validate and build from a plain mapping
    ParsedProfile.from_yaml(path) - Load a stored (possibly hand-edited) profile
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from omegaconf import OmegaConf

from storycv.contexts.intake.exceptions import InvalidProfileStructureError
from storycv.contexts.intake.fallbacks import apply_fallbacks
from storycv.utils.text_processing import dedupe_preserving_order

REQUIRED_PROFILE_KEYS = ("name", "roles", "projects", "skills", "education", "target_role")
OPTIONAL_PROFILE_KEYS = ("certifications", "achievements")

ROLE_KEYS = ("title", "company", "duration", "description")
PROJECT_KEYS = ("name", "tech_stack", "summary")


@dataclass(frozen=True)
class Role:
    """One work-experience entry."""

    title: str
    company: str
    duration: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        return {key: getattr(self, key) for key in ROLE_KEYS}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Role":
        return cls(**{key: str(data[key]) for key in ROLE_KEYS})


@dataclass(frozen=True)
class Project:
    """
    One project entry.

    Attributes:
        name: Short display name (word-truncated)
        tech_stack: Comma-joined technologies, e.g. "React, Python"
        summary: Full project description as written
    """

    name: str
    tech_stack: str
    summary: str

    @property
    def technologies(self) -> tuple[str, ...]:
        """Individual technologies from tech_stack."""
        return tuple(token.strip() for token in self.tech_stack.split(",") if token.strip())

    def to_dict(self) -> Dict[str, str]:
        return {key: getattr(self, key) for key in PROJECT_KEYS}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Project":
        return cls(**{key: str(data[key]) for key in PROJECT_KEYS})


# =============================================================================
# VALIDATION HELPERS
# =============================================================================


def _require_mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise InvalidProfileStructureError(
            f"Expected a mapping, got {type(value).__name__}", field_path=path
        )
    return value


def _require_scalar(value: Any, path: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple, Mapping)):
        raise InvalidProfileStructureError(
            f"Expected a string, got {type(value).__name__}", field_path=path
        )
    return str(value)


def _require_list(value: Any, path: str) -> list:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise InvalidProfileStructureError(
            f"Expected a list, got {type(value).__name__}", field_path=path
        )
    return list(value)


def _normalize_records(value: Any, path: str, keys: tuple[str, ...]) -> list[Dict[str, str]]:
    """Validate a list of role/project mappings and coerce their fields to str."""
    records = []
    for index, item in enumerate(_require_list(value, path)):
        item_path = f"{path}[{index}]"
        item = _require_mapping(item, item_path)
        missing = [key for key in keys if key not in item]
        if missing:
            raise InvalidProfileStructureError(
                f"Missing keys: {', '.join(missing)}", field_path=item_path
            )
        records.append({key: _require_scalar(item[key], f"{item_path}.{key}") for key in keys})
    return records


def _normalize_strings(value: Any, path: str) -> list[str]:
    strings = [
        _require_scalar(item, f"{path}[{index}]").strip()
        for index, item in enumerate(_require_list(value, path))
    ]
    return [item for item in strings if item]


@dataclass(frozen=True)
class ParsedProfile:
    """
    Structured résumé data.

    Invariants (guaranteed by the fallback policy):
    - roles, projects, skills and education are never empty
    - skills are unique case-insensitively, in first-seen order
    - certifications and achievements may be empty
    """

    name: str
    roles: tuple[Role, ...]
    projects: tuple[Project, ...]
    skills: tuple[str, ...]
    education: tuple[str, ...]
    target_role: str
    certifications: tuple[str, ...] = ()
    achievements: tuple[str, ...] = ()

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_text(cls, text: Optional[str]) -> "ParsedProfile":
        """
        Extract a profile from raw résumé text.

        Equivalent to profile_extractor.extract(text).
        """
        # Imported here: the extractor builds ParsedProfile instances
        from storycv.contexts.intake.profile_extractor import extract

        return extract(text)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ParsedProfile":
        """
        Validate a plain mapping and build a profile.

        Scalars are coerced to str, empty entries are dropped, skills and
        achievements are deduplicated, and the fallback policy is re-applied
        so the non-empty invariants hold for hand-edited input too.

        Args:
            data: Mapping in the to_dict() shape

        Returns:
            ParsedProfile instance

        Raises:
            InvalidProfileStructureError: If keys are missing or have the wrong type
        """
        data = _require_mapping(data, "profile")
        missing = [key for key in REQUIRED_PROFILE_KEYS if key not in data]
        if missing:
            raise InvalidProfileStructureError(f"Missing required keys: {', '.join(missing)}")

        draft = {
            "name": _require_scalar(data["name"], "name").strip(),
            "target_role": _require_scalar(data["target_role"], "target_role").strip(),
            "roles": _normalize_records(data["roles"], "roles", ROLE_KEYS),
            "projects": _normalize_records(data["projects"], "projects", PROJECT_KEYS),
            "skills": dedupe_preserving_order(
                _normalize_strings(data["skills"], "skills"), key=str.casefold
            ),
            "education": _normalize_strings(data["education"], "education"),
        }
        for key in OPTIONAL_PROFILE_KEYS:
            draft[key] = dedupe_preserving_order(
                _normalize_strings(data.get(key), key), key=str.casefold
            )

        return cls._from_resolved(apply_fallbacks(draft))

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "ParsedProfile":
        """
        Load a profile stored with save_yaml().

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidProfileStructureError: If the YAML does not hold a profile mapping
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Profile YAML not found: {yaml_path}")

        yaml_data = OmegaConf.load(yaml_path)
        yaml_dict = OmegaConf.to_container(yaml_data, resolve=True)
        return cls.from_dict(yaml_dict)

    @classmethod
    def _from_resolved(cls, resolved: Mapping[str, Any]) -> "ParsedProfile":
        """Build from a draft that already went through apply_fallbacks()."""
        return cls(
            name=resolved["name"],
            roles=tuple(Role.from_dict(role) for role in resolved["roles"]),
            projects=tuple(Project.from_dict(project) for project in resolved["projects"]),
            skills=tuple(resolved["skills"]),
            education=tuple(resolved["education"]),
            target_role=resolved["target_role"],
            certifications=tuple(resolved["certifications"]),
            achievements=tuple(resolved["achievements"]),
        )

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    @property
    def current_role(self) -> Role:
        """Most recent role (first listed)."""
        return self.roles[0]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "roles": [role.to_dict() for role in self.roles],
            "projects": [project.to_dict() for project in self.projects],
            "skills": list(self.skills),
            "education": list(self.education),
            "certifications": list(self.certifications),
            "achievements": list(self.achievements),
            "target_role": self.target_role,
        }

    def to_yaml(self) -> str:
        """Serialize to YAML text."""
        return OmegaConf.to_yaml(OmegaConf.create(self.to_dict()))

    def save_yaml(self, yaml_path: Path) -> Path:
        """Write the profile to a YAML file, creating parent directories."""
        yaml_path = Path(yaml_path)
        yaml_path.parent.mkdir(parents=True, exist_ok=True)
        yaml_path.write_text(self.to_yaml(), encoding="utf-8")
        return yaml_path
