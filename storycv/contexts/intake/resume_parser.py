"""
Résumé layout parsing for the Intake context.

Splits normalized résumé text into lines and labeled sections. This module
has no knowledge of ParsedProfile: it returns a ResumeLayout that the field
extractors read from.

Pattern follows the intake pipeline: normalizer cleans text, parser produces
layout, field extractors consume it.
"""

from dataclasses import dataclass, field
from typing import Iterator

from storycv.contexts.intake.normalizer import preprocess_resume_text
from storycv.contexts.intake.section_patterns import split_heading


@dataclass
class ResumeLayout:
    """
    Line and section view of a résumé.

    Attributes:
        text: Normalized full text
        lines: Stripped lines, blank lines kept as "" so block boundaries survive
        sections: Archetype -> body lines (bare headings excluded, inline content kept)
        heading_indices: Indices of lines recognized as headings
        inline_content: Heading line index -> content that followed the label
    """

    text: str
    lines: list[str]
    sections: dict[str, list[str]] = field(default_factory=dict)
    heading_indices: set[int] = field(default_factory=set)
    inline_content: dict[int, str] = field(default_factory=dict)

    def section(self, archetype: str) -> list[str]:
        """Non-blank body lines of a labeled section (empty if absent)."""
        return [line for line in self.sections.get(archetype, []) if line]

    def content_lines(self) -> Iterator[tuple[int, str]]:
        """
        Yield (index, text) for every non-blank line that carries content.

        Bare headings are skipped; inline headings yield only their content.
        """
        for index, line in enumerate(self.lines):
            if index in self.heading_indices:
                inline = self.inline_content.get(index)
                if inline:
                    yield index, inline
                continue
            if line:
                yield index, line

    def non_blank_lines(self) -> list[str]:
        """All non-blank lines, headings included."""
        return [line for line in self.lines if line]


def extract_sections(
    lines: list[str],
) -> tuple[dict[str, list[str]], set[int], dict[int, str]]:
    """
    Group lines under the most recent recognized heading.

    A section runs until the next heading. Text before the first heading
    belongs to no section. Repeated headings of the same archetype extend
    the existing section.

    Args:
        lines: Stripped résumé lines

    Returns:
        Tuple of (sections dict, heading line indices, inline heading content)
    """
    sections: dict[str, list[str]] = {}
    heading_indices: set[int] = set()
    inline_content: dict[int, str] = {}
    current_section = None

    for index, line in enumerate(lines):
        archetype, remainder = split_heading(line) if line else (None, line)

        if archetype:
            heading_indices.add(index)
            current_section = archetype
            sections.setdefault(archetype, [])
            if remainder:
                inline_content[index] = remainder
                sections[archetype].append(remainder)
        elif current_section is not None:
            sections[current_section].append(line)

    return sections, heading_indices, inline_content


def parse_resume_text(text: str) -> ResumeLayout:
    """
    Parse raw résumé text into a ResumeLayout.

    Args:
        text: Raw résumé text (may be empty)

    Returns:
        ResumeLayout over the normalized text
    """
    normalized_text = preprocess_resume_text(text)
    lines = [line.strip() for line in normalized_text.split("\n")] if normalized_text else []

    sections, heading_indices, inline_content = extract_sections(lines)

    return ResumeLayout(
        text=normalized_text,
        lines=lines,
        sections=sections,
        heading_indices=heading_indices,
        inline_content=inline_content,
    )
