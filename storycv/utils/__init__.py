"""
Shared utilities for StoryCV.

Common functionality used across contexts:
- Text processing
- Dates and timestamps
- Logger configuration
"""

from storycv.utils.text_processing import (
    as_clause,
    as_sentence,
    collapse_whitespace,
    dedupe_preserving_order,
    strip_bullet,
    truncate_at_word,
)
from storycv.utils.timestamp import now, today, years_before

__all__ = [
    "as_clause",
    "as_sentence",
    "collapse_whitespace",
    "dedupe_preserving_order",
    "strip_bullet",
    "truncate_at_word",
    "now",
    "today",
    "years_before",
]
