"""
Text processing utilities shared by the intake and narrative contexts.
"""

import re
from typing import Callable, Hashable, Iterable, List, TypeVar

T = TypeVar("T")

# Leading list markers: bullets, dash/asterisk bullets followed by a space, "1." / "2)"
BULLET_PREFIX = re.compile(r"^\s*(?:[•*·▪●◦‣]+\s*|[-–]\s+|\d{1,2}[.)]\s+)")

_WHITESPACE = re.compile(r"\s+")


def strip_bullet(line: str) -> str:
    """
    Remove a leading list marker and surrounding whitespace.

    Example:
        >>> strip_bullet("  • Built a dashboard")
        'Built a dashboard'
        >>> strip_bullet("2020 - Present")
        '2020 - Present'
    """
    return BULLET_PREFIX.sub("", line, count=1).strip()


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run (including newlines) to a single space."""
    return _WHITESPACE.sub(" ", text).strip()


def dedupe_preserving_order(
    items: Iterable[T], key: Callable[[T], Hashable] = lambda item: item
) -> List[T]:
    """
    Drop duplicates while keeping first-seen order.

    Args:
        items: Items to deduplicate
        key: Identity function for comparison (e.g., str.casefold)

    Returns:
        List with the first occurrence of each key
    """
    seen = set()
    result = []
    for item in items:
        marker = key(item)
        if marker in seen:
            continue
        seen.add(marker)
        result.append(item)
    return result


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def truncate_at_word(text: str, max_len: int) -> str:
    """
    Cut text to at most max_len characters without splitting a word.

    Falls back to a hard cut when the first word alone is longer than max_len.
    """
    if len(text) <= max_len:
        return text
    cut = text[:max_len]
    if text[max_len] != " " and " " in cut:
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip(" ,;:-")


def as_sentence(text: str) -> str:
    """
    Ensure text ends with terminal punctuation.

    Example:
        >>> as_sentence("Shipped the billing API")
        'Shipped the billing API.'
        >>> as_sentence("Done!")
        'Done!'
    """
    text = text.strip()
    if not text or text[-1] in ".!?":
        return text
    return text.rstrip(",;:") + "."


def as_clause(text: str) -> str:
    """
    Prepare a sentence for use mid-sentence.

    Drops terminal punctuation and lowercases the first letter unless the
    first word is an acronym or proper-cased compound (API, GitHub).

    Example:
        >>> as_clause("Built a chat app.")
        'built a chat app'
        >>> as_clause("REST API gateway")
        'REST API gateway'
    """
    text = text.strip().rstrip(".!?;:, ")
    first_word = text.split(" ", 1)[0]
    if first_word[:1].isupper() and first_word[1:] == first_word[1:].lower():
        return text[:1].lower() + text[1:]
    return text
